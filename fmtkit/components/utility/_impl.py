"""
Generic object helpers - cloning, emptiness checks, form-state predicates,
debounce and throttle.
"""

from __future__ import annotations

import copy
import logging
import threading
import time
from collections.abc import Callable, Iterable, Mapping, Sized
from typing import Any, TypeVar

from fmtkit.components.arrays._impl import get_field

logger = logging.getLogger(__name__)

T = TypeVar("T")


def deep_clone(obj: T) -> T:
    """Recursive copy; the clone shares no mutable state with obj."""
    return copy.deepcopy(obj)


def is_empty(value: Any) -> bool:
    """
    True for None and for sized values with no items ("", [], {}, set()).

    Numbers, booleans and other objects are never empty.
    """
    if value is None:
        return True
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def disable_on_empty_values(values: Mapping[str, Any] | Any, fields: Iterable[str]) -> bool:
    """
    True if any of fields is empty or falsy in values.

    Example:
        >>> disable_on_empty_values({"name": "John", "email": ""}, ["name", "email"])
        True
    """
    return not all(get_field(values, f) for f in fields)


def disable_on_equal_values(
    current: Mapping[str, Any] | Any,
    fields: Iterable[str],
    reference: Mapping[str, Any] | Any,
) -> bool:
    """True if every one of fields holds the same value in current and reference."""
    return all(get_field(current, f) == get_field(reference, f) for f in fields)


# --- Timing Wrappers ---


class Debounced:
    """
    Callable that delays func until wait seconds pass without another call.

    Every call cancels the pending invocation and schedules a new one with
    the latest arguments. Invocations run on a timer thread.
    """

    def __init__(self, func: Callable[..., Any], wait: float) -> None:
        self._func = func
        self._wait = wait
        self._timer: threading.Timer | None = None
        self._lock = threading.Lock()

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = threading.Timer(self._wait, self._func, args=args, kwargs=kwargs)
            self._timer.daemon = True
            self._timer.start()

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None and self._timer.is_alive()

    def cancel(self) -> None:
        """Drop the pending invocation, if any."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None


class Throttled:
    """
    Callable that runs func at most once per limit seconds.

    The first call runs immediately; calls inside the cooldown are dropped
    (no trailing call).
    """

    def __init__(
        self,
        func: Callable[..., Any],
        limit: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._func = func
        self._limit = limit
        self._clock = clock
        self._last_call: float | None = None
        self._lock = threading.Lock()

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        with self._lock:
            now = self._clock()
            if self._last_call is not None and now - self._last_call < self._limit:
                logger.debug("Throttled call to %r dropped", self._func)
                return
            self._last_call = now
        self._func(*args, **kwargs)


def debounce(func: Callable[..., Any], wait: float) -> Debounced:
    """Wrap func so it fires once, wait seconds after the last call."""
    return Debounced(func, wait)


def throttle(
    func: Callable[..., Any],
    limit: float,
    *,
    clock: Callable[[], float] = time.monotonic,
) -> Throttled:
    """Wrap func so it fires at most once per limit seconds."""
    return Throttled(func, limit, clock)
