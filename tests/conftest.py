from datetime import UTC, datetime
from pathlib import Path

import pytest

from fmtkit.adapters import FrozenClock, RulesAdapter
from fmtkit.rules import load_rules


@pytest.fixture
def frozen_now() -> datetime:
    # Friday 2026-06-12 12:00 UTC
    return datetime(2026, 6, 12, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def frozen_clock(frozen_now: datetime) -> FrozenClock:
    return FrozenClock(frozen_now)


@pytest.fixture
def rules_path() -> Path:
    """The rules file shipped at the project root."""
    return Path(__file__).resolve().parent.parent / "rules.yaml"


@pytest.fixture
def rules(rules_path: Path) -> RulesAdapter:
    return RulesAdapter(load_rules(rules_path))
