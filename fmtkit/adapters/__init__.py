from fmtkit.adapters.clock import FrozenClock, SystemClock
from fmtkit.adapters.rules import RulesAdapter

__all__ = ["FrozenClock", "RulesAdapter", "SystemClock"]
