from .bridge import Bridge
from .loop import LoopContext, cycle_period, initial_context, remaining_sleep, run_cycle, run_forever

__all__ = [
    "Bridge",
    "LoopContext",
    "cycle_period",
    "initial_context",
    "remaining_sleep",
    "run_cycle",
    "run_forever",
]
