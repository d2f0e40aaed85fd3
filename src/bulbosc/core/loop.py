"""The poll, compare and send loop.

Each cycle first decides whether to send the state fetched on the previous cycle, then waits out the rest
of the cycle period, and only then fetches the next state. A freshly fetched state is therefore sent one
cycle after it was read.
"""

import time
import typing
from collections.abc import Callable
from dataclasses import dataclass
from logging import getLogger

from bulbosc.dispatch import maybe_dispatch, update_avatar

if typing.TYPE_CHECKING:
    from bulbosc.models import BulbState
    from bulbosc.providers import BulbStateProvider
    from bulbosc.types import OscSink

LOGGER = getLogger(__name__)


@dataclass(frozen=True)
class LoopContext:
    """The pair of states compared by one cycle."""

    previous: "BulbState"
    current: "BulbState"


def cycle_period(max_updates_per_second: int) -> float:
    """Return the minimum duration of one cycle, in seconds.

    `max_updates_per_second` must be positive.
    """
    return 1 / max_updates_per_second


def remaining_sleep(period: float, elapsed: float) -> float:
    """Return how long to sleep to fill out the cycle. Zero or negative means don't sleep."""
    return period - elapsed


def initial_context(provider: "BulbStateProvider", sink: "OscSink") -> LoopContext:
    """Fetch the first state and send it unconditionally."""
    state = provider.fetch_bulb_state()
    update_avatar(sink, state)
    return LoopContext(previous=state, current=state)


def run_cycle(
    context: LoopContext,
    provider: "BulbStateProvider",
    sink: "OscSink",
    period: float,
    *,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
) -> LoopContext:
    """Run one cycle and return the context for the next one.

    Raises:
        FetchError: If the next state could not be fetched.
    """
    start = clock()

    maybe_dispatch(context.previous, context.current, sink)

    remaining = remaining_sleep(period, clock() - start)
    if remaining > 0:
        sleep(remaining)

    LOGGER.info("Cycle took %.6fs", clock() - start)

    previous = context.current
    current = provider.fetch_bulb_state()
    return LoopContext(previous=previous, current=current)


def run_forever(
    provider: "BulbStateProvider",
    sink: "OscSink",
    period: float,
    *,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
) -> typing.NoReturn:
    """Send the first state, then run cycles until the process is stopped or a fetch fails.

    Raises:
        FetchError: If a state could not be fetched.
    """
    context = initial_context(provider, sink)
    while True:
        context = run_cycle(context, provider, sink, period, clock=clock, sleep=sleep)
