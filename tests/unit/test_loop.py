"""Tests for cycle timing and the fetch, compare, send ordering."""

import logging

import pytest
from conftest import RecordingSink, ScriptedProvider
from fixtures import make_bulb_state

from bulbosc.core import LoopContext, cycle_period, initial_context, remaining_sleep, run_cycle, run_forever
from bulbosc.exceptions import MalformedResponseError

RED = make_bulb_state(on=True, hue=0.0, brightness=1.0)
BLUE = make_bulb_state(on=True, hue=0.66, brightness=1.0)
OFF = make_bulb_state(on=False, hue=0.0, brightness=0.0)


class FakeClock:
    """Returns the given readings in order, repeating the last one."""

    def __init__(self, *readings: float) -> None:
        self.readings = list(readings)

    def __call__(self) -> float:
        if len(self.readings) > 1:
            return self.readings.pop(0)
        return self.readings[0]


class SleepRecorder:
    def __init__(self) -> None:
        self.calls: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.mark.parametrize(("rate", "expected"), [(1, 1.0), (4, 0.25), (10, 0.1), (60, 1 / 60)])
def test_cycle_period_is_reciprocal_of_rate(rate: int, expected: float):
    assert cycle_period(rate) == pytest.approx(expected)


def test_remaining_sleep():
    assert remaining_sleep(0.1, 0.02) == pytest.approx(0.08)
    assert remaining_sleep(0.1, 0.1) == 0.0
    assert remaining_sleep(0.1, 0.3) < 0


def test_initial_context_sends_first_state_unconditionally(sink: RecordingSink):
    provider = ScriptedProvider([OFF])

    context = initial_context(provider, sink)

    assert context == LoopContext(previous=OFF, current=OFF)
    assert len(sink.messages) == 3
    assert provider.fetch_count == 1


def test_fast_cycle_sleeps_for_the_remainder(sink: RecordingSink):
    sleep = SleepRecorder()
    period = 0.1

    run_cycle(LoopContext(RED, RED), ScriptedProvider([RED]), sink, period, clock=FakeClock(5.0, 5.02), sleep=sleep)

    assert sleep.calls == [period - (5.02 - 5.0)]
    assert sleep.calls[0] == pytest.approx(0.08)


def test_slow_cycle_does_not_sleep(sink: RecordingSink):
    sleep = SleepRecorder()

    run_cycle(LoopContext(RED, BLUE), ScriptedProvider([BLUE]), sink, 0.1, clock=FakeClock(5.0, 5.25), sleep=sleep)

    assert sleep.calls == []


def test_cycle_exactly_at_period_does_not_sleep(sink: RecordingSink):
    sleep = SleepRecorder()

    run_cycle(LoopContext(RED, RED), ScriptedProvider([RED]), sink, 0.5, clock=FakeClock(1.0, 1.5), sleep=sleep)

    assert sleep.calls == []


def test_cycle_rolls_state_and_fetches_after_sleeping(sink: RecordingSink):
    events: list[str] = []

    class OrderedProvider(ScriptedProvider):
        def fetch_bulb_state(self):
            events.append("fetch")
            return super().fetch_bulb_state()

    def sleep(seconds: float) -> None:
        events.append("sleep")

    context = run_cycle(
        LoopContext(RED, RED), OrderedProvider([BLUE]), sink, 1.0, clock=FakeClock(0.0, 0.1), sleep=sleep
    )

    assert events == ["sleep", "fetch"]
    assert context == LoopContext(previous=RED, current=BLUE)


def test_fetched_change_is_sent_on_the_next_cycle(sink: RecordingSink):
    """A new state is only compared, and sent, on the cycle after it was fetched."""
    provider = ScriptedProvider([BLUE, BLUE])
    clock = FakeClock(0.0)

    context = run_cycle(LoopContext(RED, RED), provider, sink, 0.0, clock=clock, sleep=SleepRecorder())
    assert sink.messages == []
    assert context == LoopContext(previous=RED, current=BLUE)

    context = run_cycle(context, provider, sink, 0.0, clock=clock, sleep=SleepRecorder())
    assert sink.messages == [
        ("/avatar/parameters/on", True),
        ("/avatar/parameters/Color", 0.66),
        ("/avatar/parameters/brightness", 1.0),
    ]
    assert context == LoopContext(previous=BLUE, current=BLUE)


def test_run_forever_sends_first_state_then_only_changes(sink: RecordingSink):
    error = MalformedResponseError("bad body")
    provider = ScriptedProvider([RED, RED, RED, BLUE, BLUE], error=error)
    sleep = SleepRecorder()

    with pytest.raises(MalformedResponseError):
        run_forever(provider, sink, 0.5, clock=FakeClock(0.0), sleep=sleep)

    sent_hues = [value for address, value in sink.messages if address == "/avatar/parameters/Color"]
    assert sent_hues == [RED.hue, BLUE.hue]
    assert provider.fetch_count == 6
    assert sleep.calls == [0.5] * 5


def test_run_forever_stops_on_first_fetch_failure(sink: RecordingSink):
    provider = ScriptedProvider([], error=MalformedResponseError("bad body"))

    with pytest.raises(MalformedResponseError):
        run_forever(provider, sink, 0.5, clock=FakeClock(0.0), sleep=SleepRecorder())

    assert sink.messages == []


def test_cycle_logs_elapsed_time_at_info(sink: RecordingSink, caplog: pytest.LogCaptureFixture):
    caplog.set_level(logging.INFO, logger="bulbosc")

    clock = FakeClock(5.0, 5.5)

    run_cycle(LoopContext(RED, RED), ScriptedProvider([RED]), sink, 0.1, clock=clock, sleep=SleepRecorder())

    records = [r for r in caplog.records if r.getMessage().startswith("Cycle took")]
    assert [r.levelno for r in records] == [logging.INFO]
    assert records[0].getMessage() == "Cycle took 0.500000s"
