import pytest

from smarterfiring.scheduler import Scheduler


def test_call_later_runs_once_when_due() -> None:
    scheduler = Scheduler()
    calls = []
    scheduler.call_later(300, lambda: calls.append(scheduler.current_time))

    scheduler.update(299)
    assert calls == []
    scheduler.update(300)
    scheduler.update(1000)
    assert calls == [300]
    assert len(scheduler) == 0


def test_call_every_catches_up_missed_intervals() -> None:
    scheduler = Scheduler(current_time=500)
    calls = []
    scheduler.call_every(1000, lambda: calls.append(scheduler.current_time))

    scheduler.update(3600)

    assert calls == [1500, 2500, 3500]
    assert scheduler.current_time == 3600


def test_cancelled_task_never_runs() -> None:
    scheduler = Scheduler()
    calls = []
    task = scheduler.call_every(100, lambda: calls.append(1))
    task.cancel()
    task.cancel()

    scheduler.update(1000)

    assert calls == []
    assert len(scheduler) == 0


def test_repeating_task_can_cancel_itself() -> None:
    scheduler = Scheduler()
    calls = []

    def tick() -> None:
        calls.append(scheduler.current_time)
        if len(calls) == 2:
            task.cancel()

    task = scheduler.call_every(100, tick)
    scheduler.update(1000)

    assert calls == [100, 200]


def test_tasks_run_in_trigger_order() -> None:
    scheduler = Scheduler()
    order = []
    scheduler.call_later(300, lambda: order.append("late"))
    scheduler.call_later(100, lambda: order.append("early"))
    scheduler.call_later(100, lambda: order.append("early-second"))

    scheduler.update(500)

    assert order == ["early", "early-second", "late"]


def test_callback_scheduling_measures_from_its_own_trigger_time() -> None:
    scheduler = Scheduler()
    calls = []
    scheduler.call_later(100, lambda: scheduler.call_later(100, lambda: calls.append(scheduler.current_time)))

    scheduler.update(1000)

    assert calls == [200]


def test_clock_never_moves_backwards() -> None:
    scheduler = Scheduler(current_time=1000)
    scheduler.update(500)
    assert scheduler.current_time == 1000


def test_interval_must_be_positive() -> None:
    with pytest.raises(ValueError):
        Scheduler().call_every(0, lambda: None)
