from buraq.minion import Minion


def _recording_minion():
    events = []
    minion = Minion(
        on_result=lambda r: events.append(("result", r)),
        on_progress=lambda p: events.append(("progress", p)),
        on_finished=lambda: events.append(("finished",)),
    )
    return minion, events


def test_successful_task():
    minion, events = _recording_minion()
    assert minion.do_work(lambda: 42) == 42
    assert events == [("progress", 0), ("result", 42), ("finished",)]


def test_failing_task_reports_error_message():
    minion, events = _recording_minion()

    def task():
        raise ValueError("boom")

    assert minion.do_work(task) == "Error: boom"
    assert events[-2:] == [("result", "Error: boom"), ("finished",)]


def test_missing_task():
    minion, events = _recording_minion()
    assert minion.do_work(None) is None
    assert events == [("result", None), ("finished",)]


def test_without_callbacks():
    assert Minion().do_work(lambda: "done") == "done"