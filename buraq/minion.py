"""Runs a task and reports progress, result and completion through callbacks."""

from __future__ import annotations

from typing import Any, Callable


class Minion:
    """Executes a task, turning any exception into an error message result."""

    def __init__(
        self,
        on_result: Callable[[Any], None] | None = None,
        on_progress: Callable[[int], None] | None = None,
        on_finished: Callable[[], None] | None = None,
    ) -> None:
        self._on_result = on_result or (lambda result: None)
        self._on_progress = on_progress or (lambda percentage: None)
        self._on_finished = on_finished or (lambda: None)

    def do_work(self, task: Callable[[], Any] | None) -> Any:
        """Run the task, report its result and completion, and return the result."""
        if task is None:
            self._on_result(None)
            self._on_finished()
            return None
        try:
            self._on_progress(0)
            result = task()
        except Exception as exc:
            result = f"Error: {exc}"
        self._on_result(result)
        self._on_finished()
        return result