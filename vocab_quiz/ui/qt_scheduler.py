"""QTimer-backed scheduler used by the desktop application."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import QElapsedTimer, QObject, QTimer


class QtScheduledTask:
    """Wraps a QTimer so the engine can cancel it without knowing about Qt."""

    def __init__(self, timer: QTimer) -> None:
        self._timer: QTimer | None = timer

    def cancel(self) -> None:
        if self._timer is None:
            return
        self._timer.stop()
        self._timer.deleteLater()
        self._timer = None


class QtScheduler:
    """Runs callbacks on the Qt event loop."""

    def __init__(self, parent: QObject | None = None) -> None:
        self._parent = parent
        self._clock = QElapsedTimer()
        self._clock.start()

    @property
    def now_ms(self) -> int:
        return self._clock.elapsed()

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> QtScheduledTask:
        return self._start(delay_ms, callback, single_shot=True)

    def call_every(self, interval_ms: int, callback: Callable[[], None]) -> QtScheduledTask:
        return self._start(interval_ms, callback, single_shot=False)

    def _start(self, interval_ms: int, callback: Callable[[], None], single_shot: bool) -> QtScheduledTask:
        timer = QTimer(self._parent)
        timer.setSingleShot(single_shot)
        timer.setInterval(max(0, interval_ms))
        timer.timeout.connect(callback)
        timer.start()
        return QtScheduledTask(timer)
