"""A popup showing a spinner and per-fetch progress while data loads, or the errors."""

from __future__ import annotations

import textwrap
import threading
import time
from dataclasses import dataclass
from typing import Callable

from dynmig.fetch_progress import FetchProgress, FetchState, FetchStatus
from dynmig.terminal import (
    Canvas,
    Color,
    Constraint,
    Direction,
    Rect,
    Style,
    centered_rect,
    split_area,
)

FRAMES = ("⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏")
FRAME_DURATION = 0.1

_NORMAL = Style(fg=Color.WHITE)
_HIGHLIGHTED = Style(fg=Color.YELLOW, bold=True)
_INFO = Style(fg=Color.CYAN)
_ERROR = Style(fg=Color.RED)
_SUCCESS = Style(fg=Color.GREEN)
_DISABLED = Style(fg=Color.DARK_GRAY)

_PROGRESS_LABELS = (
    ("Source entity fields", "source_fields"),
    ("Target entity fields", "target_fields"),
    ("Source entity views", "source_views"),
    ("Target entity views", "target_views"),
    ("Source entity forms", "source_forms"),
    ("Target entity forms", "target_forms"),
    ("Example records", "examples"),
)


@dataclass(frozen=True)
class LoadingState:
    """Either still fetching, or failed with a list of error messages."""

    failed: bool = False
    errors: tuple[str, ...] = ()

    @classmethod
    def fetching(cls) -> LoadingState:
        return cls()

    @classmethod
    def failure(cls, errors: list[str]) -> LoadingState:
        return cls(True, tuple(errors))


def _centered_lines(
    canvas: Canvas, area: Rect, text: str, style: Style, wrap: bool = True
) -> None:
    if not area.width or not area.height:
        return
    lines = textwrap.wrap(text, area.width) if wrap else [text[: area.width]]
    for row, line in enumerate(lines[: area.height]):
        canvas.draw_text(area.x, area.y + row, line.center(area.width).rstrip(), style)


class LoadingModal:
    """Shows fetch progress read from a shared FetchProgress guarded by a lock."""

    def __init__(
        self,
        message: str,
        progress: FetchProgress,
        lock: threading.Lock | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.message = message
        self.progress = progress
        self.lock = lock or threading.Lock()
        self.state = LoadingState.fetching()
        self.current_frame = 0
        self._clock = clock
        self._last_update = clock()

    def set_state(self, state: LoadingState) -> None:
        self.state = state

    def update(self) -> None:
        """Advance the spinner when a frame's time has passed."""
        now = self._clock()
        if now - self._last_update >= FRAME_DURATION:
            self.current_frame = (self.current_frame + 1) % len(FRAMES)
            self._last_update = now

    def render(self, canvas: Canvas, area: Rect) -> None:
        popup = centered_rect(70, 50, area)
        canvas.clear(popup)
        title = "❌ Failed to fetch data" if self.state.failed else "Fetching Data"
        canvas.draw_box(popup, title, _NORMAL)
        inner = popup.inner(1, 1)
        if self.state.failed:
            self._render_errors(canvas, inner, self.state.errors)
        else:
            self._render_fetching(canvas, inner)

    def _symbol(self, status: FetchStatus) -> tuple[str, Style]:
        if status.state is FetchState.IN_PROGRESS:
            return FRAMES[self.current_frame], _HIGHLIGHTED
        if status.state is FetchState.COMPLETED:
            return "✓", _SUCCESS
        if status.state is FetchState.FAILED:
            return "❌", _ERROR
        return "◯", _DISABLED

    def _render_fetching(self, canvas: Canvas, area: Rect) -> None:
        spinner, message, progress_area = split_area(
            area,
            [Constraint.length(2), Constraint.length(3), Constraint.min(4)],
            Direction.VERTICAL,
        )
        _centered_lines(
            canvas, spinner, f"{FRAMES[self.current_frame]} Loading...", _HIGHLIGHTED, wrap=False
        )
        _centered_lines(canvas, message, self.message, _INFO)

        with self.lock:
            statuses = [(label, getattr(self.progress, name)) for label, name in _PROGRESS_LABELS]
        if not progress_area.width:
            return
        for row, (label, status) in enumerate(statuses[: progress_area.height]):
            symbol, style = self._symbol(status)
            text = f" {symbol} {label}"[: progress_area.width]
            canvas.draw_text(progress_area.x, progress_area.y + row, text, style)

    def _render_errors(self, canvas: Canvas, area: Rect, errors: tuple[str, ...]) -> None:
        heading, error_area, instructions = split_area(
            area,
            [Constraint.length(3), Constraint.min(4), Constraint.length(2)],
            Direction.VERTICAL,
        )
        _centered_lines(
            canvas, heading, "The following errors occurred while fetching data:", _ERROR
        )
        if error_area.width:
            for row, error in enumerate(errors[: error_area.height]):
                canvas.draw_text(
                    error_area.x, error_area.y + row, f"• {error}"[: error_area.width], _ERROR
                )
        _centered_lines(
            canvas, instructions, "Press Esc to go back and try again.", _INFO, wrap=False
        )