"""A yes/no dialog that defaults to the safe answer."""

from __future__ import annotations

import textwrap
from enum import Enum

from dynmig.modal import ModalContent, ModalContentAction
from dynmig.terminal import (
    Canvas,
    Color,
    Constraint,
    Direction,
    Key,
    MouseEvent,
    Rect,
    Style,
    split_area,
)

_PLAIN = Style(fg=Color.WHITE)
_CONFIRM_SELECTED = Style(fg=Color.WHITE, bg=Color.RED, bold=True)
_CANCEL_SELECTED = Style(fg=Color.WHITE, bg=Color.GREEN, bold=True)


class ConfirmationAction(Enum):
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class ConfirmationDialog(ModalContent):
    """A message with confirm and cancel buttons; cancel is selected at first."""

    def __init__(self, title: str, message: str) -> None:
        self._title = title
        self.message = message
        self.confirm_button = "Yes"
        self.cancel_button = "No"
        self.selected_button = 1
        self._action: ConfirmationAction | None = None

    def with_buttons(self, confirm: str, cancel: str) -> ConfirmationDialog:
        self.confirm_button = confirm
        self.cancel_button = cancel
        return self

    def take_action(self) -> ConfirmationAction | None:
        """The decision made, if any; it is cleared once taken."""
        action, self._action = self._action, None
        return action

    def render_content(self, canvas: Canvas, area: Rect) -> None:
        message_area, button_area = split_area(
            area, [Constraint.min(3), Constraint.length(3)], Direction.VERTICAL
        )
        if message_area.width:
            lines = textwrap.wrap(self.message, message_area.width)
            for row, text in enumerate(lines[: message_area.height]):
                canvas.draw_text(
                    message_area.x,
                    message_area.y + row,
                    text.center(message_area.width).rstrip(),
                    _PLAIN,
                )

        confirm_area, cancel_area = split_area(
            button_area,
            [Constraint.percentage(50), Constraint.percentage(50)],
            Direction.HORIZONTAL,
        )
        confirm_style = _CONFIRM_SELECTED if self.selected_button == 0 else _PLAIN
        cancel_style = _CANCEL_SELECTED if self.selected_button == 1 else _PLAIN
        self._draw_button(canvas, confirm_area, self.confirm_button, confirm_style)
        self._draw_button(canvas, cancel_area, self.cancel_button, cancel_style)

    @staticmethod
    def _draw_button(canvas: Canvas, area: Rect, label: str, style: Style) -> None:
        canvas.draw_box(area, None, style)
        inner = area.inner(1, 1)
        if inner.width and inner.height:
            canvas.draw_text(inner.x, inner.y, label[: inner.width].center(inner.width), style)

    def handle_key(self, key: Key | str) -> ModalContentAction:
        if key in (Key.LEFT, Key.RIGHT, Key.TAB):
            self.selected_button = 1 if self.selected_button == 0 else 0
            return ModalContentAction.none()
        if key is Key.ENTER:
            self._action = (
                ConfirmationAction.CONFIRMED
                if self.selected_button == 0
                else ConfirmationAction.CANCELLED
            )
            return ModalContentAction.close()
        if key is Key.ESC or key in ("n", "N"):
            self._action = ConfirmationAction.CANCELLED
            return ModalContentAction.close()
        if key in ("y", "Y"):
            self._action = ConfirmationAction.CONFIRMED
            return ModalContentAction.close()
        return ModalContentAction.none()

    def handle_mouse(self, event: MouseEvent, area: Rect) -> ModalContentAction:
        return ModalContentAction.none()

    def title(self) -> str | None:
        return self._title