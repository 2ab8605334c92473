"""A modal listing manual field mappings, from which they can be deleted."""

from __future__ import annotations

from dataclasses import dataclass

from dynmig.list_component import ListComponent
from dynmig.modal import ModalContent, ModalContentAction
from dynmig.terminal import (
    Canvas,
    Color,
    Constraint,
    Direction,
    Key,
    Line,
    MouseEvent,
    Rect,
    Span,
    Style,
    split_area,
)

_ARROW = " → "
_BORDER = Style(fg=Color.WHITE)


@dataclass(frozen=True)
class ManualMappingDelete:
    """Request to delete the manual mapping of a source field."""

    source_field: str


def _entries(mappings: dict[str, str]) -> list[str]:
    return [f"{source}{_ARROW}{target}" for source, target in mappings.items()]


def _help_lines() -> list[Line]:
    label, value = Style(fg=Color.YELLOW), Style(fg=Color.CYAN)
    return [
        Line([Span("Delete: ", label), Span("d", value)]),
        Line([Span("Close: ", label), Span("Esc", value)]),
    ]


class ManualMappingModal(ModalContent):
    """Source-to-target field mappings shown as a list."""

    def __init__(self, field_mappings: dict[str, str]) -> None:
        self.field_mappings = dict(field_mappings)
        self.list: ListComponent[str] = ListComponent(
            _entries(self.field_mappings)
        ).with_title("Manual Field Mappings")
        self._action: ManualMappingDelete | None = None

    def take_action(self) -> ManualMappingDelete | None:
        """The pending request, if any; it is cleared once taken."""
        action, self._action = self._action, None
        return action

    def _delete_selected(self) -> None:
        index = self.list.selected
        if index is None or index >= len(self.list.items):
            return
        entry = self.list.items[index]
        position = entry.find(_ARROW)
        if position < 0:
            return
        source_field = entry[:position]
        self.field_mappings.pop(source_field, None)
        self.list.update_items(_entries(self.field_mappings))
        self._action = ManualMappingDelete(source_field)

    def render_content(self, canvas: Canvas, area: Rect) -> None:
        list_area, help_area = split_area(
            area, [Constraint.min(3), Constraint.length(3)], Direction.VERTICAL
        )
        self.list.render(canvas, list_area)
        if not help_area.width or not help_area.height:
            return
        canvas.draw_text(help_area.x, help_area.y, "─" * help_area.width, _BORDER)
        canvas.draw_text(help_area.x, help_area.y, "Help"[: help_area.width], _BORDER)
        for row, line in enumerate(_help_lines()[: help_area.height - 1], start=1):
            canvas.draw_line(help_area.x, help_area.y + row, line, help_area.width)

    def handle_key(self, key: Key | str) -> ModalContentAction:
        if key is Key.ESC:
            return ModalContentAction.close()
        if key == "d" or key is Key.DELETE:
            self._delete_selected()
            return ModalContentAction.custom("delete")
        self.list.handle_key(key)
        return ModalContentAction.custom("continue")

    def handle_mouse(self, event: MouseEvent, area: Rect) -> ModalContentAction:
        self.list.handle_mouse(event, area)
        return ModalContentAction.custom("continue")