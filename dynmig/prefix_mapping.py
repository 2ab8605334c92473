"""A modal for viewing, adding and deleting field-name prefix mappings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

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

_INFO = Style(fg=Color.CYAN)
_NORMAL = Style(fg=Color.WHITE)
_INPUT = Style(fg=Color.YELLOW)
_SOURCE = Style(fg=Color.CYAN)
_TARGET = Style(fg=Color.GREEN)

_LIST_HELP = "Keys: [n] New mapping, [d] Delete selected, [↑↓/jk] Navigate, [Esc] Close"
_SOURCE_HELP = "Enter source prefix (e.g., 'cgk_'): [Enter] Continue, [Esc] Cancel"
_TARGET_HELP = "Enter target prefix (e.g., 'nrq_'): [Enter] Save, [Esc] Cancel"
_EMPTY_TEXT = "No prefix mappings defined. Press 'n' to add one."
_TITLE = "Prefix Mappings"


@dataclass(frozen=True)
class PrefixMappingAdd:
    """Request to map fields starting with one prefix to another prefix."""

    source_prefix: str
    target_prefix: str


@dataclass(frozen=True)
class PrefixMappingDelete:
    """Request to delete the mapping of a source prefix."""

    source_prefix: str


class _Mode(Enum):
    LIST = "list"
    ADDING_SOURCE = "adding_source"
    ADDING_TARGET = "adding_target"


def _boxed_text(canvas: Canvas, area: Rect, title: str, text: str, style: Style) -> None:
    canvas.draw_box(area, title, style)
    inner = area.inner(1, 1)
    if inner.width and inner.height:
        canvas.draw_text(inner.x, inner.y, text[: inner.width], style)


class PrefixMappingModal(ModalContent):
    """Prefix mappings shown sorted by source prefix, with a two-step add form."""

    def __init__(self, mappings: dict[str, str]) -> None:
        self.mappings = dict(mappings)
        self.selected_index = 0
        self.input_buffer = ""
        self._mode = _Mode.LIST
        self._pending_source: str | None = None
        self._action: PrefixMappingAdd | PrefixMappingDelete | None = None
        self._offset = 0

    def take_action(self) -> PrefixMappingAdd | PrefixMappingDelete | None:
        """The pending request, if any; it is cleared once taken."""
        action, self._action = self._action, None
        return action

    def mapping_list(self) -> list[tuple[str, str]]:
        """The mappings as (source, target) pairs sorted by source prefix."""
        return sorted(self.mappings.items())

    def _handle_list_key(self, key: Key | str) -> ModalContentAction:
        if key is Key.ESC:
            return ModalContentAction.close()
        count = len(self.mappings)
        if key is Key.UP or key == "k":
            if count:
                self.selected_index = count - 1 if self.selected_index == 0 else self.selected_index - 1
            return ModalContentAction.none()
        if key is Key.DOWN or key == "j":
            if count:
                self.selected_index = (self.selected_index + 1) % count
            return ModalContentAction.none()
        if key == "n":
            self._mode = _Mode.ADDING_SOURCE
            self.input_buffer = ""
            return ModalContentAction.none()
        if key == "d":
            entries = self.mapping_list()
            if 0 <= self.selected_index < len(entries):
                self._action = PrefixMappingDelete(entries[self.selected_index][0])
                return ModalContentAction.close()
        return ModalContentAction.none()

    def _handle_input_key(self, key: Key | str) -> ModalContentAction:
        if key is Key.ESC:
            self._mode = _Mode.LIST
            self._pending_source = None
            self.input_buffer = ""
            return ModalContentAction.none()
        if key is Key.ENTER:
            if not self.input_buffer:
                return ModalContentAction.none()
            if self._mode is _Mode.ADDING_SOURCE:
                self._pending_source = self.input_buffer
                self._mode = _Mode.ADDING_TARGET
                self.input_buffer = ""
                return ModalContentAction.none()
            self._action = PrefixMappingAdd(self._pending_source or "", self.input_buffer)
            return ModalContentAction.close()
        if key is Key.BACKSPACE:
            self.input_buffer = self.input_buffer[:-1]
            return ModalContentAction.none()
        if isinstance(key, str):
            self.input_buffer += key
        return ModalContentAction.none()

    def handle_key(self, key: Key | str) -> ModalContentAction:
        if self._mode is _Mode.LIST:
            return self._handle_list_key(key)
        return self._handle_input_key(key)

    def handle_mouse(self, event: MouseEvent, area: Rect) -> ModalContentAction:
        return ModalContentAction.none()

    def title(self) -> str | None:
        return _TITLE

    def _instructions(self) -> str:
        if self._mode is _Mode.LIST:
            return _LIST_HELP
        if self._mode is _Mode.ADDING_SOURCE:
            return _SOURCE_HELP
        return _TARGET_HELP

    def _render_list(self, canvas: Canvas, body: Rect, status: Rect) -> None:
        entries = self.mapping_list()
        if not entries:
            _boxed_text(canvas, body, _TITLE, _EMPTY_TEXT, _NORMAL)
            status_text = "No mappings"
        else:
            canvas.draw_box(body, _TITLE, _NORMAL)
            inner = body.inner(1, 1)
            if inner.width and inner.height:
                if self.selected_index < self._offset:
                    self._offset = self.selected_index
                elif self.selected_index >= self._offset + inner.height:
                    self._offset = self.selected_index - inner.height + 1
                visible = entries[self._offset : self._offset + inner.height]
                for row, (source, target) in enumerate(visible):
                    chosen = self._offset + row == self.selected_index
                    marker = "► " if chosen else "  "
                    spans = [
                        Span(marker, Style(reversed=chosen)),
                        Span(source.ljust(15), Style(fg=_SOURCE.fg, reversed=chosen)),
                        Span(" → ", Style(reversed=chosen)),
                        Span(target, Style(fg=_TARGET.fg, reversed=chosen)),
                    ]
                    canvas.draw_line(inner.x, inner.y + row, Line(spans), inner.width)
            status_text = f"{len(entries)} mapping(s)"
        if status.width and status.height:
            canvas.draw_text(status.x, status.y, status_text[: status.width], _NORMAL)

    def render_content(self, canvas: Canvas, area: Rect) -> None:
        instructions, body, status = split_area(
            area,
            [Constraint.length(3), Constraint.min(5), Constraint.length(2)],
            Direction.VERTICAL,
        )
        _boxed_text(canvas, instructions, "Instructions", self._instructions(), _INFO)

        if self._mode is _Mode.LIST:
            self._render_list(canvas, body, status)
            return

        if self._mode is _Mode.ADDING_SOURCE:
            box_title, prompt = "Source Prefix", "Type the source prefix to map from"
        else:
            box_title, prompt = "Target Prefix", f"Mapping '{self._pending_source}' to:"
        _boxed_text(canvas, body, box_title, self.input_buffer, _INPUT)
        if status.width and status.height:
            canvas.draw_text(status.x, status.y, prompt[: status.width], _INFO)