"""A bordered, selectable list with keyboard, mouse and scroll navigation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Iterable, TypeVar

from dynmig.mouse import MouseHandler, MouseZone, SelectItem
from dynmig.terminal import Canvas, Color, Key, MouseEvent, MouseKind, Rect, Style

_NORMAL = Style(fg=Color.WHITE)
_SELECTED = Style(fg=Color.BLACK, bg=Color.CYAN, bold=True)
_HOVER = Style(fg=Color.CYAN)

_PAGE_SIZE = 10


@dataclass
class ListConfig:
    title: str | None = None
    allow_create_new: bool = False
    create_new_key: str = "n"
    create_new_label: str = "Create New"
    enable_mouse: bool = True
    enable_scroll: bool = True
    show_indices: bool = False
    highlight_selected: bool = True


class ListActionKind(Enum):
    SELECTED = "selected"
    CREATE_NEW = "create_new"
    NONE = "none"


@dataclass(frozen=True)
class ListAction:
    """The outcome of an event on a list; a selection carries the item index."""

    kind: ListActionKind
    index: int | None = None

    @classmethod
    def selected(cls, index: int) -> ListAction:
        return cls(ListActionKind.SELECTED, index)

    @classmethod
    def create_new(cls) -> ListAction:
        return cls(ListActionKind.CREATE_NEW)

    @classmethod
    def none(cls) -> ListAction:
        return cls(ListActionKind.NONE)


T = TypeVar("T")


class ListComponent(Generic[T]):
    """Items shown one per row; the first item is selected when there are any."""

    def __init__(self, items: Iterable[T]) -> None:
        self.items: list[T] = list(items)
        self.selected: int | None = 0 if self.items else None
        self.config = ListConfig()
        self.mouse_handler = MouseHandler()
        self._offset = 0

    def with_title(self, title: str) -> ListComponent[T]:
        self.config.title = title
        return self

    def with_create_new(self, key: str, label: str) -> ListComponent[T]:
        self.config.allow_create_new = True
        self.config.create_new_key = key
        self.config.create_new_label = label
        return self

    def with_indices(self) -> ListComponent[T]:
        self.config.show_indices = True
        return self

    def with_config(self, config: ListConfig) -> ListComponent[T]:
        self.config = config
        return self

    def _label(self, index: int, item: T) -> str:
        return f"{index + 1}: {item}" if self.config.show_indices else str(item)

    def _scroll_to_selection(self, height: int) -> None:
        if self.selected is None:
            self._offset = 0
            return
        if self.selected < self._offset:
            self._offset = self.selected
        elif self.selected >= self._offset + height:
            self._offset = self.selected - height + 1

    def render(self, canvas: Canvas, area: Rect) -> None:
        """Draw the border, title and visible rows, highlighting the selection."""
        self._render_bordered(canvas, area, _NORMAL)

    def _render_bordered(self, canvas: Canvas, area: Rect, border_style: Style) -> None:
        self._setup_mouse_zones(area)
        canvas.draw_box(area, self.config.title, border_style)
        inner = area.inner(1, 1)
        if not inner.width or not inner.height:
            return
        self._scroll_to_selection(inner.height)
        visible = self.items[self._offset : self._offset + inner.height]
        for row, item in enumerate(visible):
            index = self._offset + row
            text = self._label(index, item)[: inner.width]
            if index == self.selected:
                canvas.draw_text(inner.x, inner.y + row, text.ljust(inner.width), _SELECTED)
            else:
                canvas.draw_text(inner.x, inner.y + row, text, _NORMAL)

    def _setup_mouse_zones(self, area: Rect) -> None:
        if not self.config.enable_mouse:
            return
        self.mouse_handler.clear_zones()
        top = 2 if self.config.title is not None else 1
        inner = Rect(
            area.x + 1,
            area.y + top,
            max(area.width - 2, 0),
            max(area.height - (top + 1), 0),
        )
        for index in range(min(len(self.items), inner.height)):
            self.mouse_handler.add_zone(
                MouseZone(
                    Rect(inner.x, inner.y + index, inner.width, 1),
                    SelectItem(index),
                    _HOVER,
                )
            )

    def handle_key(self, key: Key | str) -> ListAction:
        """Navigation keys move the selection; Enter reports it."""
        moves = {
            Key.UP: self.previous,
            Key.DOWN: self.next,
            Key.PAGE_UP: self.page_up,
            Key.PAGE_DOWN: self.page_down,
            Key.HOME: self.first,
            Key.END: self.last,
        }
        if isinstance(key, Key) and key in moves:
            moves[key]()
            return ListAction.none()
        if key is Key.ENTER:
            if self.selected is not None:
                return ListAction.selected(self.selected)
            return ListAction.none()
        if (
            isinstance(key, str)
            and self.config.allow_create_new
            and key == self.config.create_new_key
        ):
            return ListAction.create_new()
        return ListAction.none()

    def handle_mouse(self, event: MouseEvent, area: Rect) -> ListAction:
        """Clicks select rows, moves track hover and scrolling moves the selection."""
        if not self.config.enable_mouse:
            return ListAction.none()
        if event.kind is MouseKind.DOWN:
            action = self.mouse_handler.handle_click(event.column, event.row)
            if action is None:
                return ListAction.none()
            self.select(action.index)
            return ListAction.selected(action.index)
        if event.kind is MouseKind.MOVED:
            self.mouse_handler.handle_hover(event.column, event.row)
        elif event.kind is MouseKind.SCROLL_UP:
            self.previous()
        elif event.kind is MouseKind.SCROLL_DOWN:
            self.next()
        return ListAction.none()

    def select(self, index: int | None) -> None:
        self.selected = index

    def next(self) -> None:
        """Move down one row, wrapping to the top."""
        if self.selected is None or self.selected >= len(self.items) - 1:
            self.selected = 0
        else:
            self.selected += 1

    def previous(self) -> None:
        """Move up one row, wrapping to the bottom."""
        if self.selected is None:
            self.selected = 0
        elif self.selected == 0:
            self.selected = max(len(self.items) - 1, 0)
        else:
            self.selected -= 1

    def page_down(self) -> None:
        if self.selected is None:
            self.selected = 0
        else:
            self.selected = max(min(self.selected + _PAGE_SIZE, len(self.items) - 1), 0)

    def page_up(self) -> None:
        if self.selected is None:
            self.selected = 0
        else:
            self.selected = max(self.selected - _PAGE_SIZE, 0)

    def first(self) -> None:
        if self.items:
            self.selected = 0

    def last(self) -> None:
        if self.items:
            self.selected = len(self.items) - 1

    def update_items(self, items: Iterable[T]) -> None:
        """Replace the items, keeping the selection within range."""
        self.items = list(items)
        if not self.items:
            self.selected = None
        elif (self.selected or 0) >= len(self.items):
            self.selected = len(self.items) - 1