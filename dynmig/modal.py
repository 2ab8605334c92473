"""A centred, bordered modal that hosts interchangeable content."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from dynmig.terminal import Canvas, Color, Key, MouseEvent, MouseKind, Rect, Style

_MODAL_BORDER = Style(fg=Color.CYAN)
_ERROR = Style(fg=Color.RED, bold=True)
_NORMAL = Style(fg=Color.WHITE)


@dataclass
class ModalConfig:
    title: str | None = None
    closable: bool = True
    click_outside_to_close: bool = True
    show_close_button: bool = True
    min_width: int = 20
    min_height: int = 5
    width_percent: int = 60
    height_percent: int = 60


class ModalContentKind(Enum):
    CLOSE = "close"
    SUBMIT = "submit"
    CANCEL = "cancel"
    CUSTOM = "custom"
    NONE = "none"


@dataclass(frozen=True)
class ModalContentAction:
    """What content asks of its modal; submit and custom carry a value."""

    kind: ModalContentKind
    value: str | None = None

    @classmethod
    def close(cls) -> ModalContentAction:
        return cls(ModalContentKind.CLOSE)

    @classmethod
    def submit(cls, value: str) -> ModalContentAction:
        return cls(ModalContentKind.SUBMIT, value)

    @classmethod
    def cancel(cls) -> ModalContentAction:
        return cls(ModalContentKind.CANCEL)

    @classmethod
    def custom(cls, value: str) -> ModalContentAction:
        return cls(ModalContentKind.CUSTOM, value)

    @classmethod
    def none(cls) -> ModalContentAction:
        return cls(ModalContentKind.NONE)


class ModalActionKind(Enum):
    CLOSE = "close"
    CONTENT_ACTION = "content_action"
    NONE = "none"


@dataclass(frozen=True)
class ModalAction:
    """The outcome of an event on a modal; content actions carry the content's action."""

    kind: ModalActionKind
    content_action: ModalContentAction | None = None

    @classmethod
    def close(cls) -> ModalAction:
        return cls(ModalActionKind.CLOSE)

    @classmethod
    def none(cls) -> ModalAction:
        return cls(ModalActionKind.NONE)

    @classmethod
    def from_content(cls, action: ModalContentAction) -> ModalAction:
        if action.kind is ModalContentKind.CLOSE:
            return cls.close()
        return cls(ModalActionKind.CONTENT_ACTION, action)


class ModalContent(ABC):
    """What a modal shows inside its border."""

    @abstractmethod
    def render_content(self, canvas: Canvas, area: Rect) -> None:
        """Draw the content into the area inside the border."""

    @abstractmethod
    def handle_key(self, key: Key | str) -> ModalContentAction:
        """React to a key press."""

    @abstractmethod
    def handle_mouse(self, event: MouseEvent, area: Rect) -> ModalContentAction:
        """React to a mouse event over the content area."""

    def title(self) -> str | None:
        return None


T = TypeVar("T", bound=ModalContent)


def _close_button_area(modal_area: Rect) -> Rect:
    return Rect(modal_area.right - 3, modal_area.y, 3, 1)


class ModalComponent(Generic[T]):
    """Frames content in a centred box with an optional close button."""

    def __init__(self, content: T) -> None:
        self.content = content
        self.config = ModalConfig()

    def with_title(self, title: str) -> ModalComponent[T]:
        self.config.title = title
        return self

    def with_config(self, config: ModalConfig) -> ModalComponent[T]:
        self.config = config
        return self

    def with_size(self, width_percent: int, height_percent: int) -> ModalComponent[T]:
        self.config.width_percent = width_percent
        self.config.height_percent = height_percent
        return self

    def non_closable(self) -> ModalComponent[T]:
        self.config.closable = False
        self.config.click_outside_to_close = False
        self.config.show_close_button = False
        return self

    def modal_area(self, area: Rect) -> Rect:
        """The modal's rectangle: a share of the area, at least the minimum, centred."""
        width = max(area.width * self.config.width_percent // 100, self.config.min_width)
        height = max(area.height * self.config.height_percent // 100, self.config.min_height)
        x = max(area.width - width, 0) // 2 + area.x
        y = max(area.height - height, 0) // 2 + area.y
        return Rect(x, y, width, height)

    def _shows_close_button(self) -> bool:
        return self.config.show_close_button and self.config.closable

    def render(self, canvas: Canvas, area: Rect) -> None:
        modal_area = self.modal_area(area)
        canvas.clear(modal_area)
        title = self.config.title or self.content.title() or ""
        canvas.draw_box(modal_area, title, _MODAL_BORDER)
        self.content.render_content(canvas, modal_area.inner(1, 1))
        if self._shows_close_button() and modal_area.width >= 4:
            close = _close_button_area(modal_area)
            canvas.draw_text(close.x, close.y, "[×]", _ERROR)

    def handle_key(self, key: Key | str) -> ModalAction:
        """Esc closes a closable modal; other keys go to the content."""
        if key is Key.ESC and self.config.closable:
            return ModalAction.close()
        return ModalAction.from_content(self.content.handle_key(key))

    def handle_mouse(self, event: MouseEvent, area: Rect) -> ModalAction:
        """Clicks outside or on the close button close; the rest go to the content."""
        modal_area = self.modal_area(area)
        content_area = modal_area.inner(1, 1)
        if event.kind is not MouseKind.DOWN:
            return ModalAction.from_content(self.content.handle_mouse(event, content_area))

        inside = modal_area.contains(event.column, event.row)
        if self.config.click_outside_to_close and not inside:
            return ModalAction.close()
        if self._shows_close_button() and _close_button_area(modal_area).contains(
            event.column, event.row
        ):
            return ModalAction.close()
        if inside:
            return ModalAction.from_content(self.content.handle_mouse(event, content_area))
        return ModalAction.none()


class TextModalContent(ModalContent):
    """Plain text shown in a modal."""

    def __init__(self, text: str) -> None:
        self.text = text

    def render_content(self, canvas: Canvas, area: Rect) -> None:
        for offset, line in enumerate(self.text.splitlines()[: area.height]):
            canvas.draw_text(area.x, area.y + offset, line[: area.width], _NORMAL)

    def handle_key(self, key: Key | str) -> ModalContentAction:
        return ModalContentAction.none()

    def handle_mouse(self, event: MouseEvent, area: Rect) -> ModalContentAction:
        return ModalContentAction.none()