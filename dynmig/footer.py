"""A boxed footer listing the key bindings of the current screen."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from dynmig.terminal import Canvas, Color, Line, Rect, Span, Style

_FOOTER = Style(fg=Color.GRAY)
_FOOTER_KEY = Style(fg=Color.YELLOW, bold=True)
_DISABLED = Style(fg=Color.DARK_GRAY)


@dataclass(frozen=True)
class FooterAction:
    key: str
    description: str
    enabled: bool = True


class FooterStyle(Enum):
    STANDARD = "standard"
    COMPACT = "compact"
    HELP = "help"


class FooterComponent:
    """A list of key actions; builder methods return the component for chaining."""

    def __init__(self) -> None:
        self.actions: list[FooterAction] = []
        self.style = FooterStyle.STANDARD

    def add_action(self, key: str, description: str, enabled: bool = True) -> FooterComponent:
        self.actions.append(FooterAction(key, description, enabled))
        return self

    def add_navigation_actions(self) -> FooterComponent:
        self.actions.extend(
            [
                FooterAction("↑↓", "Navigate"),
                FooterAction("Enter", "Select"),
                FooterAction("Esc", "Back"),
            ]
        )
        return self

    def add_quit_action(self) -> FooterComponent:
        self.actions.append(FooterAction("Ctrl+Q", "Quit"))
        return self

    def with_style(self, style: FooterStyle) -> FooterComponent:
        self.style = style
        return self

    def footer_line(self) -> Line:
        """The actions as one styled line separated by ' | '."""
        spans: list[Span] = []
        for index, action in enumerate(self.actions):
            if index:
                spans.append(Span(" | ", _FOOTER))
            spans.append(Span(action.key, _FOOTER_KEY if action.enabled else _DISABLED))
            spans.append(Span(" ", _FOOTER))
            spans.append(Span(action.description, _FOOTER if action.enabled else _DISABLED))
        return Line(spans)

    def render(self, canvas: Canvas, area: Rect) -> None:
        canvas.draw_box(area, "Actions", _FOOTER)
        inner = area.inner(1, 1)
        if inner.width and inner.height:
            canvas.draw_line(inner.x, inner.y, self.footer_line(), inner.width)