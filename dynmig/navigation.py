"""Screens, the results of their event handling, and the manager that switches between them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any

from dynmig.footer import FooterAction, FooterComponent
from dynmig.terminal import Canvas, Constraint, Direction, Rect, split_area


class ScreenResultKind(Enum):
    CONTINUE = "continue"
    BACK = "back"
    EXIT = "exit"
    NAVIGATE = "navigate"
    REPLACE = "replace"


@dataclass(frozen=True)
class ScreenResult:
    """What a screen asks for after an event; navigation results carry the next screen."""

    kind: ScreenResultKind
    screen: Screen | None = None

    def __post_init__(self) -> None:
        needs_screen = self.kind in (ScreenResultKind.NAVIGATE, ScreenResultKind.REPLACE)
        if needs_screen and self.screen is None:
            raise ValueError(f"{self.kind.value} result needs a screen")
        if not needs_screen and self.screen is not None:
            raise ValueError(f"{self.kind.value} result takes no screen")

    @classmethod
    def navigate(cls, screen: Screen) -> ScreenResult:
        return cls(ScreenResultKind.NAVIGATE, screen)

    @classmethod
    def replace(cls, screen: Screen) -> ScreenResult:
        return cls(ScreenResultKind.REPLACE, screen)


class Screen(ABC):
    """One full screen of the interface."""

    screen_title: str | None = None
    active: bool = False
    pending_navigation: ScreenResult | None = None

    @abstractmethod
    def render(self, canvas: Canvas, area: Rect) -> None:
        """Draw the screen into the area."""

    @abstractmethod
    def handle_event(self, event: Any) -> ScreenResult:
        """React to an input event."""

    @abstractmethod
    def footer_actions(self) -> list[FooterAction]:
        """The key actions shown in the footer."""

    def title(self) -> str | None:
        return self.screen_title

    def on_enter(self) -> None:
        self.active = True

    def on_exit(self) -> None:
        self.active = False

    def check_navigation(self) -> ScreenResult | None:
        """A navigation to perform right after rendering, if any; it is handed out once."""
        result = self.pending_navigation
        self.pending_navigation = None
        return result


class NavigationResult(Enum):
    CONTINUE = "continue"
    EXIT = "exit"


class NavigationManager:
    """Holds the current screen and its footer and applies screen results."""

    def __init__(self, initial_screen: Screen) -> None:
        self.current_screen = initial_screen
        self.footer = self._build_footer()

    def _build_footer(self) -> FooterComponent:
        footer = FooterComponent()
        for action in self.current_screen.footer_actions():
            footer.add_action(action.key, action.description, action.enabled)
        return footer

    def navigate_to(self, screen: Screen) -> None:
        self.current_screen.on_exit()
        screen.on_enter()
        self.current_screen = screen
        self.footer = self._build_footer()

    def _apply(self, result: ScreenResult) -> NavigationResult:
        if result.kind in (ScreenResultKind.BACK, ScreenResultKind.EXIT):
            return NavigationResult.EXIT
        if result.screen is not None:
            self.navigate_to(result.screen)
        return NavigationResult.CONTINUE

    def handle_event(self, event: Any) -> NavigationResult:
        """Pass the event to the current screen; Back at the root exits."""
        return self._apply(self.current_screen.handle_event(event))

    def render(self, canvas: Canvas, area: Rect) -> NavigationResult:
        """Draw the screen above a three-row footer, applying any pending navigation."""
        content, footer_chunk = split_area(
            area, [Constraint.min(0), Constraint.length(3)], Direction.VERTICAL
        )
        self.current_screen.render(canvas, content)

        pending = self.current_screen.check_navigation()
        if pending is not None:
            return self._apply(pending)

        footer_area = Rect(
            footer_chunk.x + 1,
            footer_chunk.y,
            max(footer_chunk.width - 2, 0),
            footer_chunk.height,
        )
        self.footer.render(canvas, footer_area)
        return NavigationResult.CONTINUE