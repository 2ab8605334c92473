"""Clickable zones and hover tracking for mouse input."""

from __future__ import annotations

from dataclasses import dataclass

from dynmig.terminal import Rect, Style


@dataclass(frozen=True)
class SelectItem:
    """Mouse action selecting the item at an index."""

    index: int


MouseAction = SelectItem


@dataclass(frozen=True)
class MouseZone:
    area: Rect
    action: MouseAction
    hover_style: Style | None = None


class MouseHandler:
    """Keeps a list of zones and resolves clicks and hovers against them."""

    def __init__(self) -> None:
        self.zones: list[MouseZone] = []
        self.hover_zone: int | None = None

    def add_zone(self, zone: MouseZone) -> None:
        self.zones.append(zone)

    def clear_zones(self) -> None:
        self.zones.clear()
        self.hover_zone = None

    def _zone_index_at(self, x: int, y: int) -> int | None:
        return next(
            (i for i, zone in enumerate(self.zones) if zone.area.contains(x, y)), None
        )

    def handle_click(self, x: int, y: int) -> MouseAction | None:
        """The action of the first zone under the point, if any."""
        index = self._zone_index_at(x, y)
        return None if index is None else self.zones[index].action

    def handle_hover(self, x: int, y: int) -> bool:
        """Track the zone under the point; return True if the hovered zone changed."""
        new_hover = self._zone_index_at(x, y)
        changed = new_hover != self.hover_zone
        self.hover_zone = new_hover
        return changed

    def hover_style(self, area: Rect) -> Style | None:
        """The hover style of the hovered zone when it covers exactly this area."""
        if self.hover_zone is None or self.hover_zone >= len(self.zones):
            return None
        zone = self.zones[self.hover_zone]
        return zone.hover_style if zone.area == area else None

    def handle_scroll(self, x: int, y: int, delta: int) -> MouseAction | None:
        """Keep hover tracking on the pointer; scrolling itself is left to components."""
        if delta:
            self.handle_hover(x, y)
        return None