"""Terminal drawing primitives: geometry, styles, styled text, input events and a cell canvas."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class Rect:
    """A rectangular region of terminal cells."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def contains(self, x: int, y: int) -> bool:
        """Return True when the cell (x, y) lies inside the rectangle."""
        return self.x <= x < self.right and self.y <= y < self.bottom

    def inner(self, horizontal: int, vertical: int) -> Rect:
        """Shrink the rectangle by a margin on every side; an empty rect if it does not fit."""
        if self.width < 2 * horizontal or self.height < 2 * vertical:
            return Rect()
        return Rect(
            self.x + horizontal,
            self.y + vertical,
            self.width - 2 * horizontal,
            self.height - 2 * vertical,
        )


class Color(Enum):
    BLACK = "black"
    WHITE = "white"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    GRAY = "gray"
    DARK_GRAY = "dark_gray"


@dataclass(frozen=True)
class Style:
    """Foreground, background and text modifiers of a cell."""

    fg: Color | None = None
    bg: Color | None = None
    bold: bool = False
    reversed: bool = False


@dataclass(frozen=True)
class Span:
    """A run of text drawn in one style."""

    text: str
    style: Style = field(default_factory=Style)


@dataclass(frozen=True)
class Line:
    """A sequence of styled spans forming one line of text."""

    spans: tuple[Span, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "spans", tuple(self.spans))

    def plain(self) -> str:
        """The line's text without styling."""
        return "".join(span.text for span in self.spans)


class Key(Enum):
    """Non-character keys. Character keys are passed as one-character strings."""

    UP = "Up"
    DOWN = "Down"
    LEFT = "Left"
    RIGHT = "Right"
    ENTER = "Enter"
    ESC = "Esc"
    TAB = "Tab"
    BACKSPACE = "Backspace"
    DELETE = "Delete"
    PAGE_UP = "PageUp"
    PAGE_DOWN = "PageDown"
    HOME = "Home"
    END = "End"


class MouseKind(Enum):
    DOWN = "down"
    UP = "up"
    DRAG = "drag"
    MOVED = "moved"
    SCROLL_UP = "scroll_up"
    SCROLL_DOWN = "scroll_down"


@dataclass(frozen=True)
class MouseEvent:
    kind: MouseKind
    column: int
    row: int
    button: str = "left"


@dataclass(frozen=True)
class Constraint:
    """A size constraint for one chunk of a layout split."""

    kind: str
    value: int

    @classmethod
    def length(cls, value: int) -> Constraint:
        return cls("length", value)

    @classmethod
    def min(cls, value: int) -> Constraint:
        return cls("min", value)

    @classmethod
    def percentage(cls, value: int) -> Constraint:
        return cls("percentage", value)


class Direction(Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


def split_area(
    area: Rect, constraints: list[Constraint], direction: Direction
) -> list[Rect]:
    """Split an area into consecutive chunks along one direction.

    Lengths and percentages get their size, minimums get at least theirs and share
    any space left over; with no minimum the last chunk takes it.
    """
    if not constraints:
        return []
    total = area.height if direction is Direction.VERTICAL else area.width

    wanted = []
    for constraint in constraints:
        if constraint.kind == "percentage":
            wanted.append(total * constraint.value // 100)
        else:
            wanted.append(constraint.value)

    remaining = total
    sizes = []
    for size in wanted:
        take = min(size, remaining)
        sizes.append(take)
        remaining -= take

    if remaining:
        growable = [i for i, c in enumerate(constraints) if c.kind == "min"]
        if growable:
            share, extra = divmod(remaining, len(growable))
            for rank, i in enumerate(growable):
                sizes[i] += share + (1 if rank < extra else 0)
        else:
            sizes[-1] += remaining

    chunks = []
    offset = 0
    for size in sizes:
        if direction is Direction.VERTICAL:
            chunks.append(Rect(area.x, area.y + offset, area.width, size))
        else:
            chunks.append(Rect(area.x + offset, area.y, size, area.height))
        offset += size
    return chunks


def centered_rect(percent_x: int, percent_y: int, area: Rect) -> Rect:
    """A rectangle of the given percentages of the area, centred in it."""
    vertical = split_area(
        area,
        [
            Constraint.percentage((100 - percent_y) // 2),
            Constraint.percentage(percent_y),
            Constraint.percentage((100 - percent_y) // 2),
        ],
        Direction.VERTICAL,
    )
    return split_area(
        vertical[1],
        [
            Constraint.percentage((100 - percent_x) // 2),
            Constraint.percentage(percent_x),
            Constraint.percentage((100 - percent_x) // 2),
        ],
        Direction.HORIZONTAL,
    )[1]


class Canvas:
    """A grid of character cells that components draw into."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._chars = [[" "] * width for _ in range(height)]
        self._styles = [[Style()] * width for _ in range(height)]
        self.cursor: tuple[int, int] | None = None

    @property
    def area(self) -> Rect:
        return Rect(0, 0, self.width, self.height)

    def _put(self, x: int, y: int, char: str, style: Style) -> bool:
        if 0 <= x < self.width and 0 <= y < self.height:
            self._chars[y][x] = char
            self._styles[y][x] = style
            return True
        return False

    def draw_text(self, x: int, y: int, text: str, style: Style | None = None) -> int:
        """Write text from (x, y) to the right; return the number of cells written."""
        style = style or Style()
        written = 0
        for offset, char in enumerate(text):
            if self._put(x + offset, y, char, style):
                written += 1
        return written

    def draw_line(self, x: int, y: int, line: Line, width: int) -> int:
        """Write a styled line clipped to width cells; return the cells used."""
        used = 0
        for span in line.spans:
            for char in span.text:
                if used >= width:
                    return used
                self._put(x + used, y, char, span.style)
                used += 1
        return used

    def clear(self, area: Rect) -> None:
        """Blank every cell in the area."""
        for y in range(area.y, area.bottom):
            for x in range(area.x, area.right):
                self._put(x, y, " ", Style())

    def draw_box(self, area: Rect, title: str | None = None, style: Style | None = None) -> None:
        """Draw a border around the area with an optional title on the top edge."""
        if area.width < 2 or area.height < 2:
            return
        style = style or Style()
        left, right = area.x, area.right - 1
        top, bottom = area.y, area.bottom - 1
        for x in range(left + 1, right):
            self._put(x, top, "─", style)
            self._put(x, bottom, "─", style)
        for y in range(top + 1, bottom):
            self._put(left, y, "│", style)
            self._put(right, y, "│", style)
        self._put(left, top, "┌", style)
        self._put(right, top, "┐", style)
        self._put(left, bottom, "└", style)
        self._put(right, bottom, "┘", style)
        if title:
            self.draw_text(left + 1, top, title[: area.width - 2], style)

    def set_cursor(self, x: int, y: int) -> None:
        self.cursor = (x, y)

    def row_text(self, y: int) -> str:
        """The characters of one row as a string."""
        return "".join(self._chars[y])

    def style_at(self, x: int, y: int) -> Style:
        return self._styles[y][x]