"""A single board cell: a six-sided shape that belongs to a team or to nobody."""

from __future__ import annotations

import math

Color = tuple[int, int, int]

RED: Color = (255, 0, 0)
BLUE: Color = (0, 0, 255)
WHITE: Color = (255, 255, 255)
GREEN_OUTLINE: Color = (0, 255, 0)
YELLOW_OUTLINE: Color = (255, 244, 0)
OUTLINE_THICKNESS = 3.0


def color_for_team(team: int) -> Color:
    """Fill colour for a team: 1 is red, -1 is blue, anything else white."""
    if team == 1:
        return RED
    if team == -1:
        return BLUE
    return WHITE


class Hexagon:
    """A board cell with a team, a position and an optional move outline."""

    def __init__(self, radius: float, team: int) -> None:
        self.radius = float(radius)
        self._team = team
        self.position: tuple[float, float] = (0.0, 0.0)
        self.outline_color: Color = WHITE
        self.outline_thickness = 0.0
        self.is_outlined = False
        self.is_green = False

    def __repr__(self) -> str:
        return f"Hexagon(team={self._team}, position={self.position})"

    @property
    def team(self) -> int:
        return self._team

    @property
    def fill_color(self) -> Color:
        return color_for_team(self._team)

    @property
    def vertices(self) -> list[tuple[float, float]]:
        """Corner points, with the shape's bounding box top-left at its position."""
        x, y = self.position
        r = self.radius
        corners = []
        for index in range(6):
            angle = index * 2 * math.pi / 6 - math.pi / 2
            corners.append((x + r + math.cos(angle) * r, y + r + math.sin(angle) * r))
        return corners

    def set_pos(self, x: float, y: float) -> None:
        self.position = (float(x), float(y))

    def has_team(self) -> bool:
        return self._team != 0

    def set_team(self, team: int) -> None:
        self._team = team

    def _outline(self, color: Color, green: bool) -> None:
        if self._team == 0:
            self.outline_color = color
            self.outline_thickness = OUTLINE_THICKNESS
            self.is_outlined = True
            self.is_green = green

    def set_outline_green(self) -> None:
        """Mark an empty cell as a copy target (adjacent move)."""
        self._outline(GREEN_OUTLINE, True)

    def set_outline_yellow(self) -> None:
        """Mark an empty cell as a jump target."""
        self._outline(YELLOW_OUTLINE, False)

    def clear_outline(self) -> None:
        self.outline_thickness = 0.0
        self.is_outlined = False
        self.is_green = False