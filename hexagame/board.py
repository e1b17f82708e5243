"""The fixed hexagonal playing field and its neighbourhood tables."""

from __future__ import annotations

from collections.abc import Iterator

import pygame

from .config import HEX_OFFSET, HEX_RADIUS, HEX_STEP_X, HEX_STEP_Y, HEX_X_START
from .hexagon import Hexagon, color_for_team

ROW_WIDTH = 13
FIRST_ROW_Y = 100.0
PLAY_LAYERS = range(1, 10)
_LOWEST_LAYER = -1
_HIGHEST_LAYER = 11

# Initial teams of each drawn row; None marks a hole in the field.
_LAYOUT: tuple[tuple[int | None, ...], ...] = (
    (None, None, 1, 0, 0, 0, -1),
    (None, None, 0, 0, 0, 0, 0, 0),
    (None, None, 0, 0, 0, 0, 0, 0, 0),
    (None, None, 0, 0, 0, 0, None, 0, 0, 0),
    (None, None, -1, 0, 0, None, 0, 0, 0, 0, 1),
    (None, None, 0, 0, 0, 0, None, 0, 0, 0),
    (None, None, 0, 0, 0, 0, 0, 0, 0),
    (None, None, 0, 0, 0, 0, 0, 0),
    (None, None, 1, 0, 0, 0, -1),
)

Offset = tuple[int, int]

# (layer offset, index offset) of the 18 cells reachable from a cell:
# 0-5 are adjacent (copy moves), 6-17 are two steps away (jump moves).
_PAINT_UPPER: tuple[Offset, ...] = (
    (0, -1), (0, 1), (1, 0), (1, 1), (-1, 0), (-1, -1),
    (2, 0), (2, 1), (2, 2), (1, -1), (1, 2), (0, -2), (0, 2),
    (-1, -2), (-1, 1), (-2, 0), (-2, 1), (-2, 2),
)
_PAINT_LAYER3: tuple[Offset, ...] = _PAINT_UPPER[:15] + ((-2, -2), (-2, -1), (-2, 0))
_PAINT_LAYER4: tuple[Offset, ...] = (
    (0, -1), (0, 1), (1, 0), (1, 1), (-1, 0), (-1, -1),
    (2, -1), (2, 0), (2, 1), (1, -1), (1, 2), (0, -2), (0, 2),
    (-1, -2), (-1, 1), (-2, -2), (-2, -1), (-2, 0),
)
_PAINT_LAYER5: tuple[Offset, ...] = (
    (0, -1), (0, 1), (1, -1), (1, 0), (-1, 0), (-1, -1),
    (2, -2), (2, -1), (2, 0), (1, -2), (1, 1), (0, -2), (0, 2),
    (-1, -2), (-1, 1), (-2, -2), (-2, -1), (-2, 0),
)
_PAINT_LAYER6: tuple[Offset, ...] = (
    (0, -1), (0, 1), (1, 0), (1, -1), (-1, 1), (-1, 0),
    (2, -2), (2, -1), (2, 0), (1, -2), (1, 1), (0, -2), (0, 2),
    (-1, -1), (-1, 2), (-2, -1), (-2, 0), (-2, 1),
)
_PAINT_LOWER: tuple[Offset, ...] = _PAINT_LAYER6[:15] + ((-2, 0), (-2, 1), (-2, 2))

_PAINT: dict[int, tuple[Offset, ...]] = {
    1: _PAINT_UPPER,
    2: _PAINT_UPPER,
    3: _PAINT_LAYER3,
    4: _PAINT_LAYER4,
    5: _PAINT_LAYER5,
    6: _PAINT_LAYER6,
    7: _PAINT_LOWER,
    8: _PAINT_LOWER,
    9: _PAINT_LOWER,
}

# Position offsets for the first 17 neighbour slots, as used to locate a
# target cell; slot 17 is handled separately.
_POS_UPPER: tuple[Offset, ...] = (
    (0, -1), (0, 1), (1, 0), (1, 1), (-1, 0), (-1, -1),
    (2, 0), (2, 1), (2, 2), (1, -1), (1, 2), (0, -2), (0, 2),
    (-1, -2), (-1, 1), (-2, -2), (-2, -1),
)
_POS_LAYER4: tuple[Offset, ...] = _PAINT_LAYER4[:17]
_POS_LAYER5: tuple[Offset, ...] = _PAINT_LAYER5[:17]
_POS_LAYER6: tuple[Offset, ...] = _PAINT_LAYER6[:17]
_POS_LOWER: tuple[Offset, ...] = _PAINT_LAYER6[:15] + ((-2, 0), (-2, 1))

_POS: dict[int, tuple[tuple[Offset, ...], int]] = {
    1: (_POS_UPPER, 0),
    2: (_POS_UPPER, 0),
    3: (_POS_UPPER, 0),
    4: (_POS_LAYER4, 0),
    5: (_POS_LAYER5, 0),
    6: (_POS_LAYER6, 1),
    7: (_POS_LOWER, 2),
    8: (_POS_LOWER, 2),
    9: (_POS_LOWER, 2),
}


class Board:
    """The playing field: nine drawn rows padded by two empty rows on each side."""

    def __init__(self) -> None:
        drawn = [
            [
                None if team is None else Hexagon(HEX_RADIUS, team)
                for team in row
            ]
            + [None] * (ROW_WIDTH - len(row))
            for row in _LAYOUT
        ]
        self.draw_layers: list[list[Hexagon | None]] = drawn
        empty = [[None] * ROW_WIDTH for _ in range(2)]
        tail = [[None] * ROW_WIDTH for _ in range(2)]
        # Index 0 is layer -1, index 1 layer 0, ..., index 12 layer 11.
        self.play_layers: list[list[Hexagon | None]] = empty + drawn + tail

    def _cell(self, layer_num: int, hex_num: int) -> Hexagon | None:
        if not _LOWEST_LAYER <= layer_num <= _HIGHEST_LAYER:
            return None
        if not 0 <= hex_num < ROW_WIDTH:
            return None
        return self.play_layers[layer_num - _LOWEST_LAYER][hex_num]

    def place(self) -> tuple[int, int, bool]:
        """Position every cell on screen; return (red, blue, finished).

        The board is finished when no cell is left without a team.
        """
        red = blue = 0
        finished = True
        x = HEX_X_START
        y = FIRST_ROW_Y
        count = 0.0
        for layer_num, layer in enumerate(self.draw_layers, start=1):
            for hexagon in layer:
                if hexagon is not None:
                    hexagon.set_pos(x, y)
                    if not hexagon.has_team():
                        finished = False
                    elif hexagon.team == 1:
                        red += 1
                    else:
                        blue += 1
                x += HEX_STEP_X
            y += HEX_STEP_Y
            count += -1 if layer_num >= 5 else 1
            x = HEX_X_START - HEX_OFFSET * count
        return red, blue, finished

    def draw(self, surface: pygame.Surface) -> tuple[int, int, bool]:
        """Place and draw every cell; return (red, blue, finished)."""
        tally = self.place()
        for layer in self.draw_layers:
            for hexagon in layer:
                if hexagon is None:
                    continue
                points = hexagon.vertices
                pygame.draw.polygon(surface, color_for_team(hexagon.team), points)
                if hexagon.outline_thickness > 0:
                    pygame.draw.polygon(
                        surface,
                        hexagon.outline_color,
                        points,
                        int(hexagon.outline_thickness),
                    )
        return tally

    def to_paint(self, layer_num: int, hex_num: int) -> list[Hexagon | None]:
        """The 18 cells a piece may move to: 6 adjacent, then 12 by jump."""
        offsets = _PAINT.get(layer_num)
        if offsets is None:
            return [None] * 18
        return [self._cell(layer_num + dl, hex_num + dn) for dl, dn in offsets]

    def to_capture(self, layer_num: int, hex_num: int) -> list[Hexagon | None]:
        """The 6 cells adjacent to a cell, which a move into it captures."""
        return self.to_paint(layer_num, hex_num)[:6]

    @staticmethod
    def get_pos(prev_layer: int, prev_num: int, curr_num: int) -> tuple[int, int]:
        """Layer and index of neighbour slot ``curr_num`` of a cell; (0, 0) if unknown."""
        entry = _POS.get(prev_layer)
        if entry is None:
            return (0, 0)
        offsets, last_shift = entry
        if 0 <= curr_num < len(offsets):
            dl, dn = offsets[curr_num]
            return (prev_layer + dl, prev_num + dn)
        if curr_num == 17:
            return (prev_num - 2, prev_num + last_shift)
        return (0, 0)

    def play_cells(self) -> Iterator[tuple[int, int, Hexagon]]:
        """Yield (layer, index, cell) for every cell of the playable rows."""
        for layer_num in PLAY_LAYERS:
            for hex_num, hexagon in enumerate(self.play_layers[layer_num - _LOWEST_LAYER]):
                if hexagon is not None:
                    yield layer_num, hex_num, hexagon