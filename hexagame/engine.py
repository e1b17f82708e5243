"""Game rules: move selection, captures, the computer player and scoring."""

from __future__ import annotations

from collections.abc import Sequence

from .board import Board
from .config import BEST_SCORES, HEX_RADIUS
from .hexagon import Hexagon

RED = 1
BLUE = -1


def winner_message(red: int, blue: int) -> str:
    """The text announcing the result of a finished match."""
    if red > blue:
        return f"Red is the Winner!\nWith the score {red}"
    if red < blue:
        return f"Blue is the Winner!\nWith the score {blue}"
    return "It is a Tie!"


def final_score(red: int, blue: int) -> int:
    """The score a finished match enters into the best-score table."""
    if red < blue:
        return blue
    return red


def merge_best_scores(best: Sequence[int], score: int) -> list[int]:
    """Insert a match score into the table and keep the best entries.

    A score of zero or less (an abandoned match) counts as one.
    """
    if score <= 0:
        score = 1
    return sorted([*best, score], reverse=True)[:BEST_SCORES]


class Match:
    """State of one match between red (moves first) and blue."""

    def __init__(self, with_player: bool) -> None:
        self.with_player = with_player
        self.board = Board()
        self.to_move = RED
        self._selected = Hexagon(HEX_RADIUS, 0)
        self._painted: list[Hexagon] = []

    def _cells(self) -> dict[tuple[int, int], Hexagon]:
        return {(layer, index): cell for layer, index, cell in self.board.play_cells()}

    def _clear_outlines(self) -> None:
        for cell in self._painted:
            cell.clear_outline()
        self._painted.clear()

    def counts(self) -> tuple[int, int]:
        """Number of red and blue cells on the board."""
        red, blue, _ = self.board.place()
        return red, blue

    def is_finished(self) -> bool:
        """True when the board is full or the side to move has no move left."""
        _, _, full = self.board.place()
        if full:
            return True
        for layer, index, cell in self.board.play_cells():
            if cell.team != self.to_move:
                continue
            if any(
                target is not None and not target.has_team()
                for target in self.board.to_paint(layer, index)
            ):
                return False
        return True

    def click(self, layer_num: int, hex_num: int) -> bool:
        """Handle a click on a cell; return whether it selected or moved.

        Clicking one of the mover's own cells selects it and outlines its
        targets. Clicking an outlined target completes the move: a green
        (adjacent) target copies the piece, a yellow one makes it jump.
        Every occupied neighbour of the target is then captured.
        """
        cell = self._cells().get((layer_num, hex_num))
        if cell is None or not (cell.team == self.to_move or cell.is_outlined):
            return False

        if cell.is_outlined:
            cell.set_team(self._selected.team)
            if not cell.is_green:
                self._selected.set_team(0)
            self._clear_outlines()
            for neighbour in self.board.to_capture(layer_num, hex_num):
                if neighbour is not None and neighbour.has_team():
                    neighbour.set_team(cell.team)
            self.to_move *= -1
        else:
            self._clear_outlines()
            self._selected = cell
            for slot, option in enumerate(self.board.to_paint(layer_num, hex_num)):
                if option is None:
                    continue
                if slot < 6:
                    option.set_outline_green()
                else:
                    option.set_outline_yellow()
                self._painted.append(option)

        if not self.with_player and self.to_move == BLUE:
            self.computer_move()
        return True

    def computer_move(self) -> tuple[int, int] | None:
        """Play blue greedily: the move capturing most red cells, latest on ties.

        Hands the turn back to red and returns the target's position, or
        None when blue has no move.
        """
        self.to_move *= -1
        best = -1
        origin: Hexagon | None = None
        choice: Hexagon | None = None
        choice_pos = (0, 0)
        copy_choice = False

        for layer, index, cell in self.board.play_cells():
            if cell.team != BLUE:
                continue
            for slot, target in enumerate(self.board.to_paint(layer, index)):
                if target is None or target.has_team():
                    continue
                pos = Board.get_pos(layer, index, slot)
                potential = sum(
                    1
                    for neighbour in self.board.to_capture(*pos)
                    if neighbour is not None and neighbour.team == RED
                )
                if potential >= best:
                    origin = cell
                    choice = target
                    choice_pos = pos
                    copy_choice = slot < 6
                    best = potential

        if choice is None:
            return None
        if not copy_choice and origin is not None:
            origin.set_team(0)
        choice.set_team(BLUE)
        for neighbour in self.board.to_capture(*choice_pos):
            if neighbour is not None and neighbour.team == RED:
                neighbour.set_team(BLUE)
        return choice_pos