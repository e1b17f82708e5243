import pygame
import pytest

from hexagame.board import Board
from hexagame.config import HEX_STEP_X, HEX_STEP_Y, HEX_X_START


@pytest.fixture
def board():
    return Board()


def _cells(board):
    return {(layer, num): cell for layer, num, cell in board.play_cells()}


def test_initial_tally(board):
    red, blue, finished = board.place()
    assert (red, blue, finished) == (3, 3, False)


def test_tally_matches_play_cells(board):
    red, blue, _ = board.place()
    teams = [cell.team for _, _, cell in board.play_cells()]
    assert red == teams.count(1)
    assert blue == teams.count(-1)


def test_play_cells_are_in_playable_rows(board):
    for layer, num, cell in board.play_cells():
        assert 1 <= layer <= 9
        assert 2 <= num <= 10
        assert cell is not None


def test_full_board_is_finished(board):
    for _, _, cell in board.play_cells():
        cell.set_team(1)
    red, blue, finished = board.place()
    assert finished is True
    assert blue == 0
    assert red == len(list(board.play_cells()))


def test_first_cell_position(board):
    board.place()
    first = board.draw_layers[0][2]
    assert first.position == pytest.approx((HEX_X_START + 2 * HEX_STEP_X, 100.0))


def test_rows_step_down(board):
    board.place()
    for row, layer in enumerate(board.draw_layers):
        for cell in layer:
            if cell is not None:
                assert cell.position[1] == pytest.approx(100.0 + row * HEX_STEP_Y)


def test_cells_in_row_step_right(board):
    board.place()
    for layer in board.draw_layers:
        xs = [(num, cell.position[0]) for num, cell in enumerate(layer) if cell is not None]
        for (n1, x1), (n2, x2) in zip(xs, xs[1:]):
            assert x2 - x1 == pytest.approx((n2 - n1) * HEX_STEP_X)


def test_capture_is_prefix_of_paint(board):
    for layer, num, _ in board.play_cells():
        paint = board.to_paint(layer, num)
        capture = board.to_capture(layer, num)
        assert len(paint) == 18
        assert len(capture) == 6
        assert all(a is b for a, b in zip(capture, paint[:6]))


def test_get_pos_agrees_with_paint(board):
    cells = _cells(board)
    for layer, num, _ in board.play_cells():
        paint = board.to_paint(layer, num)
        for slot in range(15):
            target = cells.get(board.get_pos(layer, num, slot))
            assert target is paint[slot]


def test_adjacency_is_symmetric(board):
    cells = _cells(board)
    for layer, num, cell in board.play_cells():
        for neighbour in board.to_capture(layer, num):
            if neighbour is None:
                continue
            key = next(k for k, v in cells.items() if v is neighbour)
            assert any(c is cell for c in board.to_capture(*key))


def test_cell_is_not_its_own_neighbour(board):
    for layer, num, cell in board.play_cells():
        assert all(c is not cell for c in board.to_paint(layer, num))


def test_unknown_layer_gives_empty_neighbourhoods(board):
    assert board.to_paint(0, 3) == [None] * 18
    assert board.to_capture(10, 3) == [None] * 6
    assert board.to_paint(-1, 4) == [None] * 18


def test_get_pos_defaults():
    assert Board.get_pos(0, 5, 3) == (0, 0)
    assert Board.get_pos(10, 5, 3) == (0, 0)
    assert Board.get_pos(1, 5, 18) == (0, 0)
    assert Board.get_pos(4, 5, -1) == (0, 0)


def test_get_pos_slot_seventeen():
    assert Board.get_pos(2, 5, 17) == (3, 5)
    assert Board.get_pos(5, 5, 17) == (3, 5)
    assert Board.get_pos(6, 5, 17) == (3, 6)
    assert Board.get_pos(8, 5, 17) == (3, 7)


def test_get_pos_adjacent_slots():
    assert Board.get_pos(3, 4, 0) == (3, 3)
    assert Board.get_pos(3, 4, 1) == (3, 5)
    assert Board.get_pos(5, 4, 2) == (6, 3)
    assert Board.get_pos(6, 4, 4) == (5, 5)


def test_draw_paints_team_colour(board):
    surface = pygame.Surface((800, 600))
    tally = board.draw(surface)
    assert tally == board.place()
    red_cell = board.draw_layers[0][2]
    x, y = red_cell.position
    r = red_cell.radius
    assert tuple(surface.get_at((int(x + r), int(y + r))))[:3] == (255, 0, 0)
    blue_cell = board.draw_layers[0][6]
    bx, by = blue_cell.position
    assert tuple(surface.get_at((int(bx + r), int(by + r))))[:3] == (0, 0, 255)


def test_set_team_shows_in_tally(board):
    cell = board.draw_layers[1][3]
    before = board.place()
    cell.set_team(-1)
    after = board.place()
    assert after[1] == before[1] + 1
    assert after[0] == before[0]