import pytest

from hexagame.board import Board
from hexagame.game import Game, hex_at, main


@pytest.fixture
def placed_board():
    board = Board()
    board.place()
    return board


def test_hex_at_finds_every_cell_by_its_centre(placed_board):
    for layer, index, cell in placed_board.play_cells():
        x, y = cell.position
        centre = (x + cell.radius, y + cell.radius)
        assert hex_at(placed_board, centre) == (layer, index)


def test_hex_at_top_left_corner(placed_board):
    cell = next(c for l, i, c in placed_board.play_cells() if (l, i) == (1, 2))
    x, y = cell.position
    assert hex_at(placed_board, (x, y)) == (1, 2)


def test_hex_at_outside_board(placed_board):
    assert hex_at(placed_board, (0.0, 0.0)) is None
    assert hex_at(placed_board, (790.0, 590.0)) is None


def test_hex_at_excludes_far_edge(placed_board):
    cell = next(c for l, i, c in placed_board.play_cells() if (l, i) == (1, 6))
    x, y = cell.position
    size = cell.radius * 2.0 - 5.0
    assert hex_at(placed_board, (x + size, y + 10.0)) is None


def test_game_paths_follow_assets_dir(tmp_path):
    game = Game(tmp_path)
    assert game.score_path == tmp_path / "scores.txt"
    assert game.background_path == tmp_path / "space.jpg"
    assert game.font_path.parent.parent == tmp_path


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0