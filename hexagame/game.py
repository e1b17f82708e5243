"""The windowed game: menu, match screen and results screen."""

from __future__ import annotations

import argparse
from pathlib import Path

import pygame

from .board import Board
from .config import (
    ASSETS_DIR,
    BEST_SCORES,
    FONT_FILE,
    SCORE_TXT,
    SPACE_IMG,
    WINDOW_H,
    WINDOW_W,
)
from .engine import Match, final_score, merge_best_scores, winner_message
from .score import read_best_scores, write_best_scores
from .ui import Text, TextStyle, make_text

GREEN = (0, 255, 0)
RED = (255, 0, 0)
BLUE = (0, 0, 255)
FPS = 60


def hex_at(board: Board, point: tuple[float, float]) -> tuple[int, int] | None:
    """Layer and index of the first playable cell whose click area holds the point."""
    px, py = point
    for layer, index, cell in board.play_cells():
        x, y = cell.position
        size = cell.radius * 2.0 - 5.0
        if x <= px < x + size and y <= py < y + size:
            return layer, index
    return None


def _left_click(event: pygame.event.Event) -> bool:
    return event.type == pygame.MOUSEBUTTONDOWN and event.button == 1


class Game:
    """Runs the whole program: menu, one match, score table and results."""

    def __init__(self, assets_dir: str | Path | None = None) -> None:
        self.assets_dir = Path(assets_dir) if assets_dir is not None else ASSETS_DIR
        self.font_path = self.assets_dir / FONT_FILE
        self.background_path = self.assets_dir / SPACE_IMG
        self.score_path = self.assets_dir / SCORE_TXT
        self._clock: pygame.time.Clock | None = None

    def _text(self, string, size, color, pos, style=TextStyle.BOLD) -> Text:
        return make_text(self.font_path, string, size, color, pos, style)

    def _background(self) -> pygame.Surface | None:
        try:
            return pygame.image.load(str(self.background_path))
        except (pygame.error, FileNotFoundError, OSError):
            return None

    def _clear(self, screen: pygame.Surface, background: pygame.Surface | None) -> None:
        screen.fill((0, 0, 0))
        if background is not None:
            screen.blit(background, (0, 0))

    def _tick(self) -> None:
        pygame.display.flip()
        if self._clock is not None:
            self._clock.tick(FPS)

    def _menu(self, screen, background, best: list[int]) -> bool | None:
        """Show the menu; True for two players, False against the computer, None to quit."""
        pygame.display.set_caption("Menu")
        player = self._text("PVP", 50, GREEN, (250, 300))
        computer = self._text("PVE", 50, GREEN, (450, 300))
        name = self._text("Hexagon", 100, RED, (200, 100), TextStyle.ITALIC)
        exit_button = self._text("EXIT", 50, GREEN, (630, 500))
        best_label = self._text("Best Scores", 30, BLUE, (40, 360))
        score_text = self._text("", 30, BLUE, (100, 400))

        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return None
                if _left_click(event):
                    if player.contains(event.pos):
                        return True
                    if computer.contains(event.pos):
                        return False
                    if exit_button.contains(event.pos):
                        return None

            self._clear(screen, background)
            for label in (player, computer, name, exit_button, best_label):
                label.draw(screen)
            for row, value in enumerate(best[:BEST_SCORES]):
                score_text.position = (100.0, 400.0 + 35.0 * row)
                score_text.set_string(str(value))
                score_text.draw(screen)
            self._tick()

    def _play(self, screen, background, match: Match) -> tuple[int, str]:
        """Run a match; return its score and winner text (empty if abandoned)."""
        pygame.display.set_caption("Game")
        blue_text = self._text("0", 50, BLUE, (680, 500))
        red_text = self._text("0", 50, RED, (680, 440))
        exit_button = self._text("EXIT", 50, GREEN, (100, 500))

        while True:
            self._clear(screen, background)
            red, blue, _ = match.board.draw(screen)
            if match.is_finished():
                return final_score(red, blue), winner_message(red, blue)

            blue_text.set_string(str(blue))
            red_text.set_string(str(red))
            for label in (blue_text, red_text, exit_button):
                label.draw(screen)
            self._tick()

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0, ""
                if _left_click(event):
                    if exit_button.contains(event.pos):
                        return 0, ""
                    position = hex_at(match.board, event.pos)
                    if position is not None:
                        match.click(*position)

    def _results(self, screen, background, winner: str) -> None:
        pygame.display.set_caption("Results")
        results = self._text(winner, 70, GREEN, (120, 195))
        exit_button = self._text("EXIT", 50, GREEN, (630, 500))
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                if _left_click(event) and exit_button.contains(event.pos):
                    return
            self._clear(screen, background)
            results.draw(screen)
            exit_button.draw(screen)
            self._tick()

    def run(self) -> int:
        """Play one session and return the exit status."""
        self.score_path.parent.mkdir(parents=True, exist_ok=True)
        best = read_best_scores(self.score_path)
        pygame.init()
        try:
            screen = pygame.display.set_mode((WINDOW_W, WINDOW_H))
            self._clock = pygame.time.Clock()
            background = self._background()
            mode = self._menu(screen, background, best)
            if mode is None:
                return 0
            score, winner = self._play(screen, background, Match(with_player=mode))
            write_best_scores(merge_best_scores(best, score), self.score_path)
            if winner:
                self._results(screen, background, winner)
            return 0
        finally:
            pygame.quit()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="hexagame", description="Hexagon board game.")
    parser.add_argument(
        "--assets",
        type=Path,
        default=None,
        help="directory holding the font, background image and score table",
    )
    args = parser.parse_args(argv)
    return Game(args.assets).run()


if __name__ == "__main__":
    raise SystemExit(main())