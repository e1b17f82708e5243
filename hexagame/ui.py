"""Text labels drawn on pygame surfaces."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path

import pygame


class TextStyle(enum.Flag):
    REGULAR = 0
    BOLD = 1
    ITALIC = 2
    UNDERLINED = 4
    STRIKE_THROUGH = 8


@dataclass
class Text:
    """A possibly multi-line label at a fixed position."""

    font: pygame.font.Font
    string: str
    color: tuple[int, int, int]
    position: tuple[float, float]

    @property
    def lines(self) -> list[str]:
        return self.string.split("\n")

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """Rectangle (x, y, width, height) covered by the rendered text."""
        x, y = self.position
        width = max(self.font.size(line)[0] for line in self.lines)
        height = self.font.get_linesize() * len(self.lines)
        return (x, y, float(width), float(height))

    def contains(self, point: tuple[float, float]) -> bool:
        x, y, width, height = self.bounds
        px, py = point
        return x <= px < x + width and y <= py < y + height

    def set_string(self, string: str) -> None:
        self.string = string

    def draw(self, surface: pygame.Surface) -> None:
        x, y = self.position
        step = self.font.get_linesize()
        for row, line in enumerate(self.lines):
            if line:
                rendered = self.font.render(line, True, self.color)
                surface.blit(rendered, (x, y + row * step))


def _load_font(font_path: str | Path | None, size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    if font_path is not None:
        try:
            return pygame.font.Font(str(font_path), size)
        except (FileNotFoundError, OSError):
            pass
    return pygame.font.Font(None, size)


def make_text(
    font_path: str | Path | None,
    string: str,
    size: int,
    color: tuple[int, int, int],
    pos: tuple[float, float],
    style: TextStyle = TextStyle.REGULAR,
) -> Text:
    """Build a label; an unreadable font file falls back to the default font."""
    font = _load_font(font_path, size)
    font.set_bold(TextStyle.BOLD in style)
    font.set_italic(TextStyle.ITALIC in style)
    font.set_underline(TextStyle.UNDERLINED in style)
    if TextStyle.STRIKE_THROUGH in style:
        font.strikethrough = True
    return Text(font=font, string=string, color=color, position=(float(pos[0]), float(pos[1])))