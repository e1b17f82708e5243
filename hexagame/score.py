"""Reading and writing the table of best scores."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from .config import BEST_SCORES


def read_best_scores(path: str | Path) -> list[int]:
    """Return the stored best scores; create a zeroed file if none exists.

    Reading stops at the first token that is not an integer; missing
    entries are zero.
    """
    path = Path(path)
    top = [0] * BEST_SCORES
    try:
        text = path.read_text()
    except FileNotFoundError:
        path.write_text("0\n" * BEST_SCORES)
        return top

    for index, token in enumerate(text.split()[:BEST_SCORES]):
        try:
            top[index] = int(token)
        except ValueError:
            break
    return top


def write_best_scores(top: Sequence[int], path: str | Path) -> None:
    """Overwrite the score file with exactly the given best scores and echo them."""
    if len(top) != BEST_SCORES:
        raise ValueError(f"expected {BEST_SCORES} scores, got {len(top)}")
    lines = "".join(f"{int(value)}\n" for value in top)
    print(lines, end="")
    Path(path).write_text(lines)