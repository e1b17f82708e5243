"""Window geometry, board layout and asset locations."""

from pathlib import Path

WINDOW_W = 800
WINDOW_H = 600

HEX_RADIUS = 25.0
HEX_STEP_X = 48.0
HEX_STEP_Y = 41.0
HEX_X_START = 200.0
HEX_OFFSET = 23.3

ASSETS_DIR = Path(__file__).resolve().parent / "assets"
FONT_FILE = "Fonts/Catalina Village demo.ttf"
SPACE_IMG = "space.jpg"
SCORE_TXT = "scores.txt"

BEST_SCORES = 5