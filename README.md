# hexagame

A board game for one screen, played on a field of hexagons. Red and Blue
each start with pieces in the corners of the field. They take turns to move.

## Rules

- Click one of your own hexagons to see where it can go.
  - Empty cells next to it get a **green** outline. Moving there *copies*
    the piece, so the original stays where it was.
  - Empty cells two steps away get a **yellow** outline. Moving there makes
    the piece *jump*, and the original cell becomes empty.
- Click an outlined cell to move there. Every occupied cell that touches the
  cell you landed on turns to your colour.
- The game ends when the field is full, or when the player to move has no
  empty cell to go to. The side with more hexagons wins.

Red always moves first. In **PVE** mode the computer plays Blue. It looks at
every move open to it and picks the one that turns the most red cells blue.
When several moves are equally good it takes the last one it found.

## Installation

```
pip install .
```

This installs the game and its one dependency, pygame.

## Playing

```
hexagame
hexagame --assets /path/to/assets
```

The menu offers three buttons:

- **PVP**: two players at one screen.
- **PVE**: one player against the computer.
- **EXIT**: quit.

During a match the Red and Blue counts are shown on the right. **EXIT** at
the bottom left ends the match early. Closing the window also ends it. When a
match finishes normally, a results screen names the winner and the score, or
announces a tie.

## Assets and the score table

`--assets` names the directory that holds the game's files. Without it the
game uses the `assets` directory inside the installed `hexagame` package. It
looks there for:

- `space.jpg`: the background picture. If it is missing or unreadable the
  background is plain black.
- `Fonts/Catalina Village demo.ttf`: the font. If it cannot be loaded the
  game uses pygame's default font.
- `scores.txt`: the five best scores, one number per line.

The package does not include the picture or the font. Supply them yourself
or play with the fallbacks.

The game creates the assets directory if it does not exist. On first start
it also creates `scores.txt`, filled with zeros. The menu lists the stored
scores.

After each match the new score goes into the table and only the five highest
are kept. The score of a win is the winner's count. The score of a tie is
Red's count. A match ended early counts as 0, which is recorded as 1. The
updated table is written to `scores.txt` and also printed to standard output.

## Using the pieces in code

- `hexagame.engine.Match(with_player)` holds the state of a match.
  - `click(layer, index)` selects a cell or completes a move.
  - `computer_move()` plays Blue.
  - `counts()` returns the Red and Blue counts.
  - `is_finished()` reports whether the match is over.
- `hexagame.engine` also provides `winner_message`, `final_score` and
  `merge_best_scores`.
- `hexagame.board.Board` is the field.
  - `to_paint` returns the 18 cells reachable from a cell.
  - `to_capture` returns the 6 cells around a cell.
  - `play_cells` yields the cells of the field.
  - `place` lays the cells out on screen and returns the Red count, the Blue
    count and whether the field is full.
- `hexagame.score.read_best_scores(path)` and
  `hexagame.score.write_best_scores(top, path)` read and write the score
  table.
- `hexagame.game.main()` starts the game.

## Running the tests

```
pip install .[test]
pytest
```