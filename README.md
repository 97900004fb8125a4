# spritelab

This package holds the state and rules of a few small 2D sprite games and
effects. It does no drawing, opens no window and reads no input devices. A
front end feeds each object its input, such as held keys or the time in
milliseconds. It then draws whatever the object reports: rectangles,
positions, text and pixel colours.

It uses only the standard library.

## Modules

- `spritelab.puzzle`: the sliding-tile picture puzzle.
  - `SlidingPuzzle(rows=3, cols=4, width=640, height=480, rng=None)` starts solved.
  - `shuffle(passes=None)` mixes it with random legal blank moves.
  - `slide(Direction.RIGHT | LEFT | DOWN | UP)` moves the tile next to the blank. It returns `True` if a tile moved.
  - `is_solved()` reports whether the board is solved.
  - `tile_rect(tile)` gives the inclusive source `Rect` of a tile, and `cell_position(row, col)` gives where a cell is drawn.
  - `tile_at(row, col)` reads a cell. The blank is `blank_tile`.
  - `adopt_current_layout()` takes the current board as the solution.
  - `moves` counts the slides that count towards the score.
- `spritelab.puzzle_game`: `PuzzleGame(score_path="Data/Score.txt", rng=None)` is the whole puzzle game.
  - It has a start screen, play and a score screen (`Phase`).
  - Call `update(keys)` once per frame with the set of `Key` values held down. A key acts on the frame it goes down. The method returns the phase.
  - `start_screen_text()` and `score_screen_lines()` give the text to show.
  - A solved puzzle appends a line to the score file and reloads the best ten. If the file cannot be written, nothing is recorded.
- `spritelab.scores`: the plain-text score file.
  - `ScoreEntry` holds one line, and `format_line()` writes it out.
  - `parse_score_line(line)` reads one line.
  - `read_scores(path, limit=10)` returns the best entries, highest first. A missing file gives `[]`.
  - `append_score(path, moves, when=None)` adds a line with the time in UTC.
- `spritelab.snake`: `SnakeGame(rng=None)` is a snake game on a 20-pixel grid, 480 × 480.
  - `change_level(delta)` sets the difficulty, wrapping from 1 to 4. `level_speed(level)` gives the milliseconds between moves.
  - `start()` begins a game, and `steer(Heading...)` sets the direction.
  - `tick(now)` steps the snake when its delay has passed. `step()` moves it one cell at once.
  - `return_to_intro()` goes back to the start screen.
  - The game has food and a growth item. Running into a wall or the tail ends the game.
  - `body`, `food` and `score` describe what to draw.
- `spritelab.sheet`: sprite-sheet helpers.
  - `grid_cell(width, height, columns, rows, column, row)` gives one cell of an evenly split sheet.
  - `tile_positions(tile_width, count, y)` lays out a row of tiles.
  - `usable_texture_names(names)` keeps the leading names that are long enough to be file names.
- `spritelab.particles`: `ParticleSystem(width=1024, height=768, count=4000, rng=None)` is a fountain of `Particle`s.
  - Particles respawn from the emitter when they leave the screen.
  - `move_emitter(dx, dy)` moves the emitter and `update()` advances one frame.
  - `plot()` returns a `{(x, y): colour}` mapping.
  - `xrgb(r, g, b)` packs an opaque ARGB colour.
- `spritelab.bitmap`: `parse_bitmap(data)` and `read_bitmap(path)` read the headers of an uncompressed BMP file into a `BitmapInfo`.
  - It holds the width, height, bit count, pixel offset, the info-header bytes and the raw pixel bytes.
  - Bad input raises `ValueError`.
- `spritelab.transform`: `Matrix4` is a row-vector 4×4 matrix.
  - It has `identity()`, `scaling()`, `rotation_z()` and `translation()`.
  - `a @ b` applies `a` first, then `b`.
  - `transform_point(x, y)` maps a point.
  - `mirrored_quadrants()` gives four mirrored half-size placements, and `spinning_transform(angle)` gives a stretched copy spinning about its centre.
- `spritelab.motion`: time-driven motion.
  - `StripAnimator.update(now)` steps a frame window along an animation strip.
  - `frame_rect(time_ms, frame_width, frame_count, height, speed=120.0)` picks a looping frame.
  - `orbit_position(time_ms)` gives a point on an orbit.
  - `SpiralMover.step()` moves an object along an opening spiral.

## Example

```python
import random
from spritelab.puzzle import Direction, SlidingPuzzle

puzzle = SlidingPuzzle(3, 4, 640, 480, random.Random(1))
print(puzzle.is_solved())           # True
puzzle.shuffle(1)
puzzle.slide(Direction.RIGHT)
tile = puzzle.tile_at(0, 0)
print(tile, puzzle.tile_rect(tile), puzzle.cell_position(0, 0))
```

```python
import random
from spritelab.snake import Heading, SnakeGame

game = SnakeGame(random.Random(7))
game.change_level(+1)               # level 1: a move every 200 ms
game.start()
game.steer(Heading.RIGHT)
for now in range(0, 2000, 50):
    game.tick(now)
print(game.phase, game.body[0], game.score)
```

## What it does not do

There is no command to run and no window, drawing, sound or texture loading.
The classes only keep game state. Showing it on screen and reading the keyboard
or mouse are left to the program that uses them.

## Tests

```
pip install -e .[test]
pytest
```