import random

import pytest

from spritelab.puzzle import Direction, Rect, SlidingPuzzle


def _tiles(puzzle):
    return sorted(
        puzzle.tile_at(r, c) for r in range(puzzle.rows) for c in range(puzzle.cols)
    )


def test_new_puzzle_is_solved_with_blank_bottom_right():
    p = SlidingPuzzle(3, 4, 640, 480, random.Random(1))
    assert p.is_solved()
    assert p.blank == (2, 3)
    assert p.tile_at(2, 3) == p.blank_tile == 11
    assert p.moves == 1


def test_right_key_moves_blank_left():
    p = SlidingPuzzle(3, 4, 640, 480, random.Random(1))
    assert p.slide(Direction.RIGHT) is True
    assert p.blank == (2, 2)
    assert p.tile_at(2, 3) == 10
    assert p.tile_at(2, 2) == p.blank_tile
    assert not p.is_solved()
    assert p.moves == 2


def test_slide_against_edge_does_nothing():
    p = SlidingPuzzle(3, 4, 640, 480, random.Random(1))
    assert p.slide(Direction.LEFT) is False
    assert p.slide(Direction.UP) is False
    assert p.blank == (2, 3)
    assert p.moves == 1
    assert p.is_solved()


def test_up_slide_is_not_counted():
    p = SlidingPuzzle(3, 4, 640, 480, random.Random(1))
    assert p.slide(Direction.DOWN) is True
    moves = p.moves
    assert p.slide(Direction.UP) is True
    assert p.moves == moves
    assert p.is_solved()


def test_inverse_moves_restore_solution():
    p = SlidingPuzzle(4, 3, 640, 480, random.Random(1))
    for d in (Direction.RIGHT, Direction.DOWN, Direction.RIGHT):
        assert p.slide(d)
    assert not p.is_solved()
    for d in (Direction.LEFT, Direction.UP, Direction.LEFT):
        assert p.slide(d)
    assert p.is_solved()


def test_shuffle_keeps_a_permutation():
    p = SlidingPuzzle(3, 4, 640, 480, random.Random(7))
    p.shuffle(2)
    assert _tiles(p) == list(range(12))
    row, col = p.blank
    assert p.tile_at(row, col) == p.blank_tile


def test_shuffle_is_deterministic_for_seed():
    a = SlidingPuzzle(3, 3, 640, 480, random.Random(42))
    b = SlidingPuzzle(3, 3, 640, 480, random.Random(42))
    a.shuffle(3)
    b.shuffle(3)
    layout_a = [[a.tile_at(r, c) for c in range(3)] for r in range(3)]
    layout_b = [[b.tile_at(r, c) for c in range(3)] for r in range(3)]
    assert layout_a == layout_b
    assert a.blank == b.blank


def test_shuffle_does_not_change_move_count():
    p = SlidingPuzzle(3, 4, 640, 480, random.Random(3))
    p.shuffle(1)
    assert p.moves == 1


def test_adopt_current_layout_makes_board_solved():
    p = SlidingPuzzle(3, 4, 640, 480, random.Random(5))
    p.shuffle(1)
    p.adopt_current_layout()
    assert p.is_solved()
    p.slide(Direction.RIGHT) or p.slide(Direction.LEFT)
    assert not p.is_solved()


def test_tile_rect_of_first_tile():
    p = SlidingPuzzle(3, 4, 640, 480, random.Random(1))
    assert p.tile_rect(0) == Rect(0, 0, 159, 159)


def test_tile_rect_matches_home_cell_position():
    p = SlidingPuzzle(4, 3, 640, 480, random.Random(1))
    for tile in range(12):
        row, col = divmod(tile, 3)
        rect = p.tile_rect(tile)
        assert (float(rect.left), float(rect.top)) == p.cell_position(row, col)
        assert rect.right - rect.left + 1 == p.block_width
        assert rect.bottom - rect.top + 1 == p.block_height


def test_cell_position_origin():
    p = SlidingPuzzle(3, 4, 640, 480, random.Random(1))
    assert p.cell_position(0, 0) == (0.0, 0.0)


def test_out_of_range_lookups_raise():
    p = SlidingPuzzle(3, 4, 640, 480, random.Random(1))
    with pytest.raises(IndexError):
        p.tile_rect(12)
    with pytest.raises(IndexError):
        p.tile_at(3, 0)
    with pytest.raises(IndexError):
        p.cell_position(0, -1)


def test_empty_board_rejected():
    with pytest.raises(ValueError):
        SlidingPuzzle(0, 4, 640, 480, random.Random(1))