# tests/unit/test_board.py

import random

import numpy as np
import pytest

from knight_tour.board import Board
from knight_tour.config import RANDOM_RESTARTS, SearchConfig
from knight_tour.moves import BOARD_SIZE, SQUARE_COUNT
from knight_tour.types import Coord
from knight_tour.utils.tour import count_visited, is_valid_tour, tour_path
from tests.test_utils import FrameRecorder, empty_grid, make_board


def test_new_board_is_empty() -> None:
    board = make_board()
    assert np.array_equal(board.view(), empty_grid())
    assert board.move_count == 0
    assert board.steps == 0
    assert board.attempts == 0


@pytest.mark.parametrize("start", [(0, 0), (7, 7)])
def test_warnsdorff_finds_tour(start: Coord) -> None:
    board = make_board()
    assert board.attempt_tour(*start) is True
    grid = board.view()
    assert is_valid_tour(grid)
    assert board.read_cell(*start) == 1
    assert board.move_count == SQUARE_COUNT
    assert board.attempts == 1
    assert tour_path(grid)[0] == start


def test_tour_values_are_a_permutation() -> None:
    board = make_board()
    assert board.attempt_tour(0, 0)
    values = sorted(
        board.read_cell(row, col)
        for row in range(BOARD_SIZE)
        for col in range(BOARD_SIZE)
    )
    assert values == list(range(1, SQUARE_COUNT + 1))


def test_warnsdorff_is_deterministic() -> None:
    first = make_board()
    second = make_board()
    assert first.attempt_tour(0, 0) == second.attempt_tour(0, 0)
    assert np.array_equal(first.view(), second.view())
    assert first.steps == second.steps


def test_repeated_attempts_on_same_board_are_identical() -> None:
    board = make_board()
    assert board.attempt_tour(0, 0)
    first = board.snapshot()
    assert board.attempt_tour(0, 0)
    assert np.array_equal(first, board.view())


@pytest.mark.parametrize("start", [(-1, 0), (0, 8), (8, 0), (0, -1), (8, 8)])
def test_invalid_start_leaves_fresh_grid_untouched(start: Coord) -> None:
    board = make_board()
    assert board.attempt_tour(*start) is False
    assert np.array_equal(board.view(), empty_grid())
    assert board.move_count == 0


def test_invalid_start_keeps_previous_tour() -> None:
    board = make_board()
    assert board.attempt_tour(0, 0)
    before = board.snapshot()
    assert board.attempt_tour(-1, 0) is False
    assert np.array_equal(board.view(), before)
    assert board.move_count == SQUARE_COUNT


def test_reset_is_idempotent() -> None:
    board = make_board()
    board.attempt_tour(0, 0)
    board.reset()
    once = board.snapshot()
    board.reset()
    assert np.array_equal(once, board.view())
    assert np.array_equal(once, empty_grid())
    assert board.move_count == 0


def test_read_cell_out_of_bounds_raises() -> None:
    board = make_board()
    with pytest.raises(IndexError):
        board.read_cell(8, 0)
    with pytest.raises(IndexError):
        board.read_cell(0, -1)


def test_view_is_read_only() -> None:
    board = make_board()
    grid = board.view()
    with pytest.raises(ValueError):
        grid[0, 0] = 5
    assert board.read_cell(0, 0) == 0


def test_snapshot_is_independent_of_later_changes() -> None:
    board = make_board()
    board.attempt_tour(0, 0)
    snapshot = board.snapshot()
    board.reset()
    assert count_visited(snapshot) == SQUARE_COUNT
    assert count_visited(board.view()) == 0


def test_accessibility_count_on_empty_board() -> None:
    board = make_board()
    assert board.accessibility_count(0, 0) == 2
    assert board.accessibility_count(0, 1) == 3
    assert board.accessibility_count(1, 1) == 4
    assert board.accessibility_count(3, 3) == 8


def test_accessibility_count_on_full_board_is_zero() -> None:
    board = make_board()
    assert board.attempt_tour(0, 0)
    assert all(
        board.accessibility_count(row, col) == 0
        for row in range(BOARD_SIZE)
        for col in range(BOARD_SIZE)
    )


def test_accessibility_count_is_pure_during_search() -> None:
    checked = []

    def check_frame(board: Board) -> None:
        if len(checked) >= 200:
            return
        before = board.snapshot()
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                first = board.accessibility_count(row, col)
                assert board.accessibility_count(row, col) == first
        assert np.array_equal(before, board.view())
        checked.append(board.move_count)

    board = Board(SearchConfig(animate=True), on_frame=check_frame)
    assert board.attempt_tour(0, 0)
    assert len(checked) >= SQUARE_COUNT


def test_candidate_moves_skip_visited_squares() -> None:
    board = make_board()
    assert board.candidate_moves(0, 0) == [(1, 2), (2, 1)]
    assert board.is_valid_move(1, 2)
    assert not board.is_valid_move(8, 1)
    assert board.attempt_tour(0, 0)
    assert board.candidate_moves(0, 0) == []
    assert not board.is_valid_move(1, 2)


def test_path_invariant_holds_at_every_frame() -> None:
    recorder = FrameRecorder(check_invariant=True, keep_grids=False)
    board = Board(SearchConfig(animate=True), on_frame=recorder)
    assert board.attempt_tour(7, 7)
    assert recorder.invariant_violations == 0
    assert recorder.frames


def test_frames_cover_every_placement_and_undo() -> None:
    recorder = FrameRecorder(keep_grids=False)
    board = Board(SearchConfig(animate=True, animation_delay_ms=0), on_frame=recorder)
    assert board.attempt_tour(0, 0)
    placements = board.steps
    undos = placements - (SQUARE_COUNT - 1)
    assert len(recorder.frames) == 1 + placements + undos
    assert recorder.frames[0][1] == 1
    assert recorder.frames[-1][1] == SQUARE_COUNT


def test_no_frames_without_animation() -> None:
    recorder = FrameRecorder()
    board = Board(SearchConfig(animate=False), on_frame=recorder)
    assert board.attempt_tour(0, 0)
    assert recorder.frames == []


def test_random_mode_with_seed_is_deterministic() -> None:
    config = SearchConfig(use_warnsdorff=False, seed=1234, step_limit=2_000)
    first = Board(config)
    second = Board(config)
    first_result = first.attempt_tour(0, 0)
    second_result = second.attempt_tour(0, 0)
    assert first_result == second_result
    assert np.array_equal(first.view(), second.view())
    assert first.steps == second.steps


def test_injected_rng_matches_seeded_config() -> None:
    config = SearchConfig(use_warnsdorff=False, seed=99, step_limit=500)
    seeded = Board(config)
    injected = Board(SearchConfig(use_warnsdorff=False, step_limit=500), rng=random.Random(99))
    assert seeded.attempt_tour(3, 4) == injected.attempt_tour(3, 4)
    assert np.array_equal(seeded.view(), injected.view())


def test_random_mode_failure_leaves_only_start_square() -> None:
    # 20 placements can never cover the 63 squares after the start
    board = make_board(use_warnsdorff=False, seed=7, step_limit=20)
    assert board.attempt_tour(2, 3) is False
    assert count_visited(board.view()) == 1
    assert board.read_cell(2, 3) == 1
    assert board.move_count == 1
    assert board.attempts == RANDOM_RESTARTS


def test_random_mode_restarts_ten_times() -> None:
    recorder = FrameRecorder(keep_grids=False)
    config = SearchConfig(animate=True, use_warnsdorff=False, seed=3, step_limit=20)
    board = Board(config, on_frame=recorder)
    assert board.attempt_tour(0, 0) is False
    assert board.attempts == RANDOM_RESTARTS
    # restarts do not redraw the start square
    assert recorder.attempt_starts == 1
    assert recorder.frames[0] == (0, 1, None)


def test_warnsdorff_makes_a_single_attempt() -> None:
    recorder = FrameRecorder(keep_grids=False)
    config = SearchConfig(animate=True, step_limit=5)
    board = Board(config, on_frame=recorder)
    assert board.attempt_tour(0, 0) is False
    assert recorder.attempt_starts == 1
    assert board.attempts == 1


def test_step_limit_bounds_work_and_unwinds() -> None:
    board = make_board(step_limit=10)
    assert board.attempt_tour(0, 0) is False
    assert board.steps == 10
    assert count_visited(board.view()) == 1
    assert board.read_cell(0, 0) == 1


def test_step_limit_above_need_does_not_change_result() -> None:
    unbounded = make_board()
    assert unbounded.attempt_tour(0, 0)
    bounded = make_board(step_limit=unbounded.steps)
    assert bounded.attempt_tour(0, 0)
    assert np.array_equal(unbounded.view(), bounded.view())


def test_invalid_start_resets_attempt_count() -> None:
    board = make_board()
    assert board.attempt_tour(0, 0)
    assert board.attempts == 1
    assert board.attempt_tour(8, 0) is False
    assert board.attempts == 0
