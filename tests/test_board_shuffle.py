from collections import Counter

import pytest

from memoryboard.events.bus import EVENT_SHUFFLE, EVENT_SHUFFLED
from memoryboard.factories.example import EXAMPLE_LAYOUT, ExampleTileFactory
from memoryboard.systems.board import Board
from memoryboard.utils.random_source import XorShift128
from tests.helpers import EventRecorder, LabelTileFactory, numbered_layout, run

# Cell order after Fisher-Yates passes over a 16-cell board from the default seed.
ONE_PASS = [3, 4, 9, 13, 2, 6, 15, 5, 10, 7, 0, 12, 14, 1, 8, 11]
THREE_PASSES = [8, 4, 15, 7, 11, 9, 2, 10, 6, 12, 0, 13, 14, 1, 5, 3]


def _numbered_board() -> Board:
    board = Board(4, 4)
    run(board.setup(LabelTileFactory(), numbered_layout(4, 4)))
    return board


def test_shuffle_replays_recorded_permutation():
    board = _numbered_board()
    run(board.shuffle(1))
    assert board.tiles == [str(i) for i in ONE_PASS]


def test_default_shuffle_runs_three_passes():
    board = _numbered_board()
    run(board.shuffle())
    assert board.tiles == [str(i) for i in THREE_PASSES]


def test_shuffle_broadcasts_each_pass_then_completion():
    board = _numbered_board()
    recorder = EventRecorder(board)
    run(board.shuffle(4))

    assert recorder.types == [EVENT_SHUFFLE] * 4 + [EVENT_SHUFFLED]
    changes = recorder.of_type(EVENT_SHUFFLE)
    assert changes[0].before == tuple(str(i) for i in range(16))
    for previous, current in zip(changes, changes[1:]):
        assert current.before == previous.after
    assert list(changes[-1].after) == board.tiles
    done = recorder.of_type(EVENT_SHUFFLED)[0]
    assert done.before is None and done.after is None


def test_shuffle_preserves_the_tiles():
    board = Board(4, 4)
    run(board.setup(ExampleTileFactory(), EXAMPLE_LAYOUT))
    before = board.tiles
    run(board.shuffle(5))
    after = board.tiles

    assert Counter(map(id, before)) == Counter(map(id, after))
    assert Counter(tile.type_name for tile in after) == Counter(label for row in EXAMPLE_LAYOUT for label in row)


def test_zero_iterations_only_reports_completion():
    board = _numbered_board()
    recorder = EventRecorder(board)
    run(board.shuffle(0))
    assert recorder.types == [EVENT_SHUFFLED]
    assert board.tiles == [str(i) for i in range(16)]


def test_negative_iterations_rejected():
    board = _numbered_board()
    with pytest.raises(ValueError):
        run(board.shuffle(-1))


def test_boards_with_own_generators_shuffle_identically():
    first = _numbered_board()
    second = _numbered_board()
    run(first.shuffle(2))
    run(second.shuffle(2))
    assert first.tiles == second.tiles


def test_injected_generator_drives_shuffle():
    rng = XorShift128()
    board = Board(4, 4, rng=rng)
    run(board.setup(LabelTileFactory(), numbered_layout(4, 4)))
    run(board.shuffle(1))
    assert board.tiles == [str(i) for i in ONE_PASS]
    assert rng.state != (1, 2)


def test_shuffle_keeps_selection_references():
    board = _numbered_board()
    board.select(0, 0)
    run(board.shuffle(1))
    assert board.first_selection == "0"
