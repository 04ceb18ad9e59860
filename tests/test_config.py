import pytest

from sudoku import config
from sudoku.config import Difficulty
from sudoku.errors import DifficultyError


def test_geometry_sizes():
    assert config.SIZE == 9
    assert config.BLOCK_SIZE == 3
    assert config.SQUARE_COUNT == 81
    assert len(config.ROWS) == len(config.COLS) == len(config.BLOCKS) == 9


def test_houses():
    assert config.ROWS[1] == tuple(range(9, 18))
    assert config.COLS[2] == tuple(range(2, 81, 9))
    assert config.BLOCKS[0] == (0, 1, 2, 9, 10, 11, 18, 19, 20)
    assert config.BLOCKS[8] == (60, 61, 62, 69, 70, 71, 78, 79, 80)


def test_block_lookup():
    assert config.BLOCK_OF[40] == config.BLOCKS[4]
    for block in config.BLOCKS:
        for square in block:
            assert config.BLOCK_OF[square] is block


def test_peers():
    for square in range(81):
        peers = config.PEERS[square]
        assert len(peers) == 24
        assert square not in peers
        assert len(set(peers)) == 20
    # row peers first, then column, then block
    assert config.PEERS[0][:8] == tuple(range(1, 9))
    assert config.PEERS[0][8:16] == tuple(range(9, 81, 9))
    assert config.PEERS[0][16:] == (1, 2, 9, 10, 11, 18, 19, 20)


def test_square_helpers():
    assert config.square_of(4, 7) == 43
    assert config.row_col(43) == (4, 7)


@pytest.mark.parametrize('name, difficulty', [
    ('veryeasy', Difficulty.VERY_EASY),
    ('Easy', Difficulty.EASY),
    ('MEDIUM', Difficulty.MEDIUM),
    ('hard', Difficulty.HARD),
    ('samurai', Difficulty.SAMURAI),
])
def test_difficulty_from_name(name, difficulty):
    assert Difficulty.from_name(name) is difficulty


@pytest.mark.parametrize('name', ['', 'unknown', 'very easy', None])
def test_difficulty_from_bad_name(name):
    with pytest.raises(DifficultyError):
        Difficulty.from_name(name)


def test_difficulty_labels():
    assert Difficulty.VERY_EASY.label == 'VeryEasy'
    assert Difficulty.SAMURAI.label == 'Samurai'
    assert Difficulty.UNKNOWN.label == 'Unknown'


def test_difficulty_order():
    assert [int(d) for d in Difficulty] == [0, 1, 2, 3, 4, 5]


def test_generator_settings_cover_every_tier():
    tiers = set(Difficulty) - {Difficulty.UNKNOWN}
    assert set(config.GIVEN_LOWER_BOUND_RANGES) == tiers
    assert set(config.ROW_COL_LOWER_BOUNDS) == tiers
    assert set(config.DIG_ORDERS) == tiers
    for low, high in config.GIVEN_LOWER_BOUND_RANGES.values():
        assert low <= high
