import random

import pytest
from packages.engine import PlayerGame, InvalidCode, GameOver, is_valid


def test_player_game_flow():
    game = PlayerGame("1234")
    assert game.guess("1243") == (2, 2)
    with pytest.raises(InvalidCode):
        game.guess("1123")
    assert game.attempts == 1          # invalid guess costs nothing
    assert not game.solved
    assert game.guess("1234") == (4, 0)
    assert game.solved and game.attempts == 2
    with pytest.raises(GameOver):
        game.guess("5678")


def test_player_game_random_secret_is_valid_and_seeded():
    a = PlayerGame(rng=random.Random(3))
    b = PlayerGame(rng=random.Random(3))
    assert is_valid(a.reveal()) and a.reveal() == b.reveal()


def test_player_game_rejects_bad_secret():
    with pytest.raises(InvalidCode):
        PlayerGame("0011")
