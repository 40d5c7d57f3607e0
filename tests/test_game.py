import io
import random

import pytest

from gallows.game import (
    WORDS,
    HangmanGame,
    LetterTracker,
    gallows,
    play,
    random_word,
    read_guess,
)


def feeder(lines):
    it = iter(lines)
    return lambda: next(it)


def test_tracker_marks_once():
    tracker = LetterTracker()
    assert tracker.mark("q") is True
    assert tracker.mark("q") is False
    assert "q" in tracker


def test_tracker_guessed_is_alphabetical():
    tracker = LetterTracker()
    for letter in "zam":
        tracker.mark(letter)
    assert tracker.guessed() == ["a", "m", "z"]


@pytest.mark.parametrize("bad", ["A", "1", "ab", "", " "])
def test_tracker_rejects_non_letters(bad):
    with pytest.raises(ValueError):
        LetterTracker().mark(bad)


def test_guess_reveals_all_occurrences():
    game = HangmanGame("coffee")
    assert game.guess("f") == 2
    assert game.board() == "_ _ f f _ _"
    assert game.lives == 6


def test_wrong_guess_costs_a_life():
    game = HangmanGame("coffee")
    assert game.guess("z") == 0
    assert game.lives == 5
    assert game.board() == "_ _ _ _ _ _"


def test_win_after_all_letters():
    game = HangmanGame("castle")
    for letter in "castle":
        game.guess(letter)
    assert game.is_won()
    assert not game.is_lost()
    assert game.board() == "c a s t l e"


def test_loss_after_six_misses():
    game = HangmanGame("castle")
    for letter in "bdfgho":
        game.guess(letter)
    assert game.is_lost()
    assert game.lives == 0
    with pytest.raises(ValueError):
        game.guess("c")


def test_game_rejects_bad_input():
    with pytest.raises(ValueError):
        HangmanGame("Coffee")
    with pytest.raises(ValueError):
        HangmanGame("coffee").guess("F")


@pytest.mark.parametrize("seed", range(20))
def test_random_word_from_list(seed):
    assert random_word(random.Random(seed)) in WORDS


def test_random_word_reproducible():
    word = random_word(random.Random(7))
    assert word in WORDS
    assert random_word(random.Random(7)) == word


def test_random_word_varies_with_seed():
    words = {random_word(random.Random(seed)) for seed in range(200)}
    assert len(words) > 1
    assert words <= set(WORDS)


def test_gallows_stages_grow():
    assert "O" not in gallows(6)
    assert "O" in gallows(5)
    assert "/|\\" in gallows(2)
    assert "/ \\" in gallows(0)
    for lives in range(7):
        assert gallows(lives).startswith("\n   |#|============")


@pytest.mark.parametrize("lives", [-1, 7])
def test_gallows_out_of_range(lives):
    with pytest.raises(ValueError):
        gallows(lives)


def test_read_guess_skips_invalid_and_repeats():
    tracker = LetterTracker()
    tracker.mark("f")
    out = io.StringIO()
    letter = read_guess(tracker, feeder(["A", "", "f", "e"]), out)
    assert letter == "e"
    assert tracker.guessed() == ["e", "f"]
    text = out.getvalue()
    assert "You have already guessed f." in text
    assert " f\n" in text


def test_play_win():
    out = io.StringIO()
    result = play("coffee", feeder(["", "c", "o", "f", "e"]), out)
    assert result is True
    text = out.getvalue()
    assert "You Won!" in text
    assert "-= c o f f e e =-" in text


def test_play_loss():
    out = io.StringIO()
    result = play("coffee", feeder(["", "a", "b", "d", "g", "h", "i"]), out)
    assert result is False
    text = out.getvalue()
    assert "The answer was: coffee" in text
    assert "You Lost." in text