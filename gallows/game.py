"""Console hangman: word selection, game state and the interactive loop."""

from __future__ import annotations

import argparse
import random
import string
import sys
from typing import Callable, TextIO

WORDS: tuple[str, ...] = (
    "coffee",
    "office",
    "laptop",
    "beauty",
    "friend",
    "genius",
    "reward",
    "driven",
    "camera",
    "castle",
)

STARTING_LIVES = 6
ALPHABET = string.ascii_lowercase

WELCOME_ART = (
    "\n   |#|============\n   |#|/          |\n   |#|       Welcome to          \n"
    "   |#|        Hangman!          \n   |#|          \n   |#|\n __|#|__\n\n"
)
WELCOME_TEXT = (
    "You have 6 lives. Lose 1 for an incorrect guess.\nPlease use lowercase only.\n"
    "      Good luck!\nPress Enter to continue."
)
OPENING_ART = (
    "\n   |#|============\n   |#|/          |\n   |#|           |\n   |#|\n   |#|\n"
    "   |#|\n   |#|\n___|#|___\n\n"
)
WIN_ART = (
    "\n   |#|============\n   |#|/          |\n   |#|           |\n   |#|\n   |#|\n"
    "   |#|          \\O/\n   |#|           |\n___|#|___       / \\\n\n"
)

_TOP = "\n   |#|============\n   |#|/          |\n   |#|           |\n"
_BASE = " __|#|__\n\n"

_STAGES: dict[int, str] = {
    6: _TOP + "   |#|           \n   |#|\n   |#|\n   |#|\n" + _BASE,
    5: _TOP + "   |#|           O\n   |#|\n   |#|\n   |#|\n" + _BASE,
    4: _TOP + "   |#|           O\n   |#|           |\n   |#|\n   |#|\n" + _BASE,
    3: _TOP + "   |#|           O\n   |#|          /|\n   |#|\n   |#|\n" + _BASE,
    2: _TOP + "   |#|           O\n   |#|          /|\\\n   |#|\n   |#|\n" + _BASE,
    1: _TOP + "   |#|           O\n   |#|          /|\\\n   |#|          / \n   |#|\n" + _BASE,
    0: _TOP + "   |#|           O\n   |#|          /|\\\n   |#|          / \\\n   |#|\n" + _BASE,
}

_CLEAR_SCREEN = "\033[2J\033[H"


class LetterTracker:
    """Remembers which lowercase letters have already been guessed."""

    def __init__(self) -> None:
        self._guessed: set[str] = set()

    def mark(self, letter: str) -> bool:
        """Record a guess; return False if the letter was already guessed."""
        if len(letter) != 1 or letter not in ALPHABET:
            raise ValueError(f"not a lowercase letter: {letter!r}")
        if letter in self._guessed:
            return False
        self._guessed.add(letter)
        return True

    def guessed(self) -> list[str]:
        """Letters guessed so far, in alphabetical order."""
        return sorted(self._guessed)

    def __contains__(self, letter: object) -> bool:
        return letter in self._guessed


class HangmanGame:
    """State of one round: the secret word, revealed letters and lives."""

    def __init__(self, word: str, lives: int = STARTING_LIVES) -> None:
        if not word or any(ch not in ALPHABET for ch in word):
            raise ValueError(f"word must be non-empty lowercase letters: {word!r}")
        self.word = word
        self.lives = lives
        self._revealed: list[str | None] = [None] * len(word)

    def guess(self, letter: str) -> int:
        """Reveal every occurrence of letter; lose a life if there is none."""
        if self.is_won() or self.is_lost():
            raise ValueError("the game is over")
        if len(letter) != 1 or letter not in ALPHABET:
            raise ValueError(f"not a lowercase letter: {letter!r}")
        matches = 0
        for position, ch in enumerate(self.word):
            if ch == letter:
                self._revealed[position] = letter
                matches += 1
        if matches == 0:
            self.lives -= 1
        return matches

    def board(self) -> str:
        """The word with unrevealed letters shown as underscores, space separated."""
        return " ".join(ch if ch is not None else "_" for ch in self._revealed)

    def is_won(self) -> bool:
        return all(ch is not None for ch in self._revealed)

    def is_lost(self) -> bool:
        return self.lives <= 0


def random_word(rng: random.Random) -> str:
    """Pick a word from the built-in list."""
    return rng.choice(WORDS)


def gallows(lives: int) -> str:
    """ASCII art of the gallows for the given number of remaining lives."""
    try:
        return _STAGES[lives]
    except KeyError:
        raise ValueError(f"lives must be between 0 and {STARTING_LIVES}: {lives}") from None


def read_guess(
    tracker: LetterTracker, input_fn: Callable[[], str], output: TextIO
) -> str:
    """Prompt until the player enters a letter not guessed before, and return it."""
    while True:
        output.write("You have guessed:\n")
        output.write("".join(f" {letter}" for letter in tracker.guessed()) + "\n")
        output.write("Guess a letter:  ")
        output.flush()
        entered = input_fn().strip()
        if not entered:
            continue
        letter = entered[0]
        try:
            is_new = tracker.mark(letter)
        except ValueError:
            continue
        if is_new:
            return letter
        output.write(
            f"You have already guessed {letter}.\nPlease choose a different letter.\n\n"
        )


def play(word: str, input_fn: Callable[[], str], output: TextIO) -> bool:
    """Run a full interactive round; return True if the player won."""
    game = HangmanGame(word)
    tracker = LetterTracker()

    output.write(WELCOME_ART)
    output.write(WELCOME_TEXT)
    output.flush()
    input_fn()
    if output.isatty():
        output.write(_CLEAR_SCREEN)

    output.write(OPENING_ART)
    output.write(f"Lives: {game.lives}    {game.board()}\n\n")

    while not game.is_won() and not game.is_lost():
        game.guess(read_guess(tracker, input_fn, output))
        if game.lives > 0:
            output.write(gallows(game.lives))
            output.write(f"Lives               {game.board()}\n    {game.lives}\n\n")

    if game.is_won():
        output.write(WIN_ART)
        output.write(f"         -= {game.board()} =-\n")
        output.write("          Congratulation!\n             You Won!\n\n")
    else:
        output.write(gallows(0))
        output.write(
            "    G A M E  O V E R\n        You Lost.\n\n"
            f" The answer was: {game.word}\n\n"
        )
    output.flush()
    return game.is_won()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Play hangman in the terminal.")
    parser.parse_args(argv)
    word = random_word(random.Random())
    try:
        play(word, input, sys.stdout)
    except (EOFError, KeyboardInterrupt):
        sys.stdout.write("\n")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())