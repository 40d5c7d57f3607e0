"""Hangman in the terminal, with small pygame text-input and text-layout demos."""

__version__ = "0.1.0"
__all__ = ["__version__"]