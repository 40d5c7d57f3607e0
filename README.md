# gallows

A classic hangman game for the terminal, along with two small pygame demos:
a mouse-activated text input box and a resizable container that lays out
text with optional word wrapping.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Playing hangman

```
gallows
```

A six-letter word is picked at random from a built-in list. You start with
6 lives and lose one for each guess that is not in the word. Letters you have
already tried are listed before every guess, and guessing the same letter
twice is refused. Only the first character of each entry counts, and anything
that is not a lowercase letter is ignored and asked for again. Reveal every
letter to win; run out of lives and the answer is shown. Pressing Ctrl-D or
Ctrl-C ends the game.

## Demos

```
gallows-input-box
```

Opens a window with a text box. Hover the mouse over it to type up to nine
printable characters; Backspace deletes the last one. A blinking cursor shows
while there is room left, and a hint to press Backspace appears once the box
is full. Escape or closing the window quits.

```
gallows-text-box
```

Opens a window with a block of text drawn inside a container. Drag the small
square in the bottom-right corner to resize the container, and press Space to
toggle word wrapping. Escape or closing the window quits.

## Using it as a library

The game logic is usable without a terminal:

```python
from gallows.game import HangmanGame

game = HangmanGame("coffee")
game.guess("f")            # returns 2, the number of matches
print(game.board())        # "_ _ f f _ _"
print(game.lives)          # 6
print(game.is_won(), game.is_lost())
```

`HangmanGame.guess` raises `ValueError` for anything other than a single
lowercase letter, or once the game is over. `LetterTracker` records guessed
letters, `gallows(lives)` returns the ASCII art for 0 to 6 remaining lives,
and `play(word, input_fn, output)` runs a whole round against any input
function and text stream, returning whether the player won.

`gallows.input_box.InputBox` holds the state of the input field: call
`update(mouse_x, mouse_y, codepoints, backspace)` once per frame and read
`text` and `cursor_visible()`.

`gallows.text_layout.layout_text` computes where each character of a string
lands inside a `Rect`, given a function that measures a character's width,
and returns `PlacedGlyph` records that any renderer can draw.
`ResizableContainer` tracks the drag-to-resize handle of such a rectangle.