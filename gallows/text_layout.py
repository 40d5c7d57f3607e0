"""Lay out text inside a rectangle, with optional word wrapping and selection."""

from __future__ import annotations

import argparse
import enum
from dataclasses import dataclass
from typing import Callable

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 450
RESIZER_SIZE = 14
RESIZER_INSET = 17
MIN_WIDTH = 60.0
MIN_HEIGHT = 60.0
MAX_WIDTH = SCREEN_WIDTH - 50.0
MAX_HEIGHT = SCREEN_HEIGHT - 160.0

SAMPLE_TEXT = (
    "Words stay inside\tthe box\t...and wrap onto new lines when wrapping is "
    "switched on, so this sentence is long enough to show it.\n\n"
    "Drag the small square in the corner to make the box larger or smaller, "
    "and watch how the lines reflow to fit the space that is left."
)


@dataclass
class Rect:
    """Axis-aligned rectangle."""

    x: float
    y: float
    width: float
    height: float

    def contains(self, px: float, py: float) -> bool:
        return self.x <= px < self.x + self.width and self.y <= py < self.y + self.height


@dataclass(frozen=True)
class PlacedGlyph:
    """One character positioned by layout_text."""

    char: str
    x: float
    y: float
    width: float
    height: float
    selected: bool = False

    @property
    def visible(self) -> bool:
        """Whitespace takes up room but is not drawn."""
        return self.char not in " \t"


class _State(enum.Enum):
    MEASURE = 0
    DRAW = 1


def layout_text(
    text: str,
    rec: Rect,
    glyph_width: Callable[[str], float],
    base_size: int = 10,
    font_size: float = 20.0,
    spacing: float = 2.0,
    word_wrap: bool = True,
    select_start: int = 0,
    select_length: int = 0,
) -> list[PlacedGlyph]:
    """Place the characters of text inside rec.

    glyph_width gives a character's advance at the font's base size. Newlines
    are not placed; spaces and tabs are, so that selections cover them. Layout
    stops at the first line that would overflow the rectangle's height.
    """
    if base_size <= 0:
        raise ValueError(f"base_size must be positive: {base_size}")

    length = len(text)
    scale = font_size / base_size
    line_height = (base_size + base_size // 2) * scale
    glyph_height = base_size * scale

    offset_x = 0.0
    offset_y = 0.0
    state = _State.MEASURE if word_wrap else _State.DRAW
    start_line = -1
    end_line = -1
    last_k = -1
    placed: list[PlacedGlyph] = []

    i = 0
    k = 0
    while i < length:
        ch = text[i]
        width = 0.0
        if ch != "\n":
            width = glyph_width(ch) * scale
            if i + 1 < length:
                width += spacing

        if state is _State.MEASURE:
            if ch in " \t\n":
                end_line = i

            if offset_x + width > rec.width:
                end_line = i if end_line < 1 else end_line
                if i == end_line:
                    end_line -= 1
                if start_line + 1 == end_line:
                    end_line = i - 1
                state = _State.DRAW
            elif i + 1 == length:
                end_line = i
                state = _State.DRAW
            elif ch == "\n":
                state = _State.DRAW

            if state is _State.DRAW:
                offset_x = 0.0
                i = start_line
                width = 0.0
                last_k, k = k - 1, last_k
        else:
            if ch == "\n":
                if not word_wrap:
                    offset_y += line_height
                    offset_x = 0.0
            else:
                if not word_wrap and offset_x + width > rec.width:
                    offset_y += line_height
                    offset_x = 0.0

                if offset_y + glyph_height > rec.height:
                    break

                selected = select_start >= 0 and select_start <= k < select_start + select_length
                placed.append(
                    PlacedGlyph(ch, rec.x + offset_x, rec.y + offset_y, width, glyph_height, selected)
                )

            if word_wrap and i == end_line:
                offset_y += line_height
                offset_x = 0.0
                start_line = end_line
                end_line = -1
                width = 0.0
                select_start += last_k - k
                k = last_k
                state = _State.MEASURE

        if offset_x != 0 or ch != " ":
            offset_x += width
        i += 1
        k += 1

    return placed


@dataclass
class ResizableContainer:
    """A rectangle that can be resized by dragging its bottom-right handle."""

    container: Rect
    min_width: float = MIN_WIDTH
    min_height: float = MIN_HEIGHT
    max_width: float = MAX_WIDTH
    max_height: float = MAX_HEIGHT
    resizing: bool = False
    highlighted: bool = False
    last_mouse: tuple[float, float] = (0.0, 0.0)

    def __init__(
        self,
        container: Rect | None = None,
        min_width: float = MIN_WIDTH,
        min_height: float = MIN_HEIGHT,
        max_width: float = MAX_WIDTH,
        max_height: float = MAX_HEIGHT,
    ) -> None:
        self.container = container if container is not None else Rect(
            25.0, 25.0, SCREEN_WIDTH - 50.0, SCREEN_HEIGHT - 250.0
        )
        self.min_width = min_width
        self.min_height = min_height
        self.max_width = max_width
        self.max_height = max_height
        self.resizing = False
        self.highlighted = False
        self.last_mouse = (0.0, 0.0)

    @property
    def resizer(self) -> Rect:
        """The drag handle in the container's bottom-right corner."""
        c = self.container
        return Rect(
            c.x + c.width - RESIZER_INSET,
            c.y + c.height - RESIZER_INSET,
            RESIZER_SIZE,
            RESIZER_SIZE,
        )

    @staticmethod
    def _clamp(value: float, low: float, high: float) -> float:
        if value > low:
            return value if value < high else high
        return low

    def update(
        self, mouse_x: float, mouse_y: float, button_down: bool, button_released: bool
    ) -> None:
        """Advance one frame with the current mouse position and button state."""
        if self.container.contains(mouse_x, mouse_y):
            self.highlighted = True
        elif not self.resizing:
            self.highlighted = False

        if self.resizing:
            if button_released:
                self.resizing = False
            last_x, last_y = self.last_mouse
            self.container.width = self._clamp(
                self.container.width + (mouse_x - last_x), self.min_width, self.max_width
            )
            self.container.height = self._clamp(
                self.container.height + (mouse_y - last_y), self.min_height, self.max_height
            )
        elif button_down and self.resizer.contains(mouse_x, mouse_y):
            self.resizing = True

        self.last_mouse = (mouse_x, mouse_y)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Show text wrapped inside a resizable box.")
    parser.parse_args(argv)

    import pygame

    raywhite = (245, 245, 245)
    gray = (130, 130, 130)
    black = (0, 0, 0)
    red = (230, 41, 55)
    maroon = (190, 33, 55)
    faded_maroon = (222, 165, 173)

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("draw text inside a rectangle")
        base_size = 20
        font = pygame.font.Font(None, base_size)
        ui_font = pygame.font.Font(None, 26)
        clock = pygame.time.Clock()
        box = ResizableContainer()
        word_wrap = True

        def measure(ch: str) -> float:
            return float(font.size(ch)[0])

        running = True
        while running:
            released = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_SPACE:
                        word_wrap = not word_wrap
                elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                    released = True

            mx, my = pygame.mouse.get_pos()
            box.update(mx, my, pygame.mouse.get_pressed()[0], released)
            border = faded_maroon if box.highlighted else maroon

            screen.fill(raywhite)
            c = box.container
            pygame.draw.rect(screen, border, pygame.Rect(c.x, c.y, c.width, c.height), 3)
            inner = Rect(c.x + 4, c.y + 4, c.width - 4, c.height - 4)
            for glyph in layout_text(
                SAMPLE_TEXT, inner, measure, base_size, 20.0, 2.0, word_wrap
            ):
                if glyph.visible:
                    screen.blit(font.render(glyph.char, True, gray), (glyph.x, glyph.y))
            r = box.resizer
            pygame.draw.rect(screen, border, pygame.Rect(r.x, r.y, r.width, r.height))

            pygame.draw.rect(screen, gray, pygame.Rect(0, SCREEN_HEIGHT - 54, SCREEN_WIDTH, 54))
            pygame.draw.rect(screen, maroon, pygame.Rect(382, SCREEN_HEIGHT - 34, 12, 12))
            screen.blit(ui_font.render("Word Wrap: ", True, black), (313, SCREEN_HEIGHT - 115))
            state_label = ui_font.render("ON" if word_wrap else "OFF", True, red if word_wrap else black)
            screen.blit(state_label, (447, SCREEN_HEIGHT - 115))
            screen.blit(
                ui_font.render("Press [SPACE] to toggle word wrap", True, gray),
                (218, SCREEN_HEIGHT - 86),
            )
            screen.blit(
                ui_font.render("Click hold & drag the    to resize the container", True, raywhite),
                (155, SCREEN_HEIGHT - 38),
            )
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())