"""A single-line text input box limited to a fixed number of characters."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Iterable

MAX_INPUT_CHARS = 9
BLINK_FRAMES = 20
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 450


def is_printable_key(key: int) -> bool:
    """True for key codes between space (32) and tilde (126)."""
    return 32 <= key <= 126


@dataclass
class InputBox:
    """Editable text box that accepts input only while the mouse is over it."""

    x: float = SCREEN_WIDTH / 2 - 100
    y: float = 180
    width: float = 225
    height: float = 50
    max_chars: int = MAX_INPUT_CHARS
    text: str = ""
    mouse_on_text: bool = False
    frames_counter: int = 0

    def contains(self, x: float, y: float) -> bool:
        return self.x <= x < self.x + self.width and self.y <= y < self.y + self.height

    def feed(self, codepoints: Iterable[int]) -> None:
        """Append characters in the range 32..125 until the box is full."""
        for code in codepoints:
            if 32 <= code <= 125 and len(self.text) < self.max_chars:
                self.text += chr(code)

    def backspace(self) -> None:
        self.text = self.text[:-1]

    def update(
        self,
        mouse_x: float,
        mouse_y: float,
        codepoints: Iterable[int] = (),
        backspace: bool = False,
    ) -> bool:
        """Advance one frame; return whether the mouse is over the box."""
        self.mouse_on_text = self.contains(mouse_x, mouse_y)
        if self.mouse_on_text:
            self.feed(codepoints)
            if backspace:
                self.backspace()
            self.frames_counter += 1
        else:
            self.frames_counter = 0
        return self.mouse_on_text

    def cursor_visible(self) -> bool:
        """Whether the blinking underscore cursor is drawn this frame."""
        return (
            self.mouse_on_text
            and len(self.text) < self.max_chars
            and (self.frames_counter // BLINK_FRAMES) % 2 == 0
        )

    @property
    def is_full(self) -> bool:
        return len(self.text) >= self.max_chars


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Show an interactive input box.")
    parser.parse_args(argv)

    import pygame

    raywhite = (245, 245, 245)
    gray = (130, 130, 130)
    lightgray = (200, 200, 200)
    darkgray = (80, 80, 80)
    red = (230, 41, 55)
    maroon = (190, 33, 55)

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("input box")
        small_font = pygame.font.Font(None, 26)
        big_font = pygame.font.Font(None, 52)
        clock = pygame.time.Clock()
        box = InputBox()
        pygame.key.start_text_input()

        running = True
        while running:
            codepoints: list[int] = []
            backspace = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_BACKSPACE:
                        backspace = True
                elif event.type == pygame.TEXTINPUT:
                    codepoints.extend(ord(ch) for ch in event.text)

            mx, my = pygame.mouse.get_pos()
            on_text = box.update(mx, my, codepoints, backspace)
            pygame.mouse.set_cursor(
                pygame.SYSTEM_CURSOR_IBEAM if on_text else pygame.SYSTEM_CURSOR_ARROW
            )

            screen.fill(raywhite)
            screen.blit(small_font.render("PLACE MOUSE OVER INPUT BOX!", True, gray), (240, 140))
            rect = pygame.Rect(int(box.x), int(box.y), int(box.width), int(box.height))
            pygame.draw.rect(screen, lightgray, rect)
            pygame.draw.rect(screen, red if on_text else darkgray, rect, 1)
            rendered = big_font.render(box.text, True, maroon)
            screen.blit(rendered, (rect.x + 5, rect.y + 8))
            status = f"INPUT CHARS: {len(box.text)}/{box.max_chars}"
            screen.blit(small_font.render(status, True, darkgray), (315, 250))
            if on_text:
                if box.cursor_visible():
                    screen.blit(
                        big_font.render("_", True, maroon),
                        (rect.x + 8 + rendered.get_width(), rect.y + 12),
                    )
                elif box.is_full:
                    message = "Press BACKSPACE to delete chars..."
                    screen.blit(small_font.render(message, True, gray), (230, 300))
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())