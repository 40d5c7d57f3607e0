import pytest

from gallows.input_box import MAX_INPUT_CHARS, InputBox, is_printable_key


def inside(box):
    return box.x + 1, box.y + 1


@pytest.mark.parametrize("key,expected", [(31, False), (32, True), (126, True), (127, False)])
def test_is_printable_key(key, expected):
    assert is_printable_key(key) is expected


def test_contains_edges():
    box = InputBox(x=10, y=20, width=30, height=40)
    assert box.contains(10, 20)
    assert not box.contains(40, 20)
    assert not box.contains(10, 60)
    assert not box.contains(9, 30)


def test_feed_filters_range():
    box = InputBox()
    box.feed([31, 32, 65, 125, 126])
    assert box.text == " A}"


def test_feed_respects_limit():
    box = InputBox()
    box.feed([ord("x")] * 20)
    assert len(box.text) == MAX_INPUT_CHARS
    assert box.is_full


def test_backspace_on_empty_stays_empty():
    box = InputBox()
    box.backspace()
    assert box.text == ""
    box.feed([ord("a"), ord("b")])
    box.backspace()
    assert box.text == "a"


def test_update_ignores_input_outside():
    box = InputBox()
    assert box.update(0, 0, [ord("a")], False) is False
    assert box.text == ""
    assert box.frames_counter == 0


def test_update_inside_types_and_deletes():
    box = InputBox()
    mx, my = inside(box)
    assert box.update(mx, my, [ord("h"), ord("i")], False) is True
    assert box.text == "hi"
    box.update(mx, my, [], True)
    assert box.text == "h"


def test_frames_reset_when_leaving():
    box = InputBox()
    mx, my = inside(box)
    for _ in range(5):
        box.update(mx, my)
    assert box.frames_counter == 5
    box.update(0, 0)
    assert box.frames_counter == 0


def test_cursor_blinks():
    box = InputBox()
    mx, my = inside(box)
    for _ in range(19):
        box.update(mx, my)
    assert box.cursor_visible()
    box.update(mx, my)
    assert not box.cursor_visible()
    for _ in range(20):
        box.update(mx, my)
    assert box.cursor_visible()


def test_cursor_hidden_when_full_or_outside():
    box = InputBox()
    assert not box.cursor_visible()
    mx, my = inside(box)
    box.update(mx, my, [ord("z")] * MAX_INPUT_CHARS)
    assert not box.cursor_visible()