# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import string

import pytest

from keyhook.keyboard_consts import NUMPAD_OFFSET, Modifier, VirtualKey
from keyhook.keytable import KEY_TABLE, is_action_key, key_text, modifiers_text

ACTION_KEYS = {
    VirtualKey.VK_SHIFT,
    VirtualKey.VK_CONTROL,
    VirtualKey.VK_ALT,
    VirtualKey.VK_META,
    VirtualKey.VK_WINDOWS,
    VirtualKey.VK_CONTEXT_MENU,
    VirtualKey.VK_UP,
    VirtualKey.VK_DOWN,
    VirtualKey.VK_LEFT,
    VirtualKey.VK_RIGHT,
    VirtualKey.VK_KP_UP,
    VirtualKey.VK_KP_DOWN,
    VirtualKey.VK_KP_LEFT,
    VirtualKey.VK_KP_RIGHT,
    *(VirtualKey[f"VK_F{n}"] for n in range(1, 25)),
    VirtualKey.VK_PRINTSCREEN,
    VirtualKey.VK_INSERT,
    VirtualKey.VK_HELP,
    VirtualKey.VK_PAGE_UP,
    VirtualKey.VK_PAGE_DOWN,
    VirtualKey.VK_HOME,
    VirtualKey.VK_END,
    VirtualKey.VK_SCROLL_LOCK,
    VirtualKey.VK_CAPS_LOCK,
    VirtualKey.VK_NUM_LOCK,
    VirtualKey.VK_PAUSE,
    VirtualKey.VK_BEGIN,
    VirtualKey.VK_AGAIN,
    VirtualKey.VK_UNDO,
    VirtualKey.VK_COPY,
    VirtualKey.VK_PASTE,
    VirtualKey.VK_CUT,
    VirtualKey.VK_FIND,
    VirtualKey.VK_PROPS,
    VirtualKey.VK_STOP,
    VirtualKey.VK_FINAL,
    VirtualKey.VK_CONVERT,
    VirtualKey.VK_NONCONVERT,
    VirtualKey.VK_ACCEPT,
    VirtualKey.VK_MODECHANGE,
    VirtualKey.VK_KANA,
    VirtualKey.VK_KANJI,
    VirtualKey.VK_ALPHANUMERIC,
    VirtualKey.VK_KATAKANA,
    VirtualKey.VK_HIRAGANA,
    VirtualKey.VK_FULL_WIDTH,
    VirtualKey.VK_HALF_WIDTH,
    VirtualKey.VK_ROMAN_CHARACTERS,
    VirtualKey.VK_ALL_CANDIDATES,
    VirtualKey.VK_PREVIOUS_CANDIDATE,
    VirtualKey.VK_CODE_INPUT,
    VirtualKey.VK_JAPANESE_KATAKANA,
    VirtualKey.VK_JAPANESE_HIRAGANA,
    VirtualKey.VK_JAPANESE_ROMAN,
    VirtualKey.VK_KANA_LOCK,
    VirtualKey.VK_INPUT_METHOD_ON_OFF,
}


def test_numpad_offset_lines_up_digits():
    assert NUMPAD_OFFSET == 0x30
    for digit in range(10):
        assert VirtualKey[f"VK_NUMPAD{digit}"] - NUMPAD_OFFSET == VirtualKey[f"VK_{digit}"]


def test_clear_and_cancel_share_a_code():
    assert VirtualKey.VK_CLEAR is VirtualKey.VK_CANCEL
    assert key_text(VirtualKey.VK_CANCEL) == "Clear"


@pytest.mark.parametrize("letter", string.ascii_uppercase)
def test_letters(letter: str):
    code = VirtualKey[f"VK_{letter}"]
    assert key_text(code) == letter


@pytest.mark.parametrize("digit", string.digits)
def test_digits(digit: str):
    assert key_text(VirtualKey[f"VK_{digit}"]) == digit
    numpad = key_text(VirtualKey[f"VK_NUMPAD{digit}"])
    assert numpad == f"NumPad {digit}"
    assert numpad[-1] == digit


@pytest.mark.parametrize(
    "code,expected",
    (
        (VirtualKey.VK_A, "A"),
        (VirtualKey.VK_NUMPAD5, "NumPad 5"),
        (VirtualKey.VK_ENTER, "Enter"),
        (VirtualKey.VK_BACK_SPACE, "Backspace"),
        (VirtualKey.VK_CONTEXT_MENU, "Context Menu"),
        (VirtualKey.VK_KP_LEFT, "Left"),
        (VirtualKey.VK_MULTIPLY, "NumPad *"),
        (VirtualKey.VK_F13, "F13"),
        (VirtualKey.VK_F24, "F24"),
        (VirtualKey.VK_PAGE_DOWN, "Page Down"),
        (VirtualKey.VK_DEAD_ABOVERING, "Dead Above Ring"),
        (VirtualKey.VK_QUOTEDBL, "Double Quote"),
        (VirtualKey.VK_EURO_SIGN, "Euro"),
        (VirtualKey.VK_FULL_WIDTH, "Full-Width"),
        (VirtualKey.VK_INPUT_METHOD_ON_OFF, "Input Method On/Off"),
        (VirtualKey.VK_PROPS, "Props"),
        (VirtualKey.VK_BEGIN, "Begin"),
        (VirtualKey.VK_UNDEFINED, "Undefined"),
        (0x9999, "Unknown keyCode: 0x9999"),
        (0xABCDEF, "Unknown keyCode: 0xabcdef"),
    ),
)
def test_key_text(code: int, expected: str):
    assert key_text(code) == expected


@pytest.mark.parametrize("code", (0x9999, 0x40, 0x6C, 0x7FFFFFFF, 0xFFFF))
def test_unknown_codes_embed_hex(code: int):
    text = key_text(code)
    assert text.startswith("Unknown keyCode: ")
    assert format(code, "x") in text


def test_every_named_key_has_a_table_entry():
    for key in VirtualKey:
        assert key in KEY_TABLE
        assert not key_text(key).startswith("Unknown keyCode")


def test_key_text_is_deterministic():
    for code in list(KEY_TABLE) + [0x9999, -1]:
        assert key_text(code) == key_text(code)


def test_label_overrides():
    labels = {"enter": "Return", "numpad": "Keypad", "unknown": "Mystery", "f7": "Seven"}
    assert key_text(VirtualKey.VK_ENTER, labels) == "Return"
    assert key_text(VirtualKey.VK_NUMPAD3, labels) == "Keypad 3"
    assert key_text(0x9999, labels) == "Mystery keyCode: 0x9999"
    assert key_text(VirtualKey.VK_F7, labels) == "Seven"
    # labels without an override fall back to the defaults
    assert key_text(VirtualKey.VK_TAB, labels) == "Tab"
    # letters aren't overridable
    assert key_text(VirtualKey.VK_Q, {"q": "nope"}) == "Q"


def test_shared_labels_override_together():
    labels = {"up": "North"}
    assert key_text(VirtualKey.VK_UP, labels) == "North"
    assert key_text(VirtualKey.VK_KP_UP, labels) == "North"


def test_action_key_examples():
    assert is_action_key(VirtualKey.VK_F7)
    assert not is_action_key(VirtualKey.VK_SPACE)


@pytest.mark.parametrize("key", list(VirtualKey))
def test_action_key_partition(key: VirtualKey):
    assert is_action_key(key) == (key in ACTION_KEYS)


@pytest.mark.parametrize(
    "code",
    [
        *(VirtualKey[f"VK_{c}"] for c in string.ascii_uppercase + string.digits),
        VirtualKey.VK_COMMA,
        VirtualKey.VK_PERIOD,
        VirtualKey.VK_SLASH,
        VirtualKey.VK_SEMICOLON,
        VirtualKey.VK_EQUALS,
        VirtualKey.VK_QUOTE,
        VirtualKey.VK_ENTER,
        VirtualKey.VK_ESCAPE,
        0x9999,
        -5,
        2**31 - 1,
    ],
)
def test_printable_and_unknown_keys_are_not_action_keys(code: int):
    assert not is_action_key(code)


@pytest.mark.parametrize(
    "mask,expected",
    (
        (0, ""),
        (Modifier.SHIFT, "Shift"),
        (Modifier.ALT | Modifier.SHIFT, "Shift+Alt"),
        (Modifier.CTRL | Modifier.META | Modifier.BUTTON1, "Ctrl+Meta+Button1"),
        (Modifier.BUTTON5 | Modifier.BUTTON3, "Button3+Button5"),
    ),
)
def test_modifiers_text(mask: int, expected: str):
    assert modifiers_text(mask) == expected


def test_modifiers_text_overrides():
    assert modifiers_text(Modifier.CTRL | Modifier.ALT, {"control": "⌃"}) == "⌃+Alt"


def test_control_label_covers_key_and_modifier():
    labels = {"control": "⌃"}
    assert key_text(VirtualKey.VK_CONTROL, labels) == "⌃"
    assert modifiers_text(Modifier.CTRL | Modifier.SHIFT, labels) == "Shift+⌃"
