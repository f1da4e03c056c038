# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
"""The static key code table, and the lookups built on it.

Every named virtual key gets one row: the identifier a deployment uses to override its
label, the default label, and whether it counts as an action key. Letters and digits
have no override identifier; they always render as themselves.

The table is built once at import time and exposed through a read-only mapping, so any
number of threads may consult it without locking.
"""
from __future__ import annotations

import types
import typing

import msgspec

from .keyboard_consts import DIGIT_KEYS, LETTER_KEYS, NUMPAD_DIGIT_KEYS, NUMPAD_OFFSET, Modifier, VirtualKey

if typing.TYPE_CHECKING:
    import collections.abc

    Labels = collections.abc.Mapping[str, str]

NUMPAD_LABEL_ID = "numpad"
NUMPAD_LABEL = "NumPad"
UNKNOWN_LABEL_ID = "unknown"
UNKNOWN_LABEL = "Unknown"


class KeyInfo(msgspec.Struct, frozen=True):
    code: int
    label_id: typing.Optional[str]
    label: str
    action: bool = False


V = VirtualKey

# (code, override identifier, default label, is action key)
_ROWS: list[tuple[VirtualKey, str, str, bool]] = [
    (V.VK_UNDEFINED, "undefined", "Undefined", False),
    (V.VK_ENTER, "enter", "Enter", False),
    (V.VK_BACK_SPACE, "backSpace", "Backspace", False),
    (V.VK_TAB, "tab", "Tab", False),
    # VK_CANCEL shares this code.
    (V.VK_CLEAR, "clear", "Clear", False),
    (V.VK_SHIFT, "shift", "Shift", True),
    (V.VK_CONTROL, "control", "Control", True),
    (V.VK_ALT, "alt", "Alt", True),
    (V.VK_META, "meta", "Meta", True),
    (V.VK_WINDOWS, "windows", "Windows", True),
    (V.VK_CONTEXT_MENU, "context", "Context Menu", True),
    (V.VK_PAUSE, "pause", "Pause", True),
    (V.VK_CAPS_LOCK, "capsLock", "Caps Lock", True),
    (V.VK_ESCAPE, "escape", "Escape", False),
    (V.VK_SPACE, "space", "Space", False),
    (V.VK_UP, "up", "Up", True),
    (V.VK_DOWN, "down", "Down", True),
    (V.VK_LEFT, "left", "Left", True),
    (V.VK_RIGHT, "right", "Right", True),
    (V.VK_COMMA, "comma", "Comma", False),
    (V.VK_MINUS, "minus", "Minus", False),
    (V.VK_PERIOD, "period", "Period", False),
    (V.VK_SLASH, "slash", "Slash", False),
    (V.VK_EQUALS, "equals", "Equals", False),
    (V.VK_SEMICOLON, "semicolon", "Semicolon", False),
    (V.VK_OPEN_BRACKET, "openBracket", "Open Bracket", False),
    (V.VK_BACK_SLASH, "backSlash", "Back Slash", False),
    (V.VK_CLOSE_BRACKET, "closeBracket", "Close Bracket", False),
    # The numpad arrows share their labels with the main arrows.
    (V.VK_KP_UP, "up", "Up", True),
    (V.VK_KP_DOWN, "down", "Down", True),
    (V.VK_KP_LEFT, "left", "Left", True),
    (V.VK_KP_RIGHT, "right", "Right", True),
    (V.VK_MULTIPLY, "multiply", "NumPad *", False),
    (V.VK_ADD, "add", "NumPad +", False),
    (V.VK_SUBTRACT, "subtract", "NumPad -", False),
    (V.VK_DECIMAL, "decimal", "NumPad .", False),
    (V.VK_DIVIDE, "divide", "NumPad /", False),
    (V.VK_DELETE, "delete", "Delete", False),
    (V.VK_NUM_LOCK, "numLock", "Num Lock", True),
    (V.VK_SCROLL_LOCK, "scrollLock", "Scroll Lock", True),
    (V.VK_PRINTSCREEN, "printScreen", "Print Screen", True),
    (V.VK_INSERT, "insert", "Insert", True),
    (V.VK_HELP, "help", "Help", True),
    (V.VK_PAGE_UP, "pgup", "Page Up", True),
    (V.VK_PAGE_DOWN, "pgdn", "Page Down", True),
    (V.VK_HOME, "home", "Home", True),
    (V.VK_END, "end", "End", True),
    (V.VK_QUOTE, "quote", "Quote", False),
    (V.VK_BACK_QUOTE, "backQuote", "Back Quote", False),
    (V.VK_DEAD_GRAVE, "deadGrave", "Dead Grave", False),
    (V.VK_DEAD_ACUTE, "deadAcute", "Dead Acute", False),
    (V.VK_DEAD_CIRCUMFLEX, "deadCircumflex", "Dead Circumflex", False),
    (V.VK_DEAD_TILDE, "deadTilde", "Dead Tilde", False),
    (V.VK_DEAD_MACRON, "deadMacron", "Dead Macron", False),
    (V.VK_DEAD_BREVE, "deadBreve", "Dead Breve", False),
    (V.VK_DEAD_ABOVEDOT, "deadAboveDot", "Dead Above Dot", False),
    (V.VK_DEAD_DIAERESIS, "deadDiaeresis", "Dead Diaeresis", False),
    (V.VK_DEAD_ABOVERING, "deadAboveRing", "Dead Above Ring", False),
    (V.VK_DEAD_DOUBLEACUTE, "deadDoubleAcute", "Dead Double Acute", False),
    (V.VK_DEAD_CARON, "deadCaron", "Dead Caron", False),
    (V.VK_DEAD_CEDILLA, "deadCedilla", "Dead Cedilla", False),
    (V.VK_DEAD_OGONEK, "deadOgonek", "Dead Ogonek", False),
    (V.VK_DEAD_IOTA, "deadIota", "Dead Iota", False),
    (V.VK_DEAD_VOICED_SOUND, "deadVoicedSound", "Dead Voiced Sound", False),
    (V.VK_DEAD_SEMIVOICED_SOUND, "deadSemivoicedSound", "Dead Semivoiced Sound", False),
    (V.VK_AMPERSAND, "ampersand", "Ampersand", False),
    (V.VK_ASTERISK, "asterisk", "Asterisk", False),
    (V.VK_QUOTEDBL, "quoteDbl", "Double Quote", False),
    (V.VK_LESS, "less", "Less", False),
    (V.VK_GREATER, "greater", "Greater", False),
    (V.VK_BRACELEFT, "braceLeft", "Left Brace", False),
    (V.VK_BRACERIGHT, "braceRight", "Right Brace", False),
    (V.VK_AT, "at", "At", False),
    (V.VK_COLON, "colon", "Colon", False),
    (V.VK_CIRCUMFLEX, "circumflex", "Circumflex", False),
    (V.VK_DOLLAR, "dollar", "Dollar", False),
    (V.VK_EURO_SIGN, "euro", "Euro", False),
    (V.VK_EXCLAMATION_MARK, "exclamationMark", "Exclamation Mark", False),
    (V.VK_INVERTED_EXCLAMATION_MARK, "invertedExclamationMark", "Inverted Exclamation Mark", False),
    (V.VK_LEFT_PARENTHESIS, "leftParenthesis", "Left Parenthesis", False),
    (V.VK_NUMBER_SIGN, "numberSign", "Number Sign", False),
    (V.VK_PLUS, "plus", "Plus", False),
    (V.VK_RIGHT_PARENTHESIS, "rightParenthesis", "Right Parenthesis", False),
    (V.VK_UNDERSCORE, "underscore", "Underscore", False),
    (V.VK_FINAL, "final", "Final", True),
    (V.VK_CONVERT, "convert", "Convert", True),
    (V.VK_NONCONVERT, "noconvert", "No Convert", True),
    (V.VK_ACCEPT, "accept", "Accept", True),
    (V.VK_MODECHANGE, "modechange", "Mode Change", True),
    (V.VK_KANA, "kana", "Kana", True),
    (V.VK_KANJI, "kanji", "Kanji", True),
    (V.VK_ALPHANUMERIC, "alphanumeric", "Alphanumeric", True),
    (V.VK_KATAKANA, "katakana", "Katakana", True),
    (V.VK_HIRAGANA, "hiragana", "Hiragana", True),
    (V.VK_FULL_WIDTH, "fullWidth", "Full-Width", True),
    (V.VK_HALF_WIDTH, "halfWidth", "Half-Width", True),
    (V.VK_ROMAN_CHARACTERS, "romanCharacters", "Roman Characters", True),
    (V.VK_ALL_CANDIDATES, "allCandidates", "All Candidates", True),
    (V.VK_PREVIOUS_CANDIDATE, "previousCandidate", "Previous Candidate", True),
    (V.VK_CODE_INPUT, "codeInput", "Code Input", True),
    (V.VK_JAPANESE_KATAKANA, "japaneseKatakana", "Japanese Katakana", True),
    (V.VK_JAPANESE_HIRAGANA, "japaneseHiragana", "Japanese Hiragana", True),
    (V.VK_JAPANESE_ROMAN, "japaneseRoman", "Japanese Roman", True),
    (V.VK_KANA_LOCK, "kanaLock", "Kana Lock", True),
    (V.VK_INPUT_METHOD_ON_OFF, "inputMethodOnOff", "Input Method On/Off", True),
    (V.VK_AGAIN, "again", "Again", True),
    (V.VK_UNDO, "undo", "Undo", True),
    (V.VK_COPY, "copy", "Copy", True),
    (V.VK_PASTE, "paste", "Paste", True),
    (V.VK_CUT, "cut", "Cut", True),
    (V.VK_FIND, "find", "Find", True),
    (V.VK_PROPS, "props", "Props", True),
    (V.VK_STOP, "stop", "Stop", True),
    (V.VK_COMPOSE, "compose", "Compose", False),
    (V.VK_ALT_GRAPH, "altGraph", "Alt Graph", False),
    (V.VK_BEGIN, "begin", "Begin", True),
]

_ROWS.extend((V[f"VK_F{n}"], f"f{n}", f"F{n}", True) for n in range(1, 25))

# Modifier flags in rendering order.
_MODIFIER_LABELS: list[tuple[Modifier, str, str]] = [
    (Modifier.SHIFT, "shift", "Shift"),
    (Modifier.CTRL, "control", "Ctrl"),
    (Modifier.META, "meta", "Meta"),
    (Modifier.ALT, "alt", "Alt"),
    (Modifier.BUTTON1, "button1", "Button1"),
    (Modifier.BUTTON2, "button2", "Button2"),
    (Modifier.BUTTON3, "button3", "Button3"),
    (Modifier.BUTTON4, "button4", "Button4"),
    (Modifier.BUTTON5, "button5", "Button5"),
]


def _build_table():
    table: dict[int, KeyInfo] = {}
    for code in (*LETTER_KEYS, *DIGIT_KEYS):
        table[code] = KeyInfo(code=code, label_id=None, label=chr(code))
    for code in NUMPAD_DIGIT_KEYS:
        table[code] = KeyInfo(code=code, label_id=NUMPAD_LABEL_ID, label=f"{NUMPAD_LABEL} {chr(code - NUMPAD_OFFSET)}")
    for code, label_id, label, action in _ROWS:
        if code in table:
            raise ValueError(f"duplicate key table row for {code!r}")
        table[int(code)] = KeyInfo(code=int(code), label_id=label_id, label=label, action=action)
    return types.MappingProxyType(table)


KEY_TABLE: collections.abc.Mapping[int, KeyInfo] = _build_table()


def _label(label_id: str, default: str, labels: typing.Optional[Labels]):
    if labels is None:
        return default
    return labels.get(label_id, default)


def key_text(key_code: int, labels: typing.Optional[Labels] = None) -> str:
    """Return a human-readable name for a virtual key code.

    Defined for every integer. Codes missing from the table come back as
    "Unknown keyCode: 0x<hex>". Pass a mapping of override identifiers to labels to
    replace any of the default labels.
    """
    if key_code in NUMPAD_DIGIT_KEYS:
        prefix = _label(NUMPAD_LABEL_ID, NUMPAD_LABEL, labels)
        return f"{prefix} {key_text(key_code - NUMPAD_OFFSET, labels)}"
    info = KEY_TABLE.get(key_code)
    if info is None:
        unknown = _label(UNKNOWN_LABEL_ID, UNKNOWN_LABEL, labels)
        return f"{unknown} keyCode: 0x{key_code:x}"
    if info.label_id is None:
        return info.label
    return _label(info.label_id, info.label, labels)


def is_action_key(key_code: int) -> bool:
    info = KEY_TABLE.get(key_code)
    return info is not None and info.action


def modifiers_text(modifiers: int, labels: typing.Optional[Labels] = None) -> str:
    "Render a modifier mask as Shift+Ctrl+... in a fixed order; empty for no modifiers."
    return "+".join(_label(label_id, default, labels) for flag, label_id, default in _MODIFIER_LABELS if modifiers & flag)
