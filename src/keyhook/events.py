# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import typing

import attr
import msgspec

from .commontypes import InvalidKeyEvent
from .keyboard_consts import CHAR_UNDEFINED, VK_UNDEFINED, KeyEventKind, KeyLocation, VirtualKey
from .keytable import is_action_key, key_text, modifiers_text

if typing.TYPE_CHECKING:
    import collections.abc

    from .keytable import Labels

# Characters that describe() renders by key name rather than as a quoted literal.
NAMED_CHARACTERS = frozenset(
    chr(code)
    for code in (
        VirtualKey.VK_ENTER,
        VirtualKey.VK_BACK_SPACE,
        VirtualKey.VK_TAB,
        VirtualKey.VK_CANCEL,
        VirtualKey.VK_DELETE,
    )
)


class InputEnvelope(msgspec.Struct, frozen=True):
    kind: KeyEventKind
    # milliseconds, from a monotonic clock with an arbitrary epoch
    when: int
    modifiers: int = 0
    source: typing.Optional[str] = None


@attr.define(kw_only=True)
class KeyEvent:
    """A single keyboard event as delivered by the global hook.

    The envelope and key location are fixed once the event exists. raw_code, key_code and
    key_char stay assignable so the producing hook can correct them before handing the event
    off; nothing else should write to them.
    """

    envelope: InputEnvelope = attr.field(on_setattr=attr.setters.frozen)
    raw_code: int
    key_code: int
    key_char: str
    key_location: int = attr.field(default=KeyLocation.UNKNOWN, on_setattr=attr.setters.frozen)

    def __attrs_post_init__(self):
        if self.kind == KeyEventKind.TYPED and (self.key_char == CHAR_UNDEFINED or self.key_code != VK_UNDEFINED):
            raise InvalidKeyEvent(self.kind, self.key_code, self.key_char)

    @classmethod
    def create(
        cls,
        kind: KeyEventKind,
        when: int,
        modifiers: int,
        raw_code: int,
        key_code: int,
        key_char: str,
        key_location: int = KeyLocation.UNKNOWN,
        source: typing.Optional[str] = None,
    ):
        return cls(
            envelope=InputEnvelope(kind=kind, when=when, modifiers=modifiers, source=source),
            raw_code=raw_code,
            key_code=key_code,
            key_char=key_char,
            key_location=key_location,
        )

    @classmethod
    def typed(cls, key_char: str, when: int, modifiers: int = 0, raw_code: int = 0, **kwargs):
        return cls.create(KeyEventKind.TYPED, when, modifiers, raw_code, VK_UNDEFINED, key_char, **kwargs)

    @classmethod
    def pressed(cls, key_code: int, when: int, modifiers: int = 0, raw_code: int = 0, key_char: str = CHAR_UNDEFINED, **kwargs):
        return cls.create(KeyEventKind.PRESSED, when, modifiers, raw_code, key_code, key_char, **kwargs)

    @classmethod
    def released(cls, key_code: int, when: int, modifiers: int = 0, raw_code: int = 0, key_char: str = CHAR_UNDEFINED, **kwargs):
        return cls.create(KeyEventKind.RELEASED, when, modifiers, raw_code, key_code, key_char, **kwargs)

    @property
    def kind(self):
        return self.envelope.kind

    @property
    def when(self):
        return self.envelope.when

    @property
    def modifiers(self):
        return self.envelope.modifiers

    @property
    def source(self):
        return self.envelope.source

    @property
    def is_action_key(self):
        return is_action_key(self.key_code)

    @property
    def key_text(self):
        return key_text(self.key_code)

    def param_string(self, labels: typing.Optional[Labels] = None):
        return describe(self, labels=labels)

    def __str__(self):
        return f"{type(self).__name__}[{self.param_string()}]"


def _kind_name(kind: int):
    try:
        return KeyEventKind(kind).name
    except ValueError:
        return "unknown type"


def _location_name(location: int):
    try:
        return KeyLocation(location).name
    except ValueError:
        return KeyLocation.UNKNOWN.name


def _char_text(key_char: str, labels: typing.Optional[Labels]):
    if key_char in NAMED_CHARACTERS:
        return key_text(ord(key_char), labels)
    return f"'{key_char}'"


def describe(
    event: KeyEvent,
    labels: typing.Optional[Labels] = None,
    modifier_renderer: collections.abc.Callable[[int, typing.Optional[Labels]], str] = modifiers_text,
) -> str:
    """Summarise an event on one line, for logs and diagnostics. Not meant to be parsed."""
    parts = [
        _kind_name(event.kind),
        f"key_code={int(event.key_code)}",
        f"key_text={key_text(event.key_code, labels)}",
        f"key_char={_char_text(event.key_char, labels)}",
    ]
    if event.modifiers != 0:
        parts.append(f"modifiers={modifier_renderer(event.modifiers, labels)}")
    parts.append(f"key_location={_location_name(event.key_location)}")
    parts.append(f"raw_code={event.raw_code}")
    return ",".join(parts)
