# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import collections.abc
import logging
import pathlib
import typing

import msgspec
import trio

from .commontypes import InvalidKeyEvent, TraceError
from .events import KeyEvent
from .keyboard_consts import KeyEventKind

logger = logging.getLogger(__name__)


class KeyEventRecord(msgspec.Struct, frozen=True):
    kind: KeyEventKind
    when: int
    modifiers: int
    raw_code: int
    key_code: int
    # code point, so lone surrogate halves survive the UTF-8 wire form
    key_char: int
    key_location: int
    source: typing.Optional[str] = None

    @classmethod
    def from_event(cls, event: KeyEvent):
        return cls(
            kind=event.kind,
            when=event.when,
            modifiers=int(event.modifiers),
            raw_code=int(event.raw_code),
            key_code=int(event.key_code),
            key_char=ord(event.key_char),
            key_location=int(event.key_location),
            source=event.source,
        )

    def to_event(self):
        return KeyEvent.create(
            self.kind,
            self.when,
            self.modifiers,
            self.raw_code,
            self.key_code,
            chr(self.key_char),
            key_location=self.key_location,
            source=self.source,
        )


_encoder = msgspec.json.Encoder()
_decoder = msgspec.json.Decoder(KeyEventRecord)


def encode_trace(events: collections.abc.Iterable[KeyEvent]) -> bytes:
    "Encode events as newline-delimited JSON, one record per line."
    return b"".join(_encoder.encode(KeyEventRecord.from_event(event)) + b"\n" for event in events)


def decode_trace(data: bytes) -> list[KeyEvent]:
    events = []
    for lineno, line in enumerate(data.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            record = _decoder.decode(line)
        except msgspec.DecodeError as exc:
            raise TraceError(lineno, str(exc)) from exc
        try:
            events.append(record.to_event())
        except (InvalidKeyEvent, ValueError, OverflowError) as exc:
            raise TraceError(lineno, str(exc)) from exc
    return events


class Recorder:
    def __init__(self, wrapped: collections.abc.AsyncIterable[KeyEvent]):
        self.wrapped = wrapped
        self.events: list[KeyEvent] = []

    def save_events(self, path: pathlib.Path):
        path.write_bytes(encode_trace(self.events))
        logger.debug("Saved %d key events to %s", len(self.events), path)

    async def keystream(self) -> collections.abc.AsyncIterator[KeyEvent]:
        async for event in self.wrapped:
            self.events.append(event)
            yield event


class Replayer:
    """Plays back recorded events, keeping the recorded gaps between them.

    A speed above 1 replays faster than real time. Timestamps that go backwards are
    treated as simultaneous.
    """

    def __init__(self, events: collections.abc.Sequence[KeyEvent], speed: float = 1.0):
        if speed <= 0:
            raise ValueError(f"Replay speed must be positive, not {speed}")
        self.events = events
        self.speed = speed

    @classmethod
    def load(cls, path: pathlib.Path, speed: float = 1.0):
        events = decode_trace(path.read_bytes())
        logger.debug("Loaded %d key events from %s", len(events), path)
        return cls(events, speed=speed)

    async def keystream(self) -> collections.abc.AsyncIterator[KeyEvent]:
        previous = None
        for event in self.events:
            if previous is not None:
                gap = max(event.when - previous, 0)
                await trio.sleep(gap / 1000 / self.speed)
            previous = event.when
            yield event
