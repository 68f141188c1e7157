# SPDX-FileCopyrightText: 2024 Ferenc Nandor Janky <ferenj@effective-range.com>
# SPDX-FileCopyrightText: 2024 Attila Gombos <attila.gombos@effective-range.com>
# SPDX-License-Identifier: MIT

from contextlib import contextmanager
from enum import Enum
from typing import Iterator, Optional, TextIO

from context_logger import get_logger
from yaml import YAMLError
from yaml.emitter import Emitter
from yaml.events import (
    Event,
    StreamStartEvent,
    StreamEndEvent,
    DocumentStartEvent,
    DocumentEndEvent,
    MappingStartEvent,
    MappingEndEvent,
    ScalarEvent,
)

from netplan_utility import EmissionFailure

log = get_logger('YamlWriter')


class YamlWriterState(Enum):
    IDLE = 'idle'
    STARTED = 'started'
    STOPPED = 'stopped'

    def __repr__(self) -> str:
        return self.name


class IYamlWriter(object):

    def start(self) -> None:
        raise NotImplementedError()

    def stop(self) -> None:
        raise NotImplementedError()

    def open_mapping(self) -> None:
        raise NotImplementedError()

    def close_mapping(self) -> None:
        raise NotImplementedError()

    def plain(self, value: str) -> None:
        raise NotImplementedError()

    def quoted(self, value: str) -> None:
        raise NotImplementedError()

    def dispose(self) -> None:
        raise NotImplementedError()


class YamlWriter(IYamlWriter):
    """Forward-only YAML event writer on top of the PyYAML emitter.

    ``start`` opens the stream, the document and the root mapping, ``stop`` closes
    them again. Keys and values in between are written with either the plain or the
    double-quoted scalar style, nothing else decides about quoting.
    """

    _PLAIN_STYLE = None
    _QUOTED_STYLE = '"'

    def __init__(self, stream: TextIO, path: Optional[str] = None) -> None:
        self._path = path
        self._emitter = Emitter(stream, indent=2, width=float('inf'), allow_unicode=True)
        self._state = YamlWriterState.IDLE
        self._depth = 0

    def get_depth(self) -> int:
        return self._depth

    def start(self) -> None:
        if self._state != YamlWriterState.IDLE:
            self._fail(f'Cannot start document in {self._state!r} state')

        self._emit(StreamStartEvent())
        self._emit(DocumentStartEvent(explicit=False))
        self._state = YamlWriterState.STARTED
        self.open_mapping()

    def stop(self) -> None:
        self._check_started()
        if self._depth != 1:
            self._fail(f'Cannot stop document with {self._depth - 1} mapping(s) still open')

        self.close_mapping()
        self._emit(DocumentEndEvent(explicit=False))
        self._emit(StreamEndEvent())
        self._state = YamlWriterState.STOPPED

    def open_mapping(self) -> None:
        self._check_started()
        self._emit(MappingStartEvent(anchor=None, tag=None, implicit=True, flow_style=False))
        self._depth += 1

    def close_mapping(self) -> None:
        self._check_in_mapping()
        self._emit(MappingEndEvent())
        self._depth -= 1

    def plain(self, value: str) -> None:
        self._scalar(value, self._PLAIN_STYLE)

    def quoted(self, value: str) -> None:
        self._scalar(value, self._QUOTED_STYLE)

    def plain_pair(self, key: str, value: str) -> None:
        self.plain(key)
        self.plain(value)

    def quoted_pair(self, key: str, value: str) -> None:
        self.plain(key)
        self.quoted(value)

    def optional_quoted_pair(self, key: str, value: Optional[str]) -> None:
        if value:
            self.quoted_pair(key, value)

    @contextmanager
    def mapping(self, key: str, quoted: bool = False) -> Iterator['YamlWriter']:
        if quoted:
            self.quoted(key)
        else:
            self.plain(key)
        self.open_mapping()
        yield self
        self.close_mapping()

    def dispose(self) -> None:
        self._emitter.dispose()

    def _scalar(self, value: str, style: Optional[str]) -> None:
        self._check_in_mapping()
        self._emit(ScalarEvent(anchor=None, tag=None, implicit=(True, True), value=value, style=style))

    def _check_started(self) -> None:
        if self._state != YamlWriterState.STARTED:
            self._fail(f'Document is not open, writer is in {self._state!r} state')

    def _check_in_mapping(self) -> None:
        self._check_started()
        if self._depth < 1:
            self._fail('No mapping is open')

    def _emit(self, event: Event) -> None:
        try:
            self._emitter.emit(event)
        except (YAMLError, OSError, UnicodeError) as error:
            log.error('Failed to emit YAML event', event=repr(event), file=self._path, error=str(error))
            raise EmissionFailure(f'Failed to emit {event!r}: {error}', self._path) from error

    def _fail(self, message: str) -> None:
        raise EmissionFailure(message, self._path)
