#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""Byte source that reads plain-language words and yields the original bytes.

Tokens are maximal runs of ASCII letters. Anything else (spaces, periods,
digits, line breaks, non-ASCII) only separates tokens. Tokens that are not in
the symbol table are dropped, so extra prose around the encoded words is
ignored instead of failing the decode.
"""

from __future__ import annotations

from typing import Iterator, List, Optional

from .codec import GROUP_SYMBOLS, decode_group
from .symbols import SymbolTable, get_symbol_table

DEFAULT_READ_SIZE = 4096


def _is_letter(value: int) -> bool:
    return (0x41 <= value <= 0x5A) or (0x61 <= value <= 0x7A)


class WordDecoder:
    def __init__(
        self,
        source,
        *,
        read_size: int = DEFAULT_READ_SIZE,
        table: Optional[SymbolTable] = None,
        close_source: bool = True,
    ) -> None:
        self._source = source
        self._table = table if table is not None else get_symbol_table()
        self._read_size = max(1, int(read_size))
        self._close_source = bool(close_source)

        self._raw = b""
        self._raw_pos = 0
        self._source_done = False
        self._token = bytearray()

        self._decoded = b""
        self._decoded_pos = 0
        self._exhausted = False
        self._closed = False

        self.words_seen = 0
        self.words_ignored = 0

    @property
    def closed(self) -> bool:
        return self._closed

    def readable(self) -> bool:
        return True

    def read_byte(self) -> Optional[int]:
        """Return the next decoded byte as an int, or None at end of stream."""
        self._check_open()
        if self._decoded_pos >= len(self._decoded) and not self._refill():
            return None
        value = self._decoded[self._decoded_pos]
        self._decoded_pos += 1
        return value

    def read(self, size: int = -1) -> bytes:
        self._check_open()
        out = bytearray()
        while size is None or size < 0 or len(out) < size:
            if self._decoded_pos >= len(self._decoded) and not self._refill():
                break
            end = len(self._decoded)
            if size is not None and size >= 0:
                end = min(end, self._decoded_pos + (size - len(out)))
            out += self._decoded[self._decoded_pos:end]
            self._decoded_pos = end
        return bytes(out)

    def __iter__(self) -> Iterator[int]:
        while True:
            value = self.read_byte()
            if value is None:
                return
            yield value

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._close_source:
            self._source.close()

    def __enter__(self) -> "WordDecoder":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _check_open(self) -> None:
        if self._closed:
            raise ValueError("read from closed WordDecoder")

    def _refill(self) -> bool:
        # A group of bare padding decodes to nothing; keep going until bytes
        # show up or the words run out.
        while not self._exhausted:
            symbols: List[str] = []
            while len(symbols) < GROUP_SYMBOLS:
                word = self._next_word()
                if word is None:
                    self._exhausted = True
                    break
                self.words_seen += 1
                sym = self._table.symbol_for(word)
                if sym is None:
                    self.words_ignored += 1
                    continue
                symbols.append(sym)
            if not symbols:
                break
            decoded = decode_group(symbols)
            if decoded:
                self._decoded = decoded
                self._decoded_pos = 0
                return True
        return False

    def _next_word(self) -> Optional[str]:
        token = self._token
        while True:
            if self._raw_pos >= len(self._raw):
                if self._source_done or not self._fetch():
                    if token:
                        word = token.decode("ascii").lower()
                        token.clear()
                        return word
                    return None
            value = self._raw[self._raw_pos]
            self._raw_pos += 1
            if _is_letter(value):
                token.append(value)
            elif token:
                word = token.decode("ascii").lower()
                token.clear()
                return word

    def _fetch(self) -> bool:
        chunk = self._source.read(self._read_size)
        if not chunk:
            self._source_done = True
            return False
        if isinstance(chunk, str):
            chunk = chunk.encode("utf-8")
        self._raw = bytes(chunk)
        self._raw_pos = 0
        return True
