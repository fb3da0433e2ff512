#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""Byte sink that writes its input as plain-language words.

Usage:

    with open(dst, "wb") as raw, WordEncoder(raw) as enc:
        enc.write(data)

Every 3 input bytes become 4 base64 symbols, and every symbol becomes one
word. Words are joined by single spaces, a period follows every
`words_per_sentence`-th word, and a blank line follows every
`sentences_per_paragraph`-th sentence.
"""

from __future__ import annotations

from typing import Optional

from .codec import CHUNK_BYTES, encode_chunk
from .symbols import SymbolTable, get_symbol_table

WORDS_PER_SENTENCE = 10
SENTENCES_PER_PARAGRAPH = 10


class WordEncoder:
    def __init__(
        self,
        sink,
        *,
        words_per_sentence: int = WORDS_PER_SENTENCE,
        sentences_per_paragraph: int = SENTENCES_PER_PARAGRAPH,
        line_break: str = "\n",
        table: Optional[SymbolTable] = None,
        close_sink: bool = True,
    ) -> None:
        if int(words_per_sentence) < 1 or int(sentences_per_paragraph) < 1:
            raise ValueError("words_per_sentence and sentences_per_paragraph must be >= 1")
        self._sink = sink
        self._table = table if table is not None else get_symbol_table()
        self.words_per_sentence = int(words_per_sentence)
        self.sentences_per_paragraph = int(sentences_per_paragraph)
        self._paragraph_break = (str(line_break) * 2).encode("ascii")
        self._close_sink = bool(close_sink)

        self._chunk = bytearray()
        self.words_written = 0
        self.sentences_written = 0
        self.paragraphs_written = 0
        self._space_before_next = False
        self._capitalize_next = True
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def writable(self) -> bool:
        return True

    def write(self, data) -> int:
        self._check_open()
        view = memoryview(data).cast("B")
        for value in view:
            self._chunk.append(value)
            if len(self._chunk) == CHUNK_BYTES:
                self._flush_chunk()
        return len(view)

    def write_byte(self, value: int) -> None:
        self._check_open()
        self._chunk.append(int(value) & 0xFF)
        if len(self._chunk) == CHUNK_BYTES:
            self._flush_chunk()

    def flush(self) -> None:
        """Force out buffered bytes as a padded group, then flush the sink."""
        self._check_open()
        self._flush_chunk()
        self._sink.flush()

    def close(self) -> None:
        if self._closed:
            return
        try:
            self._flush_chunk()
            if self.words_written % self.words_per_sentence != 0:
                self._sink.write(b".")
            self._sink.flush()
        finally:
            self._closed = True
            if self._close_sink:
                self._sink.close()

    def __enter__(self) -> "WordEncoder":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _check_open(self) -> None:
        if self._closed:
            raise ValueError("write to closed WordEncoder")

    def _flush_chunk(self) -> None:
        if not self._chunk:
            return
        symbols = encode_chunk(bytes(self._chunk))
        self._chunk.clear()
        for sym in symbols:
            self._emit(self._table.word_for(sym))

    def _emit(self, word: str) -> None:
        sink = self._sink
        if self._space_before_next:
            sink.write(b" ")
        self._space_before_next = True
        if self._capitalize_next:
            word = word[:1].upper() + word[1:]
            self._capitalize_next = False
        # the pronoun is always upper case, mid-sentence too
        if word == "i":
            word = "I"
        sink.write(word.encode("ascii"))

        self.words_written += 1
        if self.words_written % self.words_per_sentence:
            return
        sink.write(b".")
        self.sentences_written += 1
        self._capitalize_next = True
        if self.sentences_written % self.sentences_per_paragraph == 0:
            sink.write(self._paragraph_break)
            self.paragraphs_written += 1
            self._space_before_next = False
