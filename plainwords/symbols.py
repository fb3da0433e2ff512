#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""Symbol table: the 64 base64 symbols plus padding, each paired with a short word.

The pairing is fixed: WORDS[i] belongs to SYMBOLS[i]. Changing either tuple
changes the encoded text format, so both are frozen here.
"""

from __future__ import annotations

import string
from collections import Counter
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Sequence

PAD = "="
ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits + "+/"
SYMBOLS = ALPHABET + PAD

WORDS = (
    "a", "i", "be", "of", "to", "in", "it", "do", "he", "on",
    "we", "at", "go", "or", "by", "my", "as", "if", "me", "so",
    "up", "us", "oh", "the", "and", "you", "but", "say", "his", "get",
    "she", "can", "all", "who", "see", "her", "out", "one", "him", "how",
    "now", "our", "way", "two", "use", "man", "day", "new", "any", "why",
    "try", "let", "too", "may", "ask", "put", "big", "own", "old", "yes",
    "its", "few", "run", "guy", "lot",
)

_LETTERS = frozenset(string.ascii_lowercase)


class WordCodecError(ValueError):
    pass


class TableIntegrityError(WordCodecError):
    pass


class SymbolLookupError(WordCodecError, KeyError):
    def __init__(self, symbol: str) -> None:
        super().__init__(f"no word mapped for symbol {symbol!r}")
        self.symbol = symbol

    def __str__(self) -> str:
        # KeyError would repr() the message otherwise.
        return str(self.args[0])


@dataclass(frozen=True)
class SymbolTable:
    symbol_to_word: Mapping[str, str]
    word_to_symbol: Mapping[str, str]

    def word_for(self, symbol: str) -> str:
        word = self.symbol_to_word.get(symbol)
        if word is None:
            raise SymbolLookupError(symbol)
        return word

    def symbol_for(self, word: str) -> Optional[str]:
        """Return the symbol for `word` (any case), or None when it is not in the table."""
        return self.word_to_symbol.get(word.lower())

    def __len__(self) -> int:
        return len(self.symbol_to_word)


def build_symbol_table(words: Sequence[str] = WORDS, symbols: str = SYMBOLS) -> SymbolTable:
    if len(set(symbols)) != len(symbols):
        raise TableIntegrityError("symbol set contains duplicates")
    if len(words) != len(symbols):
        raise TableIntegrityError(
            f"word list has {len(words)} entries, expected {len(symbols)}"
        )
    for word in words:
        if not word or not set(word) <= _LETTERS:
            raise TableIntegrityError(f"word {word!r} is not lowercase ASCII letters")
    dups = sorted(w for w, n in Counter(words).items() if n > 1)
    if dups:
        raise TableIntegrityError(f"duplicate words in table: {', '.join(dups)}")

    forward = dict(zip(symbols, words))
    backward = {w: s for s, w in forward.items()}
    return SymbolTable(
        symbol_to_word=MappingProxyType(forward),
        word_to_symbol=MappingProxyType(backward),
    )


_TABLE_CACHE: Optional[SymbolTable] = None


def get_symbol_table() -> SymbolTable:
    global _TABLE_CACHE
    if _TABLE_CACHE is None:
        _TABLE_CACHE = build_symbol_table()
    return _TABLE_CACHE
