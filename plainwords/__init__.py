#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
plainwords package

Reversible encoding of arbitrary bytes as short, common English words laid
out like prose. plainEncoder.py is the command-line entrypoint; the codec
lives here so it can be used and tested on its own.
"""

from __future__ import annotations

from .codec import decode_group, encode_chunk
from .decoder import WordDecoder
from .encoder import WordEncoder
from .symbols import (
    ALPHABET,
    PAD,
    SYMBOLS,
    WORDS,
    SymbolLookupError,
    SymbolTable,
    TableIntegrityError,
    WordCodecError,
    build_symbol_table,
    get_symbol_table,
)

__all__ = [
    "ALPHABET",
    "PAD",
    "SYMBOLS",
    "WORDS",
    "SymbolLookupError",
    "SymbolTable",
    "TableIntegrityError",
    "WordCodecError",
    "WordDecoder",
    "WordEncoder",
    "build_symbol_table",
    "decode_group",
    "encode_chunk",
    "get_symbol_table",
]
