#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""Standard base64 transform, one 3-byte chunk / 4-symbol group at a time.

decode_group() is lenient: a truncated group still yields every whole byte its
symbols carry, which is what the word decoder needs at the end of a stream.
"""

from __future__ import annotations

import base64
from typing import Iterable

from .symbols import PAD, WordCodecError

CHUNK_BYTES = 3
GROUP_SYMBOLS = 4


def encode_chunk(chunk: bytes) -> str:
    n = len(chunk)
    if n < 1 or n > CHUNK_BYTES:
        raise WordCodecError(f"chunk must hold 1..{CHUNK_BYTES} bytes, got {n}")
    return base64.b64encode(bytes(chunk)).decode("ascii")


def decode_group(symbols: Iterable[str]) -> bytes:
    group = list(symbols)
    if len(group) > GROUP_SYMBOLS:
        raise WordCodecError(f"symbol group longer than {GROUP_SYMBOLS}")
    # data ends at the first padding symbol
    data = "".join(group).split(PAD, 1)[0]
    # a single symbol holds 6 bits, not a whole byte
    if len(data) < 2:
        return b""
    data += PAD * (-len(data) % GROUP_SYMBOLS)
    try:
        return base64.b64decode(data, validate=True)
    except ValueError as e:
        raise WordCodecError(f"invalid symbol group {''.join(group)!r}: {e}") from e
