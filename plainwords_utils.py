#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import io
from typing import Callable, Union

from plainwords import WordDecoder, WordEncoder

PUMP_BLOCK_SIZE = 64 * 1024


def encode_bytes(data: bytes, **fmt) -> str:
    """Encode `data` in memory. `fmt` is passed through to WordEncoder."""
    sink = io.BytesIO()
    with WordEncoder(sink, close_sink=False, **fmt) as enc:
        enc.write(data)
    return sink.getvalue().decode("ascii")


def decode_text(text: Union[str, bytes, bytearray]) -> bytes:
    if isinstance(text, str):
        raw = text.encode("utf-8")
    else:
        raw = bytes(text)
    with WordDecoder(io.BytesIO(raw)) as dec:
        return dec.read()


def pump(
    read: Callable[[int], bytes],
    write: Callable[[bytes], object],
    block_size: int = PUMP_BLOCK_SIZE,
) -> int:
    """Copy until `read` returns empty; returns the number of bytes copied."""
    total = 0
    size = max(1, int(block_size))
    while True:
        block = read(size)
        if not block:
            break
        write(block)
        total += len(block)
    return total


def format_duration_mmss(seconds: float) -> str:
    total = max(0, int(round(seconds)))
    mm = total // 60
    ss = total % 60
    return f"{mm:02d}:{ss:02d}"
