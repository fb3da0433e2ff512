#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Print the symbol -> word table used by plainEncoder.py:
- one row per base64 symbol (plus padding), in table order
- exits with status 1 if the table fails validation
"""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from plainwords.symbols import SYMBOLS, TableIntegrityError, build_symbol_table  # noqa: E402


def format_rows() -> list[str]:
    table = build_symbol_table()
    lines: list[str] = []
    for idx, sym in enumerate(SYMBOLS):
        lines.append(f"{idx:>2}  {sym}  {table.word_for(sym)}")
    return lines


def main() -> int:
    try:
        rows = format_rows()
    except TableIntegrityError as e:
        sys.stderr.write(f"ERROR: {e}\n")
        return 1
    sys.stdout.write("\n".join(rows) + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
