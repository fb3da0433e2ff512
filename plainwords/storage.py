#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import json
import os
import time
from typing import Dict, Optional

DEFAULTS: Dict[str, object] = {
    "words_per_sentence": 10,
    "sentences_per_paragraph": 10,
    "line_break": "lf",
    "read_size": 4096,
    "runtime_log": "",
}

LINE_BREAKS = {"lf": "\n", "crlf": "\r\n"}


def ensure_dir(path: str) -> None:
    if not path or os.path.isdir(path):
        return
    os.makedirs(path, exist_ok=True)


def _int_cfg(value: object, default: int, min_v: int, max_v: int) -> int:
    try:
        v = int(value)  # type: ignore[arg-type]
    except Exception:
        v = int(default)
    if v < int(min_v):
        return int(min_v)
    if v > int(max_v):
        return int(max_v)
    return int(v)


def load_config(path: str) -> Dict[str, object]:
    if not path or not os.path.isfile(path):
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except Exception:
        return {}
    if not isinstance(data, dict):
        return {}
    return data


def save_config(path: str, cfg: Dict[str, object]) -> None:
    tmp = path + ".tmp"
    ensure_dir(os.path.dirname(path))
    with open(tmp, "w", encoding="utf-8") as f:
        json.dump(cfg, f, ensure_ascii=False, indent=2, sort_keys=True)
    os.replace(tmp, path)


def resolve_settings(
    file_cfg: Optional[Dict[str, object]] = None,
    overrides: Optional[Dict[str, object]] = None,
) -> Dict[str, object]:
    """Merge DEFAULTS < config file < CLI overrides (None values are skipped)."""
    merged: Dict[str, object] = dict(DEFAULTS)
    for src in (file_cfg or {}, overrides or {}):
        for key, value in src.items():
            if key in DEFAULTS and value is not None:
                merged[key] = value

    out: Dict[str, object] = {}
    out["words_per_sentence"] = _int_cfg(merged["words_per_sentence"], 10, 1, 1000)
    out["sentences_per_paragraph"] = _int_cfg(merged["sentences_per_paragraph"], 10, 1, 1000)
    out["read_size"] = _int_cfg(merged["read_size"], 4096, 1, 1 << 20)
    line_break = str(merged["line_break"] or "lf").strip().lower()
    out["line_break"] = line_break if line_break in LINE_BREAKS else "lf"
    out["runtime_log"] = str(merged["runtime_log"] or "")
    return out


class RuntimeLog:
    """Best-effort, timestamped append-only log file. Write failures are ignored."""

    def __init__(self, path: str = "") -> None:
        self.path = str(path or "")

    @property
    def enabled(self) -> bool:
        return bool(self.path)

    def append(self, line: str) -> None:
        if not line or not self.path:
            return
        ts = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
        try:
            ensure_dir(os.path.dirname(self.path))
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(f"{ts} {line}\n")
        except Exception:
            pass
