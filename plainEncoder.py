#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Encode any file as plain-language prose, and decode it back byte for byte.
RU: Кодирует любой файл в текст из простых английских слов и декодирует обратно без потерь.
"""

from __future__ import annotations

import argparse
import sys
import time
from typing import Dict, List, Optional

from plainwords import WordCodecError, WordDecoder, WordEncoder
from plainwords.storage import (
    DEFAULTS,
    LINE_BREAKS,
    RuntimeLog,
    load_config,
    resolve_settings,
    save_config,
)
from plainwords_utils import format_duration_mmss, pump

VERSION = "1.0.0"

USAGE = (
    "Usage: plainEncoder.py encode <original_file> <encoded_file>\n"
    "       plainEncoder.py decode <encoded_file> <decoded_file>\n"
    "Use '-' for stdin/stdout. RU: '-' означает stdin/stdout."
)

QUIET = False
_STATUS_STREAM = sys.stdout


def out(msg: str) -> None:
    if QUIET:
        return
    _STATUS_STREAM.write(msg + "\n")
    _STATUS_STREAM.flush()


def _open_input(path: str):
    if path == "-":
        return sys.stdin.buffer, False
    return open(path, "rb"), True


def _open_output(path: str):
    if path == "-":
        return sys.stdout.buffer, False
    return open(path, "wb"), True


def run_encode(src_path: str, dst_path: str, settings: Dict[str, object]) -> Dict[str, int]:
    src, own_src = _open_input(src_path)
    try:
        dst, own_dst = _open_output(dst_path)
        try:
            enc = WordEncoder(
                dst,
                words_per_sentence=int(settings["words_per_sentence"]),
                sentences_per_paragraph=int(settings["sentences_per_paragraph"]),
                line_break=LINE_BREAKS[str(settings["line_break"])],
                close_sink=False,
            )
            with enc:
                count = pump(src.read, enc.write, int(settings["read_size"]))
            dst.flush()
        finally:
            if own_dst:
                dst.close()
    finally:
        if own_src:
            src.close()
    return {
        "bytes": count,
        "words": enc.words_written,
        "sentences": enc.sentences_written,
        "paragraphs": enc.paragraphs_written,
    }


def run_decode(src_path: str, dst_path: str, settings: Dict[str, object]) -> Dict[str, int]:
    src, own_src = _open_input(src_path)
    try:
        dst, own_dst = _open_output(dst_path)
        try:
            dec = WordDecoder(src, read_size=int(settings["read_size"]), close_source=False)
            with dec:
                count = pump(dec.read, dst.write, int(settings["read_size"]))
            dst.flush()
        finally:
            if own_dst:
                dst.close()
    finally:
        if own_src:
            src.close()
    return {"bytes": count, "words": dec.words_seen, "ignored": dec.words_ignored}


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="plainEncoder.py",
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )
    ap.add_argument("-h", "--help", action="store_true", help="show this help message and exit. RU: показать помощь и выйти.")
    ap.add_argument("--version", action="store_true", help="print version and exit. RU: вывести версию и выйти.")
    ap.add_argument("mode", nargs="?", help="encode (e...) or decode (d...). RU: encode (e...) или decode (d...).")
    ap.add_argument("input", nargs="?", help="input file or '-'. RU: входной файл или '-'.")
    ap.add_argument("output", nargs="?", help="output file or '-'. RU: выходной файл или '-'.")
    ap.add_argument("--config", default=None, help="JSON config file (default: none). RU: JSON-файл настроек (по умолчанию: нет).")
    ap.add_argument("--save-config", action="store_true", help="write effective settings to --config and continue. RU: сохранить настройки в --config.")
    ap.add_argument(
        "--words-per-sentence",
        type=int,
        default=None,
        help=f"words per sentence (default: {DEFAULTS['words_per_sentence']}). RU: слов в предложении (по умолчанию: {DEFAULTS['words_per_sentence']}).",
    )
    ap.add_argument(
        "--sentences-per-paragraph",
        type=int,
        default=None,
        help=f"sentences per paragraph (default: {DEFAULTS['sentences_per_paragraph']}). RU: предложений в абзаце (по умолчанию: {DEFAULTS['sentences_per_paragraph']}).",
    )
    ap.add_argument("--crlf", dest="line_break", action="store_const", const="crlf", default=None, help="use CRLF paragraph breaks (default: LF). RU: переводы строк CRLF (по умолчанию: LF).")
    ap.add_argument("--read-size", type=int, default=None, help=f"I/O block size (default: {DEFAULTS['read_size']}). RU: размер блока чтения (по умолчанию: {DEFAULTS['read_size']}).")
    ap.add_argument("--runtime-log", default=None, help="append status lines to this file (default: off). RU: дописывать статус в файл (по умолчанию: выкл).")
    ap.add_argument("--quiet", action="store_true", help="less terminal output. RU: меньше вывода в терминал.")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    global QUIET, _STATUS_STREAM
    ap = _build_parser()
    args = ap.parse_args(argv)

    if args.help:
        ap.print_help()
        return 0
    if args.version:
        print(f"plainEncoder.py {VERSION}")
        return 0

    mode = str(args.mode or "").lower()
    is_encode = mode.startswith("e")
    is_decode = mode.startswith("d")
    if not (args.input and args.output and (is_encode or is_decode)):
        print(USAGE)
        return 2

    QUIET = bool(args.quiet)
    # Keep stdout clean when it carries the payload.
    _STATUS_STREAM = sys.stderr if args.output == "-" else sys.stdout

    file_cfg = load_config(args.config) if args.config else {}
    settings = resolve_settings(
        file_cfg,
        {
            "words_per_sentence": args.words_per_sentence,
            "sentences_per_paragraph": args.sentences_per_paragraph,
            "line_break": args.line_break,
            "read_size": args.read_size,
            "runtime_log": args.runtime_log,
        },
    )
    if args.save_config:
        if not args.config:
            out("ERROR: --save-config requires --config")
            return 2
        save_config(args.config, settings)

    log = RuntimeLog(str(settings["runtime_log"]))
    label = "Encoding" if is_encode else "Decoding"
    log.append(f"START: {label.lower()} {args.input} -> {args.output} v{VERSION}")

    start = time.monotonic()
    try:
        if is_encode:
            stats = run_encode(args.input, args.output, settings)
        else:
            stats = run_decode(args.input, args.output, settings)
    except (OSError, WordCodecError) as e:
        msg = f"ERROR: {label.lower()} failed: {type(e).__name__}: {e}"
        log.append(msg)
        out(msg)
        return 1
    elapsed = time.monotonic() - start

    details = " ".join(f"{k}={v}" for k, v in stats.items())
    log.append(f"DONE: {label.lower()} {details} time={format_duration_mmss(elapsed)}")
    out(f"{label} completed in {int(elapsed)} seconds")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
