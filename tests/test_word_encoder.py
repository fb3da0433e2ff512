#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import io
import re
import unittest

from plainwords.encoder import WordEncoder
from plainwords.symbols import SymbolLookupError, SymbolTable, get_symbol_table


def _sample(n: int) -> bytes:
    return bytes((i * 37 + 11) % 256 for i in range(n))


class _BrokenSink:
    def write(self, data: bytes) -> int:
        raise OSError("disk full")

    def flush(self) -> None:
        pass

    def close(self) -> None:
        pass


class WordEncoderTests(unittest.TestCase):
    def _encode(self, data: bytes, **kwargs) -> bytes:
        sink = io.BytesIO()
        with WordEncoder(sink, close_sink=False, **kwargs) as enc:
            enc.write(data)
        return sink.getvalue()

    def test_empty_input_produces_empty_output_like_original(self) -> None:
        # Zero words is already a sentence boundary, so no terminator is written.
        # The original encoder behaves the same way; decoding "" gives b"" back.
        sink = io.BytesIO()
        enc = WordEncoder(sink, close_sink=False)
        enc.close()
        self.assertEqual(sink.getvalue(), b"")
        self.assertEqual(enc.words_written, 0)

    def test_one_byte_is_four_words_with_terminator(self) -> None:
        self.assertEqual(self._encode(b"\xff"), b"Guy any lot lot.")

    def test_full_chunk_capitalizes_first_word(self) -> None:
        self.assertEqual(self._encode(b"\x00\x00\x00"), b"A a a a.")

    def test_pronoun_is_always_upper_case(self) -> None:
        # 0x04 0x10 0x41 -> "BBBB" -> "i i i i"
        self.assertEqual(self._encode(b"\x04\x10\x41"), b"I I I I.")

    def test_thirty_bytes_make_four_sentences(self) -> None:
        sink = io.BytesIO()
        with WordEncoder(sink, close_sink=False) as enc:
            enc.write(_sample(30))
        text = sink.getvalue().decode("ascii")
        self.assertEqual(enc.words_written, 40)
        self.assertEqual(enc.sentences_written, 4)
        self.assertEqual(enc.paragraphs_written, 0)
        self.assertEqual(text.count("."), 4)
        self.assertTrue(text.endswith("."))
        self.assertNotIn("\n", text)
        self.assertEqual(len(text.replace(".", "").split(" ")), 40)

    def test_tenth_sentence_ends_paragraph(self) -> None:
        sink = io.BytesIO()
        with WordEncoder(sink, close_sink=False) as enc:
            enc.write(_sample(75))
        text = sink.getvalue().decode("ascii")
        self.assertEqual(enc.words_written, 100)
        self.assertEqual(enc.sentences_written, 10)
        self.assertEqual(enc.paragraphs_written, 1)
        self.assertTrue(text.endswith(".\n\n"))
        self.assertEqual(text.count("\n\n"), 1)

    def test_new_paragraph_has_no_leading_space(self) -> None:
        text = self._encode(_sample(78)).decode("ascii")
        first, second = text.split("\n\n")
        self.assertTrue(first.endswith("."))
        self.assertRegex(second, r"^[A-Z][a-z]* ")
        self.assertTrue(second.endswith("."))
        self.assertEqual(len(second.rstrip(".").split(" ")), 4)

    def test_format_invariants(self) -> None:
        text = self._encode(_sample(300)).decode("ascii")
        self.assertNotIn("  ", text)
        self.assertNotIn(" .", text)
        self.assertTrue(text.endswith(".\n\n"))
        sentences = [s.strip() for s in text.split(".") if s.strip()]
        self.assertEqual(len(sentences), 40)
        for sentence in sentences:
            words = sentence.split(" ")
            self.assertEqual(len(words), 10)
            self.assertRegex(words[0], r"^[A-Z][a-z]*$")
            for word in words[1:]:
                self.assertTrue(word == "I" or re.fullmatch(r"[a-z]+", word), word)
        self.assertNotIn(" i ", text)
        # paragraph breaks only right after the 10th, 20th, ... period
        for para in text.split("\n\n"):
            if para:
                self.assertEqual(para.count("."), 10)

    def test_write_byte_matches_write(self) -> None:
        data = _sample(17)
        sink = io.BytesIO()
        with WordEncoder(sink, close_sink=False) as enc:
            for value in data:
                enc.write_byte(value)
        self.assertEqual(sink.getvalue(), self._encode(data))

    def test_write_returns_length_and_accepts_bytearray(self) -> None:
        sink = io.BytesIO()
        enc = WordEncoder(sink, close_sink=False)
        self.assertEqual(enc.write(bytearray(b"abcd")), 4)
        self.assertEqual(enc.write(memoryview(b"ef")), 2)
        enc.close()
        self.assertEqual(enc.words_written, 8)

    def test_flush_forces_padded_group(self) -> None:
        sink = io.BytesIO()
        enc = WordEncoder(sink, close_sink=False)
        enc.write(b"\xff")
        enc.flush()
        self.assertEqual(sink.getvalue(), b"Guy any lot lot")
        enc.write(b"\xff")
        enc.close()
        self.assertEqual(sink.getvalue(), b"Guy any lot lot guy any lot lot.")

    def test_no_extra_period_on_sentence_boundary(self) -> None:
        text = self._encode(b"\x00" * 15)
        self.assertEqual(text.count(b"."), 2)
        self.assertFalse(text.endswith(b".."))

    def test_custom_sentence_length(self) -> None:
        self.assertEqual(self._encode(b"\x00\x00\x00", words_per_sentence=3), b"A a a. A.")

    def test_custom_paragraphs_and_line_break(self) -> None:
        out = self._encode(
            b"\x00\x00\x00",
            words_per_sentence=2,
            sentences_per_paragraph=1,
            line_break="\r\n",
        )
        self.assertEqual(out, b"A a.\r\n\r\nA a.\r\n\r\n")

    def test_rejects_bad_format_parameters(self) -> None:
        with self.assertRaises(ValueError):
            WordEncoder(io.BytesIO(), words_per_sentence=0)
        with self.assertRaises(ValueError):
            WordEncoder(io.BytesIO(), sentences_per_paragraph=0)

    def test_close_closes_sink_by_default(self) -> None:
        sink = io.BytesIO()
        enc = WordEncoder(sink)
        enc.write(b"x")
        enc.close()
        self.assertTrue(sink.closed)
        self.assertTrue(enc.closed)
        enc.close()

    def test_write_after_close_fails(self) -> None:
        enc = WordEncoder(io.BytesIO(), close_sink=False)
        enc.close()
        with self.assertRaises(ValueError):
            enc.write(b"abc")
        with self.assertRaises(ValueError):
            enc.write_byte(1)

    def test_corrupted_table_fails_fatally(self) -> None:
        table = SymbolTable(symbol_to_word={}, word_to_symbol={})
        enc = WordEncoder(io.BytesIO(), table=table, close_sink=False)
        with self.assertRaises(SymbolLookupError):
            enc.write(b"abc")

    def test_partial_table_fails_on_missing_symbol(self) -> None:
        full = dict(get_symbol_table().symbol_to_word)
        del full["="]
        table = SymbolTable(symbol_to_word=full, word_to_symbol={})
        enc = WordEncoder(io.BytesIO(), table=table, close_sink=False)
        enc.write(b"abc")
        enc.write(b"d")
        with self.assertRaises(SymbolLookupError):
            enc.close()

    def test_sink_errors_propagate(self) -> None:
        enc = WordEncoder(_BrokenSink())
        with self.assertRaises(OSError):
            enc.write(b"abc")


if __name__ == "__main__":
    unittest.main()
