#!/usr/bin/env python3
"""
Unit tests for the clarity sub-score.
"""

import unittest

from core.scorer import clarity


class TestWordCountBands(unittest.TestCase):
    """The 8-40 band wins over 5-60; 5-7 and 41-60 get +3."""

    def test_band_boundaries(self):
        expected = {
            0: -4, 4: -4,
            5: 3, 7: 3,
            8: 6, 40: 6,
            41: 3, 60: 3,
            61: -5, 200: -5,
        }
        for word_count, adjustment in expected.items():
            with self.subTest(word_count=word_count):
                self.assertEqual(clarity.word_count_adjustment(word_count), adjustment)


class TestPunctuation(unittest.TestCase):
    """Tests for the !/? adjustment."""

    def test_no_punctuation(self):
        self.assertEqual(clarity.punctuation_adjustment("hello there"), 2)

    def test_one_or_two_marks(self):
        self.assertEqual(clarity.punctuation_adjustment("hi!"), 1)
        self.assertEqual(clarity.punctuation_adjustment("a! b?"), 1)

    def test_excess_marks(self):
        self.assertEqual(clarity.punctuation_adjustment("a! b? c!"), -2)
        self.assertEqual(clarity.punctuation_adjustment("a! b? c! d? e!"), -6)

    def test_repeated_marks(self):
        self.assertEqual(clarity.punctuation_adjustment("wow!!"), -1)
        self.assertEqual(clarity.punctuation_adjustment("what?!"), -1)


class TestClarityScore(unittest.TestCase):
    """Tests for calculate_clarity_score."""

    def test_eight_short_words_no_punctuation(self):
        # base 10 + band 6 + punctuation 2; average length 1 gets no bonus
        self.assertEqual(clarity.calculate_clarity_score("a b c d e f g h"), 18)

    def test_eight_words_readable_length(self):
        corpus = "focus planner helps you organize every single day"
        self.assertEqual(clarity.calculate_clarity_score(corpus), 20)

    def test_empty_corpus(self):
        self.assertEqual(clarity.calculate_clarity_score(""), 8)

    def test_long_word_penalty(self):
        self.assertEqual(clarity.calculate_clarity_score("supercalifragilisticexpialidocious"), 6)

    def test_too_many_words(self):
        self.assertEqual(clarity.calculate_clarity_score(" ".join(["word"] * 61)), 9)

    def test_clamped_at_zero(self):
        self.assertEqual(clarity.calculate_clarity_score("buy!!!!!!!!!!"), 0)


if __name__ == '__main__':
    unittest.main(verbosity=2)
