#!/usr/bin/env python3
"""
End-to-end tests for score_copy and CopyScoringService.
"""

import unittest

from core.config_loader import ScorerConfig
from core.scorer import CopyScoringService, ScoreBreakdown, ScoreInput, score_copy
from core.scorer.recommendations import POSITIVE_MESSAGE
from tests import FILENAME_SCREENSHOTS, PRODUCTIVITY_CAPTIONS

BOUNDS = {'cta': 20, 'benefit': 20, 'clarity': 20, 'numeric': 20, 'emotion': 20, 'category': 25}


class TestScoreCopy(unittest.TestCase):
    """Behavioral properties of the scoring engine."""

    def test_filename_screenshots_do_not_inflate_numeric(self):
        result = score_copy(ScoreInput("Note App", "Tools", tuple(FILENAME_SCREENSHOTS)))

        self.assertLessEqual(result.breakdown.numeric, 5)
        self.assertLessEqual(result.score, 30)
        self.assertGreaterEqual(result.score, 0)
        self.assertTrue(any("numeric proof point" in r.lower() for r in result.recommendation))

    def test_matching_category_scores_higher(self):
        aligned = score_copy(ScoreInput("Focus Planner", "Productivity", tuple(PRODUCTIVITY_CAPTIONS)))
        mismatched = score_copy(ScoreInput("Focus Planner", "Finance", tuple(PRODUCTIVITY_CAPTIONS)))

        self.assertGreater(aligned.breakdown.category, mismatched.breakdown.category)
        self.assertGreater(aligned.score, mismatched.score)
        for result in (aligned, mismatched):
            self.assertGreaterEqual(result.score, 0)
            self.assertLessEqual(result.score, 100)

    def test_extra_cta_keyword_adds_five(self):
        captions = [
            "Start your day calm",
            "Capture ideas quickly",
            "Sync across devices",
            "Search every note",
            "Share with friends",
            "Stay organized always",
        ]
        base = score_copy(ScoreInput("Zen Notes", "Other", tuple(captions)))

        captions[1] = "Download and capture ideas quickly"
        more = score_copy(ScoreInput("Zen Notes", "Other", tuple(captions)))

        self.assertEqual(base.breakdown.cta, 5)
        self.assertEqual(more.breakdown.cta - base.breakdown.cta, 5)

    def test_substrings_do_not_count_as_keywords(self):
        result = score_copy(ScoreInput("Zeta", "Gaming", (
            "categorygame downloaded",
            "freedom nowhere",
            "getaway trying",
            "savers easygoing",
            "lovely amazingly",
            "gamer leveling",
        )))

        self.assertEqual(result.breakdown.cta, 0)
        self.assertEqual(result.breakdown.benefit, 0)
        self.assertEqual(result.breakdown.emotion, 0)
        self.assertEqual(result.breakdown.category, 0)

    def test_deterministic(self):
        score_input = ScoreInput("Focus Planner", "Productivity", tuple(PRODUCTIVITY_CAPTIONS))
        self.assertEqual(score_copy(score_input), score_copy(score_input))

    def test_strong_copy_gets_affirmation(self):
        result = score_copy(ScoreInput("Focus Boost", "Productivity", (
            "Get productivity fast",
            "Save 2 hours daily",
            "Try 10x focus",
            "Amazing powerful planner",
            "Love it 5 stars",
            "Start now",
        )))

        self.assertEqual(result.breakdown, ScoreBreakdown(
            cta=20, benefit=14, clarity=20, numeric=15, emotion=15, category=18
        ))
        self.assertEqual(result.score, 82)
        self.assertEqual(result.recommendation, [POSITIVE_MESSAGE])

    def test_bounds_hold_for_unusual_input(self):
        inputs = [
            ScoreInput("", "", ("", "", "", "", "", "")),
            ScoreInput("A", "productivity", ("!!!???",) * 6),
            ScoreInput("Get Get", "Utilities", ("free " * 50,) * 6),
            ScoreInput("X", "travel", ("1 2 3 4 5 6 7 8 9 10%",) * 6),
            ScoreInput("Y", "health", ("pneumonoultramicroscopicsilicovolcanoconiosis",) * 6),
        ]
        for score_input in inputs:
            with self.subTest(score_input=score_input):
                result = score_copy(score_input)
                self.assertGreaterEqual(result.score, 0)
                self.assertLessEqual(result.score, 100)
                self.assertIsInstance(result.score, int)
                self.assertTrue(result.recommendation)
                for name, ceiling in BOUNDS.items():
                    value = getattr(result.breakdown, name)
                    self.assertGreaterEqual(value, 0, name)
                    self.assertLessEqual(value, ceiling, name)

    def test_accepts_wire_shaped_mapping(self):
        from_mapping = score_copy({
            "appName": "Focus Planner",
            "category": "Productivity",
            "screenshots": PRODUCTIVITY_CAPTIONS,
        })
        from_input = score_copy(ScoreInput("Focus Planner", "Productivity", tuple(PRODUCTIVITY_CAPTIONS)))
        self.assertEqual(from_mapping, from_input)

    def test_to_dict_shape(self):
        data = score_copy(ScoreInput("Note App", "Tools", tuple(FILENAME_SCREENSHOTS))).to_dict()
        self.assertEqual(set(data), {'score', 'breakdown', 'recommendation'})
        self.assertEqual(set(data['breakdown']), set(BOUNDS))


class TestCopyScoringService(unittest.TestCase):
    """Tests for the config-bound service."""

    def test_default_config_matches_function(self):
        score_input = ScoreInput("Focus Planner", "Productivity", tuple(PRODUCTIVITY_CAPTIONS))
        self.assertEqual(CopyScoringService().score(score_input), score_copy(score_input))

    def test_threshold_from_config(self):
        service = CopyScoringService(ScorerConfig(recommendation_threshold=0))
        result = service.score(ScoreInput("Note App", "Tools", tuple(FILENAME_SCREENSHOTS)))
        self.assertEqual(result.recommendation, [POSITIVE_MESSAGE])


if __name__ == '__main__':
    unittest.main(verbosity=2)
