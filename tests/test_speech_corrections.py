"""
Tests for speech-error correction and transcript helpers.
"""

import unittest

from masareef_engine.preprocessing.speech_corrections import correct_speech_errors
from masareef_engine.preprocessing.transcript import (
    score_alternative,
    select_best_alternative,
    clean_transcript,
)


class TestCorrectSpeechErrors(unittest.TestCase):
    """Test the speech-correction table."""

    def test_misheard_verb_and_currency(self):
        """Final ت heard as ط and a misspelled currency are both fixed."""
        self.assertEqual(correct_speech_errors("صرفط عشرين جنية"), "صرفت عشرين جنيه")

    def test_currency_plural(self):
        """Plural and accusative currency forms collapse to جنيه."""
        self.assertEqual(correct_speech_errors("دفعت 20 جنيهات"), "دفعت 20 جنيه")
        self.assertEqual(correct_speech_errors("دفعت جنيهين"), "دفعت 2 جنيه")

    def test_future_tense_confusion(self):
        """Future forms produced by the recognizer become past tense."""
        self.assertEqual(correct_speech_errors("هدفع 50 كهربا"), "دفعت 50 كهربا")
        self.assertEqual(correct_speech_errors("هشتري عيش"), "اشتريت عيش")

    def test_category_word_mishearings(self):
        """Misheard category words are restored."""
        self.assertEqual(correct_speech_errors("مواصلاط 10"), "مواصلات 10")
        self.assertEqual(correct_speech_errors("قبضت مرطب"), "قبضت مرتب")

    def test_never_rewrites_inside_a_word(self):
        """Rules only replace whole words."""
        self.assertEqual(correct_speech_errors("تكسير"), "تكسير")
        self.assertEqual(correct_speech_errors("مواصلات"), "مواصلات")

    def test_empty_and_non_string(self):
        """Empty and non-string input yields an empty string."""
        self.assertEqual(correct_speech_errors(""), "")
        self.assertEqual(correct_speech_errors(None), "")
        self.assertEqual(correct_speech_errors(42), "")


class TestTranscriptHelpers(unittest.TestCase):
    """Test alternative selection and transcript cleanup."""

    def test_score_alternative(self):
        """Keywords, digit runs and Arabic letters each add points."""
        # keyword "صرف" (10) + one digit run (5) + four Arabic letters (4)
        self.assertEqual(score_alternative("صرفت 50"), 19)
        self.assertEqual(score_alternative(""), 0)
        self.assertEqual(score_alternative(None), 0)

    def test_best_alternative_wins(self):
        """The alternative that looks most like a transaction is chosen."""
        best = select_best_alternative(
            ["سرفت خمسين", "صرفت 50 جنيه"],
            default="سرفت خمسين"
        )
        self.assertEqual(best, "صرفت 50 جنيه")

    def test_default_kept_on_tie(self):
        """The engine's own choice is kept unless beaten."""
        self.assertEqual(select_best_alternative(["abc"], default="xyz"), "xyz")

    def test_empty_alternatives(self):
        """No alternatives returns the default."""
        self.assertEqual(select_best_alternative([], default="صرفت 50"), "صرفت 50")

    def test_clean_transcript_drops_stray_heh(self):
        """A stray ه before a number is removed, a word-final ه is kept."""
        self.assertEqual(clean_transcript("ه ٥٠ جنيه"), "50 جنيه")
        self.assertEqual(clean_transcript("  صرفت   ه50 "), "صرفت 50")
        self.assertEqual(clean_transcript("جنيه 50"), "جنيه 50")

    def test_clean_transcript_non_string(self):
        """Non-string input yields an empty string."""
        self.assertEqual(clean_transcript(None), "")


if __name__ == "__main__":
    unittest.main(verbosity=2)
