"""
Tests for category resolution.
"""

import unittest

from masareef_engine.categorisation.engine import CategoryResolver, CategoryMatch
from masareef_engine.categorisation.pattern_matching import (
    match_keyword_list,
    match_keyword_prefixes,
    fuzzy_match_tokens,
    sort_keywords_longest_first,
)
from masareef_engine.config.category_catalog import (
    Category,
    Direction,
    DEFAULT_CATEGORIES,
    find_category,
)


class TestCategoryResolver(unittest.TestCase):
    """Test the resolution cascade."""

    def setUp(self):
        """Set up test fixtures."""
        self.resolver = CategoryResolver()
        self.categories = DEFAULT_CATEGORIES

    def test_exact_keyword(self):
        """Category vocabulary matches exactly."""
        self.assertEqual(self.resolver.resolve("اشتريت أكل", self.categories, Direction.EXPENSE), "food")
        self.assertEqual(self.resolver.resolve("على مواصلات", self.categories, Direction.EXPENSE), "transport")
        self.assertEqual(self.resolver.resolve("راتب", self.categories, Direction.INCOME), "salary")

        match = self.resolver.resolve_with_details("فاتورة الكهرباء", self.categories, Direction.EXPENSE)
        self.assertEqual(match.category_id, "bills")
        self.assertEqual(match.match_method, "keyword")
        self.assertEqual(match.confidence, 0.95)

    def test_prefix_fuzzy_match(self):
        """A truncated keyword absorbs a clipped transcription."""
        match = self.resolver.resolve_with_details("مواصلا 10", self.categories, Direction.EXPENSE)
        self.assertEqual(match.category_id, "transport")
        self.assertEqual(match.match_method, "fuzzy")
        self.assertEqual(match.matched_keyword, "مواصلات")

    def test_similarity_fuzzy_match(self):
        """A misspelled keyword is caught by token similarity."""
        match = self.resolver.resolve_with_details("سينيما 100", self.categories, Direction.EXPENSE)
        self.assertEqual(match.category_id, "entertainment")
        self.assertEqual(match.match_method, "fuzzy")

    def test_location_context(self):
        """A bakery with no category words resolves to food from context."""
        match = self.resolver.resolve_with_details("دفعت 50 في الفرن", self.categories, Direction.EXPENSE)
        self.assertEqual(match.category_id, "food")
        self.assertEqual(match.match_method, "context")

    def test_quantity_context(self):
        """Weight units lean toward food."""
        match = self.resolver.resolve_with_details("2 كيلو ب 100", self.categories, Direction.EXPENSE)
        self.assertEqual(match.category_id, "food")
        self.assertEqual(match.match_method, "context")

    def test_default_fallback(self):
        """Nothing matched falls back to the direction's other category."""
        match = self.resolver.resolve_with_details("xyz", self.categories, Direction.EXPENSE)
        self.assertEqual(match.category_id, "other")
        self.assertEqual(match.match_method, "default")
        self.assertEqual(match.confidence, 0.0)
        self.assertEqual(self.resolver.resolve("xyz", self.categories, Direction.INCOME), "other_income")

    def test_reserved_id_when_caller_has_no_fallback(self):
        """Without an 'other' category the reserved id is returned."""
        categories = [Category("food", "Food", "طعام", Direction.EXPENSE)]
        self.assertEqual(self.resolver.resolve("xyz", categories, Direction.EXPENSE), "other")
        self.assertEqual(self.resolver.resolve("راتب", categories, Direction.INCOME), "other_income")

    def test_caller_ids_by_canonical_name(self):
        """Caller categories are found by canonical name when ids differ."""
        categories = [
            Category("cat-17", "Food", "طعام", Direction.EXPENSE),
            Category("cat-99", "Other", "أخرى", Direction.EXPENSE),
        ]
        self.assertEqual(self.resolver.resolve("اكل", categories, Direction.EXPENSE), "cat-17")
        self.assertEqual(self.resolver.resolve("xyz", categories, Direction.EXPENSE), "cat-99")

    def test_category_missing_from_caller_is_skipped(self):
        """Vocabulary of a category the caller lacks is ignored."""
        categories = [Category("other", "Other", "أخرى", Direction.EXPENSE)]
        self.assertEqual(self.resolver.resolve("اكل", categories, Direction.EXPENSE), "other")

    def test_direction_is_respected(self):
        """Resolved ids always belong to the requested direction or its fallback."""
        texts = ["راتب", "اكل", "مواصلات", "هدية", "دكتور", "xyz", "", "في المطعم", "2 كيلو"]
        fallback = {Direction.EXPENSE: "other", Direction.INCOME: "other_income"}
        for direction in Direction:
            for text in texts:
                category_id = self.resolver.resolve(text, self.categories, direction)
                category = find_category(category_id, self.categories)
                if category is None:
                    self.assertEqual(category_id, fallback[direction], msg=text)
                else:
                    self.assertEqual(category.direction, direction, msg=text)

    def test_string_direction(self):
        """Direction may be given as its label."""
        self.assertEqual(self.resolver.resolve("اكل", self.categories, "expense"), "food")

    def test_debug_rationale(self):
        """Rationale is attached only in debug mode."""
        debug_resolver = CategoryResolver(debug_mode=True)
        match = debug_resolver.resolve_with_details("اشتريت اكل", self.categories, Direction.EXPENSE)
        self.assertIsInstance(match, CategoryMatch)
        self.assertEqual(match.debug_rationale, "keyword_match: food/اكل")

        match = self.resolver.resolve_with_details("اشتريت اكل", self.categories, Direction.EXPENSE)
        self.assertIsNone(match.debug_rationale)


class TestPatternMatching(unittest.TestCase):
    """Test the generic keyword matching helpers."""

    def test_longest_first(self):
        """Longer keywords are tried before their fragments."""
        keywords = sort_keywords_longest_first([("اكل", "food"), ("فاتوره", "bills"), ("رز", "food")])
        self.assertEqual([kw for kw, _ in keywords], ["فاتوره", "اكل", "رز"])

    def test_short_keywords_need_whole_words(self):
        """Two-letter keywords do not match inside longer words."""
        keywords = [("رز", "food")]
        self.assertIsNone(match_keyword_list("مرزوق", keywords))
        self.assertEqual(match_keyword_list("كيس رز", keywords), ("رز", "food"))

    def test_prefix_match(self):
        """The keyword minus its last letter is enough."""
        self.assertEqual(
            match_keyword_prefixes("دفعت فاتور", [("فاتوره", "bills")]),
            ("فاتوره", "bills")
        )
        self.assertIsNone(match_keyword_prefixes("دفعت", [("اكل", "food")]))

    def test_fuzzy_tokens(self):
        """Token similarity returns the best keyword above threshold."""
        result = fuzzy_match_tokens("روحت سينيما", [("سينما", "entertainment")])
        self.assertIsNotNone(result)
        self.assertEqual(result[:2], ("سينما", "entertainment"))
        self.assertIsNone(fuzzy_match_tokens("روحت", [("سينما", "entertainment")]))


if __name__ == "__main__":
    unittest.main(verbosity=2)
