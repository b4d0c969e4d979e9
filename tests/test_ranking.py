"""Tests for recipe ranking and filtering."""

import random

from kitchen.models.recipe import Recipe, RecipeIngredient
from kitchen.services.cookability import CookabilityBucket, PantrySnapshotItem
from kitchen.services.ranking import (
    BucketCounts,
    collect_tags,
    rank_recipes,
    summarize_buckets,
)

PANTRY = [
    PantrySnapshotItem(id=1, name="Rice", quantity=5, unit="cup"),
    PantrySnapshotItem(id=2, name="Egg", quantity=6, unit="count"),
    PantrySnapshotItem(id=3, name="Soy sauce", quantity=1, unit="cup"),
]


def recipe(recipe_id, title, ingredients, minutes=None, tags=None, description=None):
    return Recipe(
        id=recipe_id,
        title=title,
        description=description,
        tags=tags or [],
        total_time_minutes=minutes,
        ingredients=[RecipeIngredient(name=name) for name in ingredients],
    )


def titles(ranked):
    return [r.recipe.title for r in ranked]


def library():
    return [
        recipe(1, "Fried Rice", ["Rice", "Egg", "Soy sauce"], minutes=20, tags=["dinner", "quick"]),
        recipe(2, "Egg Drop Soup", ["Egg", "Stock"], minutes=15, tags=["soup"]),
        recipe(3, "Omelette", ["Egg", "Milk", "Cheese"], minutes=10, tags=["breakfast", "quick"]),
        recipe(4, "Lasagna", ["Pasta", "Beef", "Tomato", "Cheese", "Onion"], minutes=90, tags=["dinner"]),
        recipe(5, "Plain Rice", ["Rice"], tags=["side"], description="Fluffy steamed rice"),
        recipe(6, "Congee", ["Rice", "Ginger"], tags=["breakfast"]),
    ]


class TestDefaultSort:
    """Tests for the best-match ordering."""

    def test_bucket_then_missing_then_time_then_title(self):
        ranked = rank_recipes(library(), PANTRY)
        assert titles(ranked) == [
            "Fried Rice",  # cook-now, 20 min
            "Plain Rice",  # cook-now, no time
            "Egg Drop Soup",  # almost, 1 missing, 15 min
            "Congee",  # almost, 1 missing, no time
            "Omelette",  # almost, 2 missing
            "Lasagna",  # missing
        ]

    def test_recent_is_an_alias_of_best_match(self):
        assert titles(rank_recipes(library(), PANTRY, sort_mode="recent")) == titles(
            rank_recipes(library(), PANTRY)
        )

    def test_unknown_sort_falls_back_to_best_match(self):
        assert titles(rank_recipes(library(), PANTRY, sort_mode="popular")) == titles(
            rank_recipes(library(), PANTRY)
        )

    def test_order_is_deterministic_regardless_of_input_order(self):
        recipes = library()
        expected = titles(rank_recipes(recipes, PANTRY))
        for seed in range(5):
            shuffled = recipes[:]
            random.Random(seed).shuffle(shuffled)
            assert titles(rank_recipes(shuffled, PANTRY)) == expected

    def test_fewer_missing_never_sorts_after_more_within_bucket(self):
        ranked = rank_recipes(library(), PANTRY)
        for earlier, later in zip(ranked, ranked[1:]):
            if earlier.bucket == later.bucket:
                assert earlier.cookability.missing_count <= later.cookability.missing_count

    def test_same_title_ties_broken_by_id(self):
        recipes = [recipe(9, "Toast", ["Bread"]), recipe(3, "Toast", ["Bread"])]
        ranked = rank_recipes(recipes, PANTRY)
        assert [r.recipe.id for r in ranked] == [3, 9]


class TestOtherSorts:
    """Tests for title and time sorting."""

    def test_title_asc_is_case_insensitive(self):
        recipes = [recipe(1, "banana bread", []), recipe(2, "Apple pie", []), recipe(3, "Cherry tart", [])]
        assert titles(rank_recipes(recipes, PANTRY, sort_mode="title-asc")) == [
            "Apple pie",
            "banana bread",
            "Cherry tart",
        ]

    def test_time_asc_puts_untimed_last(self):
        ranked = rank_recipes(library(), PANTRY, sort_mode="time-asc")
        assert titles(ranked) == [
            "Omelette",
            "Egg Drop Soup",
            "Fried Rice",
            "Lasagna",
            "Congee",
            "Plain Rice",
        ]

    def test_zero_minutes_sorts_first_not_last(self):
        recipes = [recipe(1, "Slow", [], minutes=30), recipe(2, "Instant", [], minutes=0)]
        assert titles(rank_recipes(recipes, PANTRY, sort_mode="time-asc")) == ["Instant", "Slow"]


class TestFilters:
    """Tests for query, tag and cookability filters."""

    def test_query_matches_title(self):
        assert titles(rank_recipes(library(), PANTRY, query="RICE", sort_mode="title-asc")) == [
            "Fried Rice",
            "Plain Rice",
        ]

    def test_query_matches_description_and_tags(self):
        assert titles(rank_recipes(library(), PANTRY, query="steamed")) == ["Plain Rice"]
        assert titles(rank_recipes(library(), PANTRY, query="soup")) == ["Egg Drop Soup"]

    def test_blank_query_is_ignored(self):
        assert len(rank_recipes(library(), PANTRY, query="   ")) == 6

    def test_tag_filter_is_exact(self):
        ranked = rank_recipes(library(), PANTRY, tag="quick")
        assert titles(ranked) == ["Fried Rice", "Omelette"]
        assert rank_recipes(library(), PANTRY, tag="Quick") == []

    def test_all_tag_disables_filter(self):
        assert len(rank_recipes(library(), PANTRY, tag="all")) == 6

    def test_cookability_filter(self):
        ranked = rank_recipes(library(), PANTRY, cookability_filter="almost")
        assert titles(ranked) == ["Egg Drop Soup", "Congee", "Omelette"]
        assert all(r.bucket == CookabilityBucket.ALMOST for r in ranked)

    def test_unknown_cookability_filter_is_ignored(self):
        assert len(rank_recipes(library(), PANTRY, cookability_filter="someday")) == 6
        assert len(rank_recipes(library(), PANTRY, cookability_filter="all")) == 6

    def test_filters_combine(self):
        ranked = rank_recipes(
            library(), PANTRY, query="rice", tag="dinner", cookability_filter="cook-now"
        )
        assert titles(ranked) == ["Fried Rice"]


class TestSummary:
    """Tests for bucket counts and tags."""

    def test_counts_cover_whole_library(self):
        assert summarize_buckets(library(), PANTRY) == BucketCounts(cook_now=2, almost=3, missing=1)

    def test_counts_empty_library(self):
        assert summarize_buckets([], PANTRY) == BucketCounts()

    def test_collect_tags_sorted_unique(self):
        assert collect_tags(library()) == ["breakfast", "dinner", "quick", "side", "soup"]
