"""
Tests for option shuffling and random question picking.
"""

import random

import pytest

from examquiz_app.logics.question_options import KIND_KEYED, KIND_LIST, normalize_options
from examquiz_app.modules.quiz.logics.shuffle_logic import pick_random, shuffle_options, shuffled


class TestShuffled:

    def test_is_permutation(self):
        items = list(range(20))
        result = shuffled(items, random.Random(7))
        assert sorted(result) == items
        assert items == list(range(20))

    def test_seeded_shuffle_is_reproducible(self):
        assert shuffled('abcdef', random.Random(3)) == shuffled('abcdef', random.Random(3))

    def test_every_order_reachable(self):
        seen = set()
        rng = random.Random(11)
        for _ in range(400):
            seen.add(tuple(shuffled([1, 2, 3], rng)))
        assert len(seen) == 6

    def test_empty_and_single(self):
        assert shuffled([]) == []
        assert shuffled(['only']) == ['only']


class TestShuffleOptions:

    def test_list_options_keep_members(self):
        options = normalize_options(['Paris', 'London', 'Rome', 'Madrid'])
        result = shuffle_options(options, random.Random(5))
        assert result.kind == KIND_LIST
        assert sorted(result.to_json()) == ['London', 'Madrid', 'Paris', 'Rome']

    def test_keyed_options_keep_label_order(self):
        options = normalize_options('{"A": "3", "B": "9", "C": "81", "D": "1"}')
        result = shuffle_options(options, random.Random(5))
        assert result.kind == KIND_KEYED
        payload = result.to_json()
        assert list(payload.keys()) == ['A', 'B', 'C', 'D']
        assert sorted(payload.values()) == ['1', '3', '81', '9']


class TestNormalizeOptions:

    def test_empty_values(self):
        assert normalize_options(None) is None
        assert normalize_options('  ') is None

    def test_unsupported_shape(self):
        with pytest.raises(ValueError):
            normalize_options(42)
        with pytest.raises(ValueError):
            normalize_options('"just text"')


class TestPickRandom:

    def test_empty_returns_none(self):
        assert pick_random([]) is None

    def test_picks_member(self):
        assert pick_random(['a', 'b', 'c'], random.Random(1)) in {'a', 'b', 'c'}
