# Copyright (c) 2023 - 2025, HaiyangLi <quantocean.li at gmail dot com>
#
# SPDX-License-Identifier: Apache-2.0

import pytest

from fieldrules import InvalidArgumentError
from fieldrules.validation import RuleBook


class Same:
    """Every instance compares equal to every other."""

    def __eq__(self, other):
        return isinstance(other, Same)

    def __hash__(self):
        return 0


class TestRuleBook:

    def test_insertion_order(self):
        a, b, c = object(), object(), object()
        book = RuleBook([b, a, c])
        assert book.snapshot() == (b, a, c)
        assert list(book) == [b, a, c]

    def test_duplicates_by_identity(self):
        item = object()
        book = RuleBook()
        assert book.add(item) is True
        assert book.add(item) is False
        assert len(book) == 1

    def test_equal_but_distinct_entries_kept(self):
        first, second = Same(), Same()
        book = RuleBook([first, second])
        assert len(book) == 2
        assert first in book
        assert Same() not in book

    def test_remove(self):
        a, b = object(), object()
        book = RuleBook([a, b])
        assert book.remove(a) is True
        assert book.remove(a) is False
        assert book.snapshot() == (b,)

    def test_remove_all_and_clear(self):
        a, b, c = object(), object(), object()
        book = RuleBook([a, b, c])
        book.remove_all([a, c])
        assert book.snapshot() == (b,)
        book.clear()
        assert not book
        assert len(book) == 0

    def test_readding_moves_to_end(self):
        a, b = object(), object()
        book = RuleBook([a, b])
        book.remove(a)
        book.add(a)
        assert book.snapshot() == (b, a)

    def test_none_rejected(self):
        book = RuleBook(label="validator")
        with pytest.raises(InvalidArgumentError, match="validator"):
            book.add(None)
        with pytest.raises(InvalidArgumentError):
            book.remove(None)
        with pytest.raises(InvalidArgumentError):
            book.add_all(None)

    def test_mutation_during_iteration(self):
        """Iteration walks a snapshot taken when it started."""
        a, b = object(), object()
        book = RuleBook([a, b])
        seen = []
        for item in book:
            seen.append(item)
            book.remove(b)
            book.add(object())
        assert seen == [a, b]
        assert len(book) == 3
