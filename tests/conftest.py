"""Shared test fixtures for the sequential pattern tests."""

from __future__ import annotations

import pytest

from seqmine import Itemset, SequentialPattern, config


@pytest.fixture
def pattern():
    """Pattern <(1 2)(3)> without sequence IDs."""
    p = SequentialPattern()
    p.add_itemset(Itemset([1, 2]))
    p.add_itemset(Itemset([3]))
    return p


@pytest.fixture
def supported_pattern(pattern):
    """Pattern <(1 2)(3)> contained in sequences 2, 5 and 9."""
    pattern.set_sequence_ids({2, 5, 9})
    return pattern


@pytest.fixture
def long_pattern():
    """Pattern <(4 7 1)(2)(7 9)> with item 7 in two itemsets."""
    p = SequentialPattern()
    for items in ([4, 7, 1], [2], [7, 9]):
        p.add_itemset(Itemset(items))
    return p


@pytest.fixture(autouse=True)
def restore_config():
    """Restore the global configuration after each test."""
    saved = (config.max_fraction_digits, config.show_sequence_ids)
    yield
    config.max_fraction_digits, config.show_sequence_ids = saved
