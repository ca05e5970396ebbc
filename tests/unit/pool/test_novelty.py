"""
Unit tests for novelneat.pool.novelty module.
"""

import pytest
from unittest.mock import Mock

from novelneat.pool.novelty import NoveltyArchive, compute_novelty


# ============================================================================
# Test compute_novelty
# ============================================================================

class TestComputeNovelty:
    """Test the k-nearest-neighbor novelty."""

    def test_mean_distance_to_nearest_neighbors(self):
        behaviors = [[0.0], [1.0], [3.0]]
        novelty = compute_novelty(behaviors, [], k=1)
        assert novelty == pytest.approx([1.0, 1.0, 2.0])

    def test_self_is_excluded(self):
        novelty = compute_novelty([[0.0, 0.0], [3.0, 4.0]], [], k=1)
        assert novelty == pytest.approx([5.0, 5.0])

    def test_archive_is_included(self):
        novelty = compute_novelty([[0.0]], [[2.0], [10.0]], k=2)
        assert novelty == pytest.approx([6.0])

    def test_fewer_neighbors_than_k(self):
        novelty = compute_novelty([[0.0], [2.0]], [[4.0]], k=10)
        assert novelty == pytest.approx([3.0, 2.0])

    def test_duplicates_have_zero_distance(self):
        novelty = compute_novelty([[1.0], [1.0], [5.0]], [], k=1)
        assert novelty == pytest.approx([0.0, 0.0, 4.0])

    def test_single_behavior_without_archive(self):
        assert compute_novelty([[1.0, 2.0]], [], k=3) == [0.0]

    def test_no_behaviors(self):
        assert compute_novelty([], [[1.0]], k=3) == []

    def test_returns_floats(self):
        assert all(isinstance(n, float) for n in compute_novelty([[0.0], [1.0]], [], k=1))


# ============================================================================
# Test NoveltyArchive
# ============================================================================

class TestNoveltyArchive:
    """Test NoveltyArchive class."""

    def test_add_stores_clone(self):
        individual = Mock()
        individual.clone.return_value = Mock(behavior=[1.0])

        archive = NoveltyArchive()
        archive.add(individual)

        individual.clone.assert_called_once()
        assert len(archive) == 1
        assert archive.behaviors() == [[1.0]]

    def test_behaviors_skip_missing(self):
        archive = NoveltyArchive()
        archive.individuals = [Mock(behavior=None), Mock(behavior=[2.0])]
        assert archive.behaviors() == [[2.0]]
