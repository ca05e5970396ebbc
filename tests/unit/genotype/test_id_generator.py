"""
Unit tests for novelneat.genotype.id_generator module.
"""

from itertools import islice

from novelneat.genotype.id_generator import IdGenerator


# ============================================================================
# Test next_id
# ============================================================================

class TestNextId:
    """Test IdGenerator.next_id method."""

    def test_ids_start_at_zero(self):
        assert IdGenerator().next_id() == 0

    def test_ids_start_at_custom_value(self):
        assert IdGenerator(start=5).next_id() == 5

    def test_ids_are_unique_and_increasing(self):
        generator = IdGenerator()
        ids = [generator.next_id() for _ in range(100)]
        assert ids == list(range(100))


# ============================================================================
# Test cached_id_for_split
# ============================================================================

class TestCachedIdForSplit:
    """Test IdGenerator.cached_id_for_split method."""

    def test_first_split_issues_fresh_id(self):
        generator = IdGenerator()
        generator.next_id()
        generator.next_id()

        assert next(generator.cached_id_for_split((0, 1))) == 2

    def test_same_connection_yields_same_id(self):
        generator = IdGenerator()
        first  = next(generator.cached_id_for_split((0, 1)))
        second = next(generator.cached_id_for_split((0, 1)))
        assert first == second

    def test_different_connections_yield_different_ids(self):
        generator = IdGenerator()
        first  = next(generator.cached_id_for_split((0, 1)))
        second = next(generator.cached_id_for_split((1, 0)))
        assert first != second

    def test_cache_grows_when_exhausted(self):
        """Iterating past the cached IDs issues fresh ones, which are then cached too."""
        generator = IdGenerator()
        first_ids = list(islice(generator.cached_id_for_split((0, 1)), 3))
        assert first_ids == [0, 1, 2]

        # another connection is split in the meantime
        assert next(generator.cached_id_for_split((2, 3))) == 3

        # replay and extend the sequence for (0, 1)
        assert list(islice(generator.cached_id_for_split((0, 1)), 4)) == [0, 1, 2, 4]

    def test_split_ids_do_not_collide_with_next_id(self):
        generator = IdGenerator()
        split_id = next(generator.cached_id_for_split((0, 1)))
        assert generator.next_id() != split_id
