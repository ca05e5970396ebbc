"""
Unit tests for novelneat.run.progress module.
"""

from unittest.mock import Mock

from novelneat.run.progress import Progress


# ============================================================================
# Test Progress forms
# ============================================================================

class TestProgress:
    """Test the forms a Progress can take."""

    def test_empty(self):
        progress = Progress.empty()

        assert progress.raw_fitness is None
        assert progress.behavior is None
        assert not progress.is_solution
        assert repr(progress).startswith("Progress.Empty")

    def test_novelty(self):
        progress = Progress.novelty([1, 2])

        assert progress.raw_fitness is None
        assert progress.behavior == [1.0, 2.0]
        assert repr(progress).startswith("Progress.Novelty")

    def test_status(self):
        progress = Progress(3, (0.5,))

        assert progress.raw_fitness == 3.0
        assert isinstance(progress.raw_fitness, float)
        assert progress.behavior == [0.5]
        assert not progress.is_solution
        assert repr(progress).startswith("Progress.Status")

    def test_solved_keeps_fitness_and_behavior(self):
        individual = Mock()
        progress = Progress(2.0, [1.0]).solved(individual)

        assert progress.is_solution
        assert progress.solution is individual
        assert progress.raw_fitness == 2.0
        assert progress.behavior == [1.0]
        assert repr(progress).startswith("Progress.Solution")

    def test_behavior_is_copied(self):
        behavior = [1.0, 2.0]
        progress = Progress.novelty(behavior)
        behavior.append(3.0)

        assert progress.behavior == [1.0, 2.0]
