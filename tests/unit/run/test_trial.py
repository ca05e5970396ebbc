"""
Unit tests for novelneat.run.trial module.

This module contains tests for the Trial class, which drives a run by
evaluating every individual and advancing the population.
"""

import pytest
from itertools     import islice
from unittest.mock import Mock

from novelneat.phenotype.individual import Individual
from novelneat.pool.population      import Population
from novelneat.run.progress         import Progress
from novelneat.run.trial            import Evaluation, Statistics, Trial


# ============================================================================
# Evaluators
# ============================================================================

def evaluate_size(individual):
    """Fitness equal to the number of connections, behavior its shape."""
    genome = individual.genome
    return Progress(float(len(genome)), [float(len(genome.feed_forward)), float(len(genome.hidden))])

def evaluate_novelty_only(individual):
    return Progress.novelty([float(len(individual.genome.feed_forward))])


class SolveAtGeneration:
    """Report a solution for the first individual evaluated in a given generation."""

    def __init__(self, population_size, generation):
        self.calls     = 0
        self.threshold = population_size * (generation - 1)

    def __call__(self, individual):
        self.calls += 1
        progress = evaluate_size(individual)
        if self.calls > self.threshold:
            return progress.solved(individual)
        return progress


class ConcreteTrial(Trial):
    """Trial overriding '_evaluate()' and recording the evaluated individuals."""

    def __init__(self, config):
        super().__init__(config, suppress_output=True)
        self.evaluated = []

    def _evaluate(self, individual):
        self.evaluated.append(individual)
        return evaluate_size(individual)


# ============================================================================
# Test Trial Initialization
# ============================================================================

class TestTrialInit:
    """Test Trial.__init__ method."""

    def test_initial_state(self, config):
        trial = Trial(config, evaluate_size)

        assert trial.failed
        assert trial.solution is None
        assert trial.population is None


# ============================================================================
# Test Trial.evolve
# ============================================================================

class TestEvolve:
    """Test Trial.evolve generator."""

    def test_yields_statistics(self, config):
        trial = Trial(config, evaluate_size, suppress_output=True)
        evolution = trial.evolve()

        for generation in range(1, 4):
            evaluation = next(evolution)
            assert isinstance(evaluation, Evaluation)
            assert not evaluation.is_solution
            assert evaluation.statistics.num_generation == generation
            assert evaluation.statistics.population.archive_size == generation

        assert isinstance(trial.population, Population)
        assert len(trial.population) == config.population_size

    def test_statistics_are_snapshots(self, config):
        trial = Trial(config, evaluate_size, suppress_output=True)
        evolution = trial.evolve()

        first  = next(evolution).statistics
        second = next(evolution).statistics

        assert first is not second
        assert first.num_generation == 1
        assert second.num_generation == 2

    def test_solution_stops_evolution(self, config):
        trial = Trial(config, SolveAtGeneration(config.population_size, 3), suppress_output=True)
        evaluations = list(trial.evolve())

        assert len(evaluations) == 3
        assert all(not e.is_solution for e in evaluations[:2])
        assert evaluations[-1].is_solution
        assert evaluations[-1].solution is trial.solution
        assert not trial.failed

    def test_novelty_only_evaluation(self, config):
        trial = Trial(config, evaluate_novelty_only, suppress_output=True)
        evaluation = next(trial.evolve())

        assert evaluation.statistics.population.fitness.raw_maximum == 0.0
        assert evaluation.statistics.population.novelty.raw_maximum >= 0.0

    def test_restart_resets_state(self, config):
        trial = Trial(config, SolveAtGeneration(config.population_size, 1), suppress_output=True)
        list(trial.evolve())
        assert not trial.failed

        trial._evaluator = evaluate_size
        next(trial.evolve())
        assert trial.failed
        assert trial.solution is None

    def test_without_evaluator_raises(self, config):
        trial = Trial(config, suppress_output=True)
        with pytest.raises(NotImplementedError):
            next(trial.evolve())

    def test_overridden_evaluate(self, config):
        trial = ConcreteTrial(config)
        next(trial.evolve())

        assert len(trial.evaluated) == config.population_size
        assert all(isinstance(ind, Individual) for ind in trial.evaluated)


# ============================================================================
# Test Trial.run
# ============================================================================

class TestRun:
    """Test Trial.run method."""

    def test_stops_at_max_generations(self, config):
        config.max_number_generations = 4
        trial = Trial(config, evaluate_size, suppress_output=True)

        assert trial.run() is None
        assert trial.failed
        assert trial._statistics.num_generation == 4

    def test_returns_solution(self, config):
        config.max_number_generations = 10
        evaluator = SolveAtGeneration(config.population_size, 2)
        trial = Trial(config, evaluator, suppress_output=True)

        solution = trial.run()

        assert isinstance(solution, Individual)
        assert not trial.failed
        assert trial._statistics.num_generation == 2

    def test_reports_are_called(self, config):
        config.max_number_generations = 3
        trial = Trial(config, evaluate_size)
        trial._report_progress = Mock()
        trial._final_report    = Mock()

        trial.run()

        assert trial._report_progress.call_count == 3
        trial._final_report.assert_called_once()

    def test_suppress_output(self, config, capsys):
        config.max_number_generations = 2
        Trial(config, evaluate_size, suppress_output=True).run()

        assert capsys.readouterr().out == ""

    def test_output(self, config, capsys):
        config.max_number_generations = 2
        Trial(config, evaluate_size).run()

        out = capsys.readouterr().out
        assert "Generation    1" in out
        assert "Generation    2" in out
        assert "No solution found after 2 generations" in out

    def test_parallel_evaluation_matches_serial(self, config):
        def fitness_maxima(trial, num_jobs):
            evaluations = islice(trial.evolve(num_jobs), 3)
            return [e.statistics.population.fitness.raw_maximum for e in evaluations]

        serial   = fitness_maxima(Trial(config, evaluate_size, suppress_output=True), 1)
        parallel = fitness_maxima(Trial(config, evaluate_size, suppress_output=True), 2)

        assert parallel == serial


# ============================================================================
# Test Statistics / Evaluation
# ============================================================================

class TestEvaluation:
    """Test Statistics and Evaluation containers."""

    def test_statistics_defaults(self):
        stats = Statistics()
        assert stats.num_generation == 0
        assert stats.population.archive_size == 0

    def test_progress_evaluation(self):
        evaluation = Evaluation(statistics=Statistics())
        assert not evaluation.is_solution
        assert "generation=0" in repr(evaluation)

    def test_solution_evaluation(self):
        evaluation = Evaluation(solution=Mock(ID=5))
        assert evaluation.is_solution
        assert "ID=5" in repr(evaluation)
