"""
Trial Module

This module drives an evolutionary run: it evaluates every individual of the
population (optionally in parallel, using joblib), checks for a solution and
advances the population to the next generation.

Classes:
    Statistics: Statistics about one generation of a run
    Evaluation: Outcome of one generation: statistics, or the solution found
    Trial:      One independent run of the algorithm
"""

import copy
import time
from joblib import Parallel, delayed
from typing import Callable, Iterator, Optional, TYPE_CHECKING

from novelneat.run.config     import Config
from novelneat.run.progress   import Progress
from novelneat.pool           import Population, PopulationStatistics
if TYPE_CHECKING:
    from novelneat.phenotype import Individual

class Statistics:
    """
    Statistics about one generation of a run.

    Public Attributes:
        time_stamp:                      Start of the generation's evaluation (seconds since the epoch)
        num_generation:                  Number of generations evaluated so far
        milliseconds_elapsed_evaluation: Time taken to evaluate the generation
        population:                      Statistics reported by the population
    """

    def __init__(self):
        self.time_stamp                     : int                  = 0
        self.num_generation                 : int                  = 0
        self.milliseconds_elapsed_evaluation: float                = 0.0
        self.population                     : PopulationStatistics = PopulationStatistics()

class Evaluation:
    """
    The outcome of evaluating one generation: either the statistics of the
    generation, or the individual found to solve the problem.

    Public Attributes:
        statistics: Statistics of the generation (None for a solution)
        solution:   The solving individual (None unless a solution was found)
    """

    def __init__(self, statistics: Optional[Statistics] = None, solution: Optional['Individual'] = None):
        self.statistics = statistics
        self.solution   = solution

    @property
    def is_solution(self) -> bool:
        return self.solution is not None

    def __repr__(self):
        if self.is_solution:
            return f"Evaluation.Solution(ID={self.solution.ID})"
        return f"Evaluation.Progress(generation={self.statistics.num_generation})"

class Trial:
    """
    One independent run of the algorithm.

    The trial evolves a population through generations until an evaluation
    reports a solution or, if configured, the maximum number of generations is
    reached. Individuals are evaluated by the callable passed at construction
    (mapping an Individual to a Progress); subclasses may instead override
    '_evaluate()'.

    Subclasses can override:
    - _evaluate(individual): Evaluate a single individual
    - _report_progress(evaluation): Display progress after each generation
    - _final_report(): Display final results
    - _terminate(): Custom termination logic (default: max generations)

    Public Attributes:
        failed:   Whether the trial ended without finding a solution
        solution: The individual solving the problem (None if not found)

    Public Methods:
        evolve(num_jobs): Generator of the outcome of each generation
        run(num_jobs):    Execute a complete trial

    Parallelization of the evaluation of individuals:
        num_jobs=1:  Serial evaluation (no parallelization)
        num_jobs>1:  Use specified number of parallel processes
        num_jobs=-1: Use all available CPU cores
    """

    def __init__(self,
                 config         : Config,
                 evaluate       : Optional[Callable[['Individual'], Progress]] = None,
                 suppress_output: bool = False):
        """
        Initialize the trial.

        Parameters:
            config:          Configuration parameters
            evaluate:        Maps an individual to the Progress its evaluation reveals
            suppress_output: If True, suppress progress and final reports
        """
        self._config         : Config                 = config
        self._evaluator                               = evaluate
        self._population     : Optional[Population]   = None
        self._statistics     : Statistics             = Statistics()
        self._suppress_output: bool                   = suppress_output
        self.failed          : bool                   = True
        self.solution        : Optional['Individual'] = None

    @property
    def population(self) -> Optional[Population]:
        return self._population

    def evolve(self, num_jobs: int = 1) -> Iterator[Evaluation]:
        """
        Start a new run and yield the outcome of each generation.

        Each step evaluates the current population. If some evaluation reports a
        solution, the solution is yielded and the generator stops. Otherwise the
        population advances to the next generation and the statistics of the
        step are yielded.

        Parameters:
            num_jobs: Number of parallel processes for the evaluation of individuals
        """
        self._reset()
        self._population = Population(self._config)

        while True:
            self._statistics.time_stamp = int(time.time())
            start = time.perf_counter()

            progress = self._evaluate_all(num_jobs)

            self._statistics.num_generation += 1
            self._statistics.milliseconds_elapsed_evaluation = (time.perf_counter() - start) * 1000.0

            winner = next((p.solution for p in progress if p.is_solution), None)
            if winner is not None:
                self.solution = winner
                self.failed   = False
                yield Evaluation(solution=winner)
                return

            self._statistics.population = self._population.next_generation(progress)
            yield Evaluation(statistics=copy.copy(self._statistics))

    def run(self, num_jobs: int = 1) -> Optional['Individual']:
        """
        Run the trial until a solution is found or '_terminate()' says to stop.

        Parameters:
            num_jobs: Number of parallel processes for the evaluation of individuals
                      1 = serial (no parallelization)
                     -1 = use all available CPU cores
                     >1 = use specified number of processes

        Returns:
            The solution, or None if none was found
        """
        for evaluation in self.evolve(num_jobs):
            if not self._suppress_output:
                self._report_progress(evaluation)
            if evaluation.is_solution or self._terminate():
                break

        if not self._suppress_output:
            self._final_report()

        return self.solution

    def _reset(self):
        """
        Reset the trial state before starting a new run.
        """
        self._statistics = Statistics()
        self.failed      = True
        self.solution    = None

    def _evaluate(self, individual: 'Individual') -> Progress:
        """
        Evaluate an individual.

        Parameters:
            individual: The Individual to evaluate

        Returns:
            The Progress revealed by the evaluation
        """
        if self._evaluator is None:
            raise NotImplementedError("Pass an evaluation function to the Trial, or override '_evaluate()'")
        return self._evaluator(individual)

    def _evaluate_all(self, num_jobs: int) -> list[Progress]:
        """
        Evaluate all individuals in the population.

        Uses serial or parallel evaluation based on num_jobs:
        - num_jobs=1: Sequential evaluation in single process
        - num_jobs>1 or -1: Parallel evaluation using joblib

        Returns:
            The Progress of each individual, in population order
        """
        individuals = self._population.individuals

        if num_jobs == 1:
            return [self._evaluate(individual) for individual in individuals]
        return list(Parallel(num_jobs)(delayed(self._evaluate)(i) for i in individuals))

    def _terminate(self) -> bool:
        """
        Determine whether the trial should stop (without a solution).

        This default implementation stops the trial after the configured maximum
        number of generations; without one, the trial runs until solved.
        """
        max_generations = self._config.max_number_generations
        return max_generations is not None and self._statistics.num_generation >= max_generations

    def _report_progress(self, evaluation: Evaluation):
        """
        Report trial progress after each generation.

        This method is suppressed by setting 'self._suppress_output' to 'True',
        which we might do when running many trials.
        """
        if evaluation.is_solution:
            print(f"Generation {self._statistics.num_generation:4d}: solution found (ID={evaluation.solution.ID})")
            return

        stats = evaluation.statistics
        print(f"Generation {stats.num_generation:4d} ({stats.milliseconds_elapsed_evaluation:.0f}ms): {stats.population}")

    def _final_report(self):
        """
        Produce final report at the end of the trial.
        """
        if self.failed:
            print(f"\nNo solution found after {self._statistics.num_generation} generations")
        else:
            print(f"\nSolution found after {self._statistics.num_generation} generations:")
            print(self.solution)
