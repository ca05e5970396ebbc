"""
Progress Module

This module implements the Progress class, the result an evaluator reports
for one individual.

Classes:
    Progress: Fitness and/or behavior of an evaluated individual, possibly a solution
"""

from typing import Optional, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from novelneat.phenotype import Individual

class Progress:
    """
    What the evaluation of an individual has revealed.

    A Progress takes one of four forms:
      + empty:    nothing was learned
      + novelty:  only a behavior vector
      + status:   a raw fitness and a behavior vector
      + solution: any of the above, together with the individual solving the problem

    Public Properties:
        raw_fitness: The raw fitness (None if not reported)
        behavior:    The behavior vector (None if not reported)
        solution:    The solving individual (None unless this is a solution)
        is_solution: Whether this Progress reports a solution

    Public Methods:
        solved(individual): The same Progress, marked as a solution found by 'individual'

    Class Methods:
        empty():           Progress reporting nothing
        novelty(behavior): Progress reporting only a behavior
    """

    def __init__(self,
                 fitness : Optional[float]           = None,
                 behavior: Optional[Sequence[float]] = None,
                 solution: Optional['Individual']    = None):
        """
        Parameters:
            fitness:  The raw fitness of the individual
            behavior: The behavior vector of the individual
            solution: The individual solving the problem, if any
        """
        self._fitness  = None if fitness  is None else float(fitness)
        self._behavior = None if behavior is None else [float(b) for b in behavior]
        self._solution = solution

    @classmethod
    def empty(cls) -> 'Progress':
        return cls()

    @classmethod
    def novelty(cls, behavior: Sequence[float]) -> 'Progress':
        return cls(behavior=behavior)

    def solved(self, individual: 'Individual') -> 'Progress':
        """
        Mark this Progress as a solution, keeping any fitness and behavior reported.

        Parameters:
            individual: The individual that solved the problem

        Returns:
            A new Progress carrying the solution
        """
        return Progress(self._fitness, self._behavior, individual)

    @property
    def raw_fitness(self) -> Optional[float]:
        return self._fitness

    @property
    def behavior(self) -> Optional[list[float]]:
        return self._behavior

    @property
    def solution(self) -> Optional['Individual']:
        return self._solution

    @property
    def is_solution(self) -> bool:
        return self._solution is not None

    def __repr__(self):
        if self.is_solution:
            kind = "Solution"
        elif self._fitness is not None:
            kind = "Status"
        elif self._behavior is not None:
            kind = "Novelty"
        else:
            kind = "Empty"
        return f"Progress.{kind}(fitness={self._fitness}, behavior={self._behavior})"
