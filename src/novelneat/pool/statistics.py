"""
Population Statistics Module

Classes:
    PopulationStatistics: Summary of a population after a generation transition
"""

from typing import TYPE_CHECKING

from novelneat.pool.scores import ScoreStatistics

if TYPE_CHECKING:
    from novelneat.phenotype import Individual

class PopulationStatistics:
    """
    Aggregate statistics reported by Population.next_generation().

    Public Attributes:
        top_performer:                   Individual with the highest normalized fitness
        fitness:                         ScoreStatistics of the fitness scores
        novelty:                         ScoreStatistics of the novelty scores
        age_minimum:                     Youngest age in the population
        age_average:                     Average age in the population
        age_maximum:                     Oldest age in the population
        milliseconds_elapsed_reproducing: Time taken to create the offspring
        archive_size:                    Number of individuals in the novelty archive
    """

    def __init__(self):
        self.top_performer: 'Individual | None' = None
        self.fitness      : ScoreStatistics     = ScoreStatistics()
        self.novelty      : ScoreStatistics     = ScoreStatistics()
        self.age_minimum  : int                 = 0
        self.age_average  : float               = 0.0
        self.age_maximum  : int                 = 0
        self.milliseconds_elapsed_reproducing: float = 0.0
        self.archive_size : int                 = 0

    def __str__(self):
        return (f"fitness: max={self.fitness.raw_maximum:.4f} avg={self.fitness.raw_average:.4f} "
                f"min={self.fitness.raw_minimum:.4f} | "
                f"novelty: max={self.novelty.raw_maximum:.4f} avg={self.novelty.raw_average:.4f} | "
                f"age: max={self.age_maximum} avg={self.age_average:.2f} | "
                f"archive={self.archive_size} | reproduction={self.milliseconds_elapsed_reproducing:.1f}ms")
