"""
Individual Module

This module implements the Individual class, representing a complete evolved
agent in the population.

Classes:
    Individual: A genome together with its age, behavior, fitness and novelty
"""

import math
import random
import sys
from itertools import count
from typing    import Optional, TYPE_CHECKING

from novelneat.genotype.genome            import Genome
from novelneat.phenotype.network_standard import NetworkStandard
from novelneat.pool.scores                import FitnessScore, NoveltyScore

if TYPE_CHECKING:
    from novelneat.run.config import Config

class Individual:
    """
    An individual organism in the population.

    The algorithm operates on Individual(s) rather than on genomes: individuals
    are evaluated, ranked by their combined score and reproduce via crossover.
    Next to its genome, an individual records how many generations it has
    survived, the behavior vector reported by the last evaluation, and the
    fitness and novelty scores derived from it.

    Public Attributes:
        ID:       Process-wide unique identifier (used in reports)
        genome:   The Genome encoding this individual's network
        age:      Number of generations survived
        behavior: Behavior vector (None until evaluated)
        fitness:  FitnessScore (None until evaluated)
        novelty:  NoveltyScore (None until computed)

    Public Methods:
        score():                 Combined fitness/novelty score
        is_fitter_than(other):   Ordering used to pick the fitter parent
        crossover(other, rng):   Create offspring with another individual
        network():               Express the genome as an executable network
        clone():                 Copy of this individual
        to_dict():               Convert individual to dictionary representation
    """

    _id_generator = count(0)

    def __init__(self, genome: Genome, age: int = 0):
        """
        Parameters:
            genome: The Genome of this Individual
            age:    Number of generations survived
        """
        self.ID      : int                    = next(Individual._id_generator)
        self.genome  : Genome                 = genome
        self.age     : int                    = age
        self.behavior: Optional[list[float]]  = None
        self.fitness : Optional[FitnessScore] = None
        self.novelty : Optional[NoveltyScore] = None

    def score(self) -> float:
        """
        Combine the normalized fitness and novelty into a single score.

        The larger of the two dominates: with 'lo' and 'hi' the smaller and the
        larger of the two values, ratio = lo / (2 * hi) and the score is
        lo * ratio + hi * (1 - ratio). A missing fitness or novelty counts as 0.
        """
        fitness = self.fitness.normalized if self.fitness is not None else 0.0
        novelty = self.novelty.normalized if self.novelty is not None else 0.0

        if math.isnan(fitness) or math.isnan(novelty):
            return math.nan

        if fitness == 0.0 and novelty == 0.0:
            return 0.0

        lo, hi = (novelty, fitness) if novelty < fitness else (fitness, novelty)

        # how dominant the larger score is
        ratio = lo / hi / 2.0

        return lo * ratio + hi * (1.0 - ratio)

    def is_fitter_than(self, other: 'Individual') -> bool:
        """
        Whether this individual has a higher score than 'other'. For equal
        scores, the individual with fewer connection genes is the fitter one.
        """
        score_self  = self.score()
        score_other = other.score()

        return (score_self > score_other or
                (abs(score_self - score_other) < sys.float_info.epsilon and len(self.genome) < len(other.genome)))

    def crossover(self, other: 'Individual', rng: random.Random) -> 'Individual':
        """
        Create a new Individual from the genomes of this Individual and 'other'.

        The fitter of the two provides all of its genes (disjoint genes of the
        weaker parent are dropped), matching genes are inherited at random.
        The offspring starts with age 0 and is not evaluated.

        Parameters:
            other: the Individual with whom this Individual is mating
            rng:   random number generator

        Returns:
            the offspring
        """
        fitter, weaker = (self, other) if self.is_fitter_than(other) else (other, self)
        return Individual(fitter.genome.cross_in(weaker.genome, rng))

    def network(self) -> NetworkStandard:
        """
        Express the genome of this individual as a new executable network.
        """
        return NetworkStandard(self.genome)

    def clone(self) -> 'Individual':
        """
        Create a copy of this Individual, sharing the ID and evaluation results
        but owning an independent genome.
        """
        clone          = Individual(self.genome.clone(), self.age)
        clone.ID       = self.ID
        clone.behavior = list(self.behavior) if self.behavior is not None else None
        clone.fitness  = self.fitness
        clone.novelty  = self.novelty
        return clone

    def to_dict(self) -> dict:
        """
        Convert the individual to a dictionary representation (see 'Genome.to_dict()').
        """
        return {
            "genome"  : self.genome.to_dict(),
            "age"     : self.age,
            "behavior": self.behavior,
            "fitness" : self.fitness.to_dict() if self.fitness is not None else None,
            "novelty" : self.novelty.to_dict() if self.novelty is not None else None
        }

    @classmethod
    def from_dict(cls, individual_dict: dict, config: Optional['Config'] = None) -> 'Individual':
        """
        Create an Individual from a dictionary description (see 'to_dict()').

        Parameters:
            individual_dict: Dictionary describing the individual
            config:          Configuration passed on to the genome

        Returns:
            A new Individual
        """
        individual = cls(Genome.from_dict(individual_dict["genome"], config), individual_dict.get("age", 0))

        if individual_dict.get("behavior") is not None:
            individual.behavior = [float(b) for b in individual_dict["behavior"]]
        if individual_dict.get("fitness") is not None:
            individual.fitness = FitnessScore.from_dict(individual_dict["fitness"])
        if individual_dict.get("novelty") is not None:
            individual.novelty = NoveltyScore.from_dict(individual_dict["novelty"])

        return individual

    def __str__(self):
        return f"ID={self.ID}, age={self.age}, score={self.score():.4f}\n{self.genome}"

    def __repr__(self):
        return f"Individual(genome={repr(self.genome)}, age={self.age})"
