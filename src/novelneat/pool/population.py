"""
Population Module

This module implements the Population class, the orchestrator of the
evolutionary algorithm. The population turns the evaluation results of one
generation into the next generation: it scores and ranks its individuals,
keeps the best of them and lets the survivors reproduce.

Classes:
    Population: Top-level evolutionary coordinator managing individuals and generations
"""

import math
import random
import time
from typing import Optional, Sequence, TYPE_CHECKING

from novelneat.run.config            import Config
from novelneat.genotype.genome       import Genome
from novelneat.genotype.id_generator import IdGenerator
from novelneat.pool.novelty          import NoveltyArchive, compute_novelty
from novelneat.pool.scores           import FitnessScore, NoveltyScore, ScoreStatistics
from novelneat.pool.statistics       import PopulationStatistics

if TYPE_CHECKING:
    from novelneat.phenotype import Individual
    from novelneat.run.progress import Progress

class Population:
    """
    A population of evolving individuals.

    The population owns everything that must persist across generations within
    a run: the individuals, the novelty archive, the random number generator
    (seeded from the configuration) and the IdGenerator issuing node IDs.

    Public Attributes:
        individuals: List of all Individual objects in the current generation
        archive:     NoveltyArchive of past individuals

    Public Properties:
        id_generator: The IdGenerator of this run
        rng:          The random number generator of this run

    Public Methods:
        next_generation(progress): Create the next generation from evaluation results
        top_performer():           The individual with the highest normalized fitness
    """

    def __init__(self, config: Config):
        """
        Create the initial population.

        A single genome, holding only the input and output nodes, is created and
        copied for every individual, so that all of them share the same inputs
        and outputs. Each copy then receives its initial connections and is
        mutated once.

        Parameters:
            config: Stores configuration parameters
        """
        # Import here to avoid circular import
        from novelneat.phenotype import Individual

        self._config       = config
        self._rng          = random.Random(config.seed)
        self._id_generator = IdGenerator()

        initial_genome = Genome(config, self._id_generator, self._rng)

        self.individuals: list['Individual'] = []
        for _ in range(config.population_size):
            genome = initial_genome.clone()
            genome.init(self._rng)
            genome.mutate(self._rng, self._id_generator)
            self.individuals.append(Individual(genome))

        self.archive = NoveltyArchive()

    @property
    def id_generator(self) -> IdGenerator:
        return self._id_generator

    @property
    def rng(self) -> random.Random:
        return self._rng

    def next_generation(self, progress: Sequence['Progress']) -> PopulationStatistics:
        """
        Create the next generation, given the evaluation of the current one.

        The generation transition follows these steps:
          1. assign the reported fitness (skipped if no fitness was reported)
          2. assign the reported behaviors
          3. compute the novelty of every individual with a behavior; the most
             novel individual is added to the archive
          4. sort the individuals by score, highest first
          5. keep the top ceil(population_size * survival_rate) individuals
          6. age the survivors by one generation
          7. let the survivors reproduce until the population is complete again

        Parameters:
            progress: evaluation results, index-aligned with 'self.individuals'

        Returns:
            Statistics about the transition

        Raises:
            ValueError:   If 'progress' is not aligned with the population, or reports a NaN
                          value (the population is then left unchanged), or a score is NaN
            RuntimeError: If no individual survives
        """
        if len(progress) != len(self.individuals):
            raise ValueError(f"Expected {len(self.individuals)} progress entries, got {len(progress)}")

        for index, p in enumerate(progress):
            if ((p.raw_fitness is not None and math.isnan(p.raw_fitness)) or
                (p.behavior is not None and any(math.isnan(b) for b in p.behavior))):
                raise ValueError(f"Cannot rank individuals, progress entry {index} reports a NaN value")

        stats = PopulationStatistics()

        self._assign_fitness(progress, stats)
        self._assign_behavior(progress)
        most_novel = self._calculate_novelty(stats)

        # Scores can still turn NaN on infinite inputs; the individuals then keep
        # the scores just assigned, but the archive is left untouched
        scores = [individual.score() for individual in self.individuals]
        if any(math.isnan(score) for score in scores):
            raise ValueError("Cannot rank individuals, encountered a NaN score")

        if most_novel is not None:
            self.archive.add(most_novel)
        stats.archive_size = len(self.archive)

        # Sort individuals by score (descending, i.e. highest score first)
        self.individuals.sort(key=lambda individual: individual.score(), reverse=True)

        # Remove any individual that does not survive
        num_survivors = math.ceil(self._config.population_size * self._config.survival_rate)
        del self.individuals[num_survivors:]
        if not self.individuals:
            raise RuntimeError("No individual survived, check 'population_size' and 'survival_rate'")

        for individual in self.individuals:
            individual.age += 1

        start = time.perf_counter()
        self._generate_offspring(min(scores), max(scores))
        stats.milliseconds_elapsed_reproducing = (time.perf_counter() - start) * 1000.0

        self._gather_statistics(stats)
        return stats

    def top_performer(self) -> 'Individual':
        """
        Find the individual with the highest normalized fitness.
        Individuals without a fitness rank last.

        Raises:
            RuntimeError: If the population is empty
        """
        if not self.individuals:
            raise RuntimeError("Population is empty")

        return max(self.individuals,
                   key=lambda indv: indv.fitness.normalized if indv.fitness is not None else -math.inf)

    def _assign_fitness(self, progress: Sequence['Progress'], stats: PopulationStatistics):
        """
        Score every individual for which the evaluator reported a fitness.
        """
        fitnesses = [(index, p.raw_fitness) for index, p in enumerate(progress) if p.raw_fitness is not None]
        if not fitnesses:
            return

        stats.fitness, scores = ScoreStatistics.from_raw([raw for _, raw in fitnesses], FitnessScore)
        for (index, _), score in zip(fitnesses, scores):
            self.individuals[index].fitness = score

    def _assign_behavior(self, progress: Sequence['Progress']):
        for index, p in enumerate(progress):
            if p.behavior is not None:
                self.individuals[index].behavior = list(p.behavior)

    def _calculate_novelty(self, stats: PopulationStatistics) -> Optional['Individual']:
        """
        Compute the novelty of every individual with a behavior, relative to
        the rest of the population and to the archive.

        Returns:
            The individual with the highest raw novelty, to be archived
            (None if no individual has a behavior)
        """
        behaving = [individual for individual in self.individuals if individual.behavior is not None]
        for individual in self.individuals:
            if individual.behavior is None:
                individual.novelty = None

        if behaving:
            raw_novelties = compute_novelty([indv.behavior for indv in behaving],
                                            self.archive.behaviors(),
                                            self._config.novelty_nearest_neighbors)

            stats.novelty, scores = ScoreStatistics.from_raw(raw_novelties, NoveltyScore)
            for individual, score in zip(behaving, scores):
                individual.novelty = score

            most_novel = max(range(len(behaving)), key=lambda i: raw_novelties[i])
            return behaving[most_novel]

        return None

    def _generate_offspring(self, lowest: float, highest: float):
        """
        Fill the population back to 'population_size' with offspring of the survivors.

        Each survivor produces a number of offspring proportional to its share
        of the survivors' normalized scores. Every offspring is the crossover of
        its parent with a survivor drawn at random (possibly the parent itself),
        and is mutated before joining the population.

        Parameters:
            lowest:  Lowest score of the generation, before the weakest were removed
            highest: Highest score of the generation
        """
        survivors     = list(self.individuals)
        num_offspring = self._config.population_size - len(survivors)
        if num_offspring <= 0:
            return

        allocations = self._allocate_offspring([s.score() for s in survivors], num_offspring, lowest, highest)

        for parent, count in zip(survivors, allocations):
            for _ in range(count):
                partner   = self._rng.choice(survivors)
                offspring = parent.crossover(partner, self._rng)
                offspring.genome.mutate(self._rng, self._id_generator)
                self.individuals.append(offspring)

    @staticmethod
    def _allocate_offspring(scores       : Sequence[float],
                            num_offspring: int,
                            lowest       : Optional[float] = None,
                            highest      : Optional[float] = None) -> list[int]:
        """
        Split 'num_offspring' among the survivors proportionally to their scores.

        Scores are shifted by the lowest score of the whole generation and
        divided by the shifted highest score, mapping them to [0, 1]; since the
        weakest individuals were removed, every survivor scoring above the
        generation's minimum receives a positive share. Each survivor is first
        allotted its proportional share rounded to the nearest integer. The
        total is then corrected to exactly 'num_offspring', adding offspring
        where the rounding fell shortest and removing them where it overshot
        most. If all shares are zero, the offspring are shared equally.

        Parameters:
            scores:        Scores of the survivors
            num_offspring: Number of offspring to allocate
            lowest:        Lowest score of the generation (default: lowest of 'scores')
            highest:       Highest score of the generation (default: highest of 'scores')

        Returns:
            Number of offspring per survivor, in the order of 'scores'
        """
        lowest  = min(scores) if lowest  is None else lowest
        highest = max(scores) if highest is None else highest

        spread     = highest - lowest
        normalized = [(score - lowest) / spread for score in scores] if spread > 0 else [1.0] * len(scores)
        if sum(normalized) == 0.0:
            normalized = [1.0] * len(scores)

        total  = sum(normalized)
        quotas = [num_offspring * n / total for n in normalized]
        counts = [math.floor(q + 0.5) for q in quotas]

        difference = num_offspring - sum(counts)
        while difference > 0:
            index = max(range(len(counts)), key=lambda i: quotas[i] - counts[i])
            counts[index] += 1
            difference    -= 1
        while difference < 0:
            index = min((i for i in range(len(counts)) if counts[i] > 0), key=lambda i: quotas[i] - counts[i])
            counts[index] -= 1
            difference    += 1

        return counts

    def _gather_statistics(self, stats: PopulationStatistics):
        stats.top_performer = self.top_performer().clone()

        ages = [individual.age for individual in self.individuals]
        stats.age_minimum = min(ages)
        stats.age_maximum = max(ages)
        stats.age_average = sum(ages) / len(ages)

    def __len__(self):
        return len(self.individuals)

    def __str__(self):
        return '\n'.join(str(individual) for individual in self.individuals)
