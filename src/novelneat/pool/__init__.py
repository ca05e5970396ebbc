"""
NovelNEAT Pool Package

This package contains the classes operating at the level of the population:
scoring individuals by fitness and novelty, selecting survivors and letting
them reproduce.

Modules:
    scores:     The raw -> shifted -> normalized score transform
    novelty:    Novelty computation and the novelty archive
    statistics: Statistics reported after each generation
    population: Top-level population management and evolution

Exported Classes:
    Score:                Base class of fitness and novelty scores
    FitnessScore:         Score derived from the evaluator's fitness
    NoveltyScore:         Score derived from an individual's novelty
    ScoreStatistics:      Population-wide minimum/average/maximum of a score
    NoveltyArchive:       Archive of past individuals used by novelty search
    PopulationStatistics: Summary of a generation transition
    Population:           Top-level evolutionary coordinator

Exported Functions:
    compute_novelty: Mean distance of behaviors to their nearest neighbors
"""

from novelneat.pool.scores     import Score, FitnessScore, NoveltyScore, ScoreStatistics
from novelneat.pool.novelty    import NoveltyArchive, compute_novelty
from novelneat.pool.statistics import PopulationStatistics
from novelneat.pool.population import Population

__all__ = [
    'Score',
    'FitnessScore',
    'NoveltyScore',
    'ScoreStatistics',
    'NoveltyArchive',
    'compute_novelty',
    'PopulationStatistics',
    'Population',
]
