"""
Novelty Module

This module implements novelty search: the novelty of an individual measures
how different its behavior is from the behaviors seen so far, in the current
population and in an archive of past individuals.

Classes:
    NoveltyArchive: Ever-growing collection of past individuals kept for their behavior

Functions:
    compute_novelty: Mean distance of each behavior to its nearest neighbors
"""

import autograd.numpy as np  # type: ignore
from typing import Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from novelneat.phenotype import Individual

def compute_novelty(behaviors: Sequence[Sequence[float]],
                    archive_behaviors: Sequence[Sequence[float]],
                    k: int) -> list[float]:
    """
    Compute the novelty of each behavior in 'behaviors'.

    The novelty of a behavior is its mean Euclidean distance to the k nearest
    behaviors among all others, i.e. among 'behaviors' (excluding itself) and
    'archive_behaviors'. With fewer than k other behaviors available, the mean
    is taken over all of them; with none, the novelty is 0.0.

    Parameters:
        behaviors:         Behavior vectors of the current population
        archive_behaviors: Behavior vectors of the archived individuals
        k:                 Number of nearest neighbors

    Returns:
        The novelty of each element of 'behaviors', in the same order
    """
    num_behaviors = len(behaviors)
    if num_behaviors == 0:
        return []

    points = np.array([list(b) for b in behaviors] + [list(b) for b in archive_behaviors], dtype=float)

    # distances[i, j] = ||behaviors[i] - points[j]||
    differences = points[:num_behaviors, None, :] - points[None, :, :]
    distances   = np.sqrt(np.sum(differences ** 2, axis=-1))

    novelties = []
    for i in range(num_behaviors):
        others = np.concatenate([distances[i, :i], distances[i, i+1:]])
        if len(others) == 0:
            novelties.append(0.0)
            continue
        nearest = np.sort(others)[:max(k, 1)]
        novelties.append(float(np.mean(nearest)))

    return novelties

class NoveltyArchive:
    """
    The archive of individuals whose behaviors serve as additional reference
    points when computing novelty.

    Individuals are cloned when added, so later changes to the population do
    not affect the archive. The archive only grows.

    Public Methods:
        add(individual): Append a clone of an individual
        behaviors():     The behavior vectors of the archived individuals
    """

    def __init__(self):
        self.individuals: list['Individual'] = []

    def add(self, individual: 'Individual') -> None:
        self.individuals.append(individual.clone())

    def behaviors(self) -> list[list[float]]:
        return [indv.behavior for indv in self.individuals if indv.behavior is not None]

    def __len__(self) -> int:
        return len(self.individuals)

    def __iter__(self):
        return iter(self.individuals)

    def __repr__(self):
        return f"NoveltyArchive(size={len(self.individuals)})"
