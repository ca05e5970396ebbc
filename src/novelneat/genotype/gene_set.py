"""
Gene Set Module

This module implements the GeneSet class, the container holding each kind of
gene (input, hidden and output nodes, feed-forward and recurrent connections)
inside a genome.

Classes:
    GeneSet: Ordered, set-like container of genes keyed by structural identity
"""

import copy
import random
from typing import Generic, Hashable, Iterable, Iterator, Optional, TypeVar

Gene = TypeVar("Gene")

class GeneSet(Generic[Gene]):
    """
    An ordered collection of genes, keyed by their structural identity.

    Every gene exposes a 'key' property: the node ID for node genes, the
    (node_in, node_out) pair for connection genes. Two genes with the same key
    describe the same structure, whatever their payload (weight, activation),
    so the set holds at most one gene per key. Iteration follows insertion order.

    Public Methods:
        insert(gene):                     Add a gene unless one with the same key exists
        replace(gene):                    Add a gene, overwriting any gene with the same key
        contains(gene):                   Membership test by key, ignoring payload
        get(key):                         The gene stored under a key (or None)
        random(rng):                      Uniformly random gene (or None if empty)
        iterate_with_random_offset(rng):  All genes, starting at a random position
        cross_in(other, rng):             Combine with another set according to NEAT crossover rules
    """

    def __init__(self, genes: Iterable[Gene] = ()):
        """
        Parameters:
            genes: initial genes; later genes do not overwrite earlier ones with the same key
        """
        self._genes: dict[Hashable, Gene] = {}
        for gene in genes:
            self.insert(gene)

    def insert(self, gene: Gene) -> bool:
        """
        Add a gene if no gene with the same key is present.

        Returns:
            True if the gene was added, False if the set was left unchanged
        """
        if gene.key in self._genes:
            return False
        self._genes[gene.key] = gene
        return True

    def replace(self, gene: Gene) -> None:
        """
        Add a gene, overwriting the payload of any gene with the same key.
        """
        self._genes[gene.key] = gene

    def contains(self, gene: Gene) -> bool:
        return gene.key in self._genes

    def get(self, key: Hashable) -> Optional[Gene]:
        return self._genes.get(key)

    def keys(self) -> list:
        return list(self._genes.keys())

    def random(self, rng: 'random.Random') -> Optional[Gene]:
        """
        Pick a gene uniformly at random.

        Returns:
            The selected gene, or None if the set is empty
        """
        if not self._genes:
            return None
        return rng.choice(list(self._genes.values()))

    def iterate_with_random_offset(self, rng: 'random.Random') -> Iterator[Gene]:
        """
        Iterate over every gene exactly once, starting at a random position
        and wrapping around. The starting position is drawn when this method
        is called, not when iteration begins.
        """
        genes  = list(self._genes.values())
        offset = int(rng.random() * len(genes))
        return iter(genes[offset:] + genes[:offset])

    def cross_in(self, other: 'GeneSet[Gene]', rng: 'random.Random') -> 'GeneSet[Gene]':
        """
        Create a new gene set by crossing this set with another.

        NEAT crossover rules, with 'self' playing the part of the fitter parent:
        - Matching genes (key in both sets): inherited from either set with equal probability
        - Genes only in 'self':  always inherited
        - Genes only in 'other': dropped

        The genes of the new set are copies; neither parent is modified.

        Parameters:
            other: the set of the weaker parent
            rng:   random number generator

        Returns:
            the offspring gene set
        """
        offspring = GeneSet()
        for key, gene in self._genes.items():
            if key in other._genes and rng.random() < 0.5:
                gene = other._genes[key]
            offspring._genes[key] = copy.copy(gene)
        return offspring

    def copy(self) -> 'GeneSet[Gene]':
        """
        Create a new set holding copies of the genes in this set.
        """
        return GeneSet(copy.copy(gene) for gene in self._genes.values())

    def __contains__(self, item) -> bool:
        key = item.key if hasattr(item, "key") else item
        return key in self._genes

    def __iter__(self) -> Iterator[Gene]:
        return iter(self._genes.values())

    def __len__(self) -> int:
        return len(self._genes)

    def __bool__(self) -> bool:
        return bool(self._genes)

    def __eq__(self, other):
        if not isinstance(other, GeneSet):
            return NotImplemented
        return self._genes == other._genes

    __hash__ = None

    def __repr__(self):
        return f"GeneSet({list(self._genes.values())!r})"

    def __str__(self):
        return ''.join(str(gene) for gene in self._genes.values())
