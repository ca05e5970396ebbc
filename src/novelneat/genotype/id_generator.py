"""
Id Generator Module

This module implements the IdGenerator class, which hands out the identifiers
of nodes for a single evolutionary run.

Classes:
    IdGenerator: Issues node identifiers and remembers the ones used for splits
"""

from itertools import count
from typing    import Iterator

class IdGenerator:
    """
    Issues globally unique node identifiers for one run.

    Besides plain identifiers, the generator remembers which identifiers were
    handed out when a given connection was split. Splitting the same connection
    again, in any genome, offers the same identifiers first, so that lineages
    which independently perform the same structural change end up with the
    same hidden node. This is what lets crossover recognize the two changes as
    matching genes.

    One instance is created per run and passed explicitly to every operation
    that needs new identifiers; it is not shared between processes.

    Public Methods:
        next_id():                         Issue a fresh identifier
        cached_id_for_split(connection):   Identifiers associated with splitting a connection
    """

    def __init__(self, start: int = 0):
        """
        Parameters:
            start: the first identifier to issue
        """
        self._counter   = count(start)
        self._split_ids: dict[tuple[int, int], list[int]] = {}   # (node_in, node_out) => node IDs

    def next_id(self) -> int:
        """
        Issue a fresh identifier, never returned before by this generator.
        """
        return next(self._counter)

    def cached_id_for_split(self, connection_key: tuple[int, int]) -> Iterator[int]:
        """
        Iterate over the identifiers associated with splitting a connection.

        The iteration first yields, in order, every identifier previously
        issued for splitting this connection. When those run out, fresh
        identifiers are issued and remembered for the connection, so the
        sequence seen by later callers only ever grows.

        Parameters:
            connection_key: the (node_in, node_out) pair identifying the split connection

        Returns:
            An unbounded iterator of node identifiers
        """
        cached = self._split_ids.setdefault(connection_key, [])
        index = 0
        while True:
            if index == len(cached):
                cached.append(self.next_id())
            yield cached[index]
            index += 1

    def __repr__(self):
        return f"IdGenerator(split_connections={len(self._split_ids)})"
