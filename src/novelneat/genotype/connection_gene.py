"""
Connection Gene Module

This module implements the ConnectionGene class and the ConnectionType
enumeration.

Classes:
    ConnectionType: Enumeration for connection types (FEED_FORWARD, RECURRENT)
    ConnectionGene: Gene encoding a weighted connection between nodes
"""

import random
from enum import Enum

class ConnectionType(Enum):
    """
    Connections are either part of the acyclic feed-forward graph, or recurrent.
    Recurrent connections deliver the value their source had on the previous step.
    """
    FEED_FORWARD = "F"
    RECURRENT    = "R"

class ConnectionGene:
    """
    A gene describing a weighted connection between two nodes in a Neural Network.

    A connection is identified by its endpoints: the pair (node_in, node_out)
    is the key under which it is stored in a gene set, and two genes with the
    same endpoints describe the same structure regardless of their weights.
    The weight is mutable payload.

    Public Attributes:
        node_in:  ID of the source node
        node_out: ID of the destination node
        weight:   Weight of the connection
        type:     FEED_FORWARD or RECURRENT

    Public Properties:
        key: Identity of the gene within a gene set

    Public Methods:
        perturb(rng, stdev): Add gaussian noise to the weight
    """

    def __init__(self,
                 node_in : int,
                 weight  : float | None,
                 node_out: int,
                 conn_type: ConnectionType = ConnectionType.FEED_FORWARD,
                 rng     : random.Random | None = None):
        """
        Initialize a connection gene.
        If 'weight' is None, it is drawn uniformly from [-1, 1].

        Parameters:
            node_in:   ID of the source node
            weight:    Weight of the connection
            node_out:  ID of the destination node
            conn_type: FEED_FORWARD or RECURRENT
            rng:       Random number generator used for a default weight
        """
        if weight is None:
            weight = (rng or random).uniform(-1.0, 1.0)

        self.node_in : int            = node_in
        self.weight  : float          = weight
        self.node_out: int            = node_out
        self.type    : ConnectionType = conn_type

    @property
    def key(self) -> tuple[int, int]:
        return (self.node_in, self.node_out)

    def perturb(self, rng: random.Random, stdev: float) -> None:
        """
        Modify the weight additively by a value drawn from N(0, stdev).
        """
        self.weight += rng.gauss(0.0, stdev)

    def __eq__(self, other):
        if not isinstance(other, ConnectionGene):
            return NotImplemented
        return (self.key, self.weight, self.type) == (other.key, other.weight, other.type)

    __hash__ = None

    def __repr__(self):
        return (f"ConnectionGene(node_in={self.node_in}, weight={self.weight:+.6f}, "
                f"node_out={self.node_out}, conn_type=ConnectionType.{self.type.name})")

    def __str__(self):
        return f"[{self.type.value},{self.node_in:02d}=>{self.node_out:02d},{self.weight:+.02f}]"
