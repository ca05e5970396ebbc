"""
Node Gene Module.

This module implements the NodeGene class and NodeType enumeration.

Classes:
    NodeType: Enumeration for node types (INPUT, HIDDEN, OUTPUT)
    NodeGene: Gene encoding a single network node
"""

from enum   import Enum
from typing import Callable

from novelneat.activations import activations, activation_codes

class NodeType(Enum):
    """
    Nodes come in three types: input, hidden, output.
    """
    INPUT  = "I"
    HIDDEN = "H"
    OUTPUT = "O"

class NodeGene:
    """
    A gene describing a node in a Neural Network.

    A node gene is identified by its node ID alone; the activation is payload.
    The type of a node never changes after creation, and each type is kept in
    its own gene set within the genome.

    Public Attributes:
        id:         Unique identifier for this node
        type:       Type of node (INPUT, HIDDEN, or OUTPUT)
        activation: Name of the activation function (e.g., 'tanh', 'relu')

    Public Properties:
        key:                 Identity of the gene within a gene set
        activation_function: The activation function itself (callable)
    """

    def __init__(self, node_id: int, node_type: NodeType, activation: str = "linear"):
        """
        Parameters:
            node_id:    Unique identifier for this node
            node_type:  Type of node (INPUT, HIDDEN, or OUTPUT)
            activation: Name of the activation function
        """
        if activation not in activations:
            raise ValueError(f"Unknown activation function '{activation}'")

        self.id        : int      = node_id
        self.type      : NodeType = node_type
        self.activation: str      = activation

    @property
    def key(self) -> int:
        return self.id

    @property
    def activation_function(self) -> Callable:
        return activations[self.activation]

    def __eq__(self, other):
        if not isinstance(other, NodeGene):
            return NotImplemented
        return (self.id, self.type, self.activation) == (other.id, other.type, other.activation)

    __hash__ = None

    def __repr__(self):
        return f"NodeGene(node_id={self.id}, node_type=NodeType.{self.type.name}, activation='{self.activation}')"

    def __str__(self):
        if self.type == NodeType.INPUT:
            return f"[{self.type.value}{self.id}]"
        return f"[{self.type.value}{self.id},{activation_codes[self.activation]}]"
