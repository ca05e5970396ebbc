"""
NovelNEAT Genotype Package

This package implements the genotype representation: the genetic encoding of
neural network structures and parameters on which mutation and crossover act.

A genome consists of five gene sets:
- Node genes:       input, hidden and output nodes, each with an activation function
- Connection genes: feed-forward (acyclic) and recurrent weighted connections

Modules:
    id_generator:    IdGenerator class
    node_gene:       NodeType enumeration and NodeGene class
    connection_gene: ConnectionType enumeration and ConnectionGene class
    gene_set:        GeneSet class
    genome:          Genome class and ConnectionNotPossibleError

Exported Classes:
    IdGenerator:                Issues node IDs, caching the IDs used for connection splits
    NodeType:                   Enumeration for node types (INPUT, HIDDEN, OUTPUT)
    NodeGene:                   Gene encoding a single network node
    ConnectionType:             Enumeration for connection types (FEED_FORWARD, RECURRENT)
    ConnectionGene:             Gene encoding a weighted connection between nodes
    GeneSet:                    Ordered container of genes keyed by identity
    Genome:                     Complete genome representing a neural network
    ConnectionNotPossibleError: Raised when a genome admits no new connection
"""

from novelneat.genotype.id_generator    import IdGenerator
from novelneat.genotype.node_gene       import NodeType, NodeGene
from novelneat.genotype.connection_gene import ConnectionType, ConnectionGene
from novelneat.genotype.gene_set        import GeneSet
from novelneat.genotype.genome          import ConnectionNotPossibleError, Genome

__all__ = ['IdGenerator',
           'NodeType',
           'NodeGene',
           'ConnectionType',
           'ConnectionGene',
           'GeneSet',
           'Genome',
           'ConnectionNotPossibleError']
