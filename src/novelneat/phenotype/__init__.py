"""
NovelNEAT Phenotype Package

This package expresses genomes as executable neural networks and as evolved
individuals.

Modules:
    network_base:     Abstract base class for network implementations
    network_standard: Object-oriented network implementation supporting recurrent connections
    individual:       Evolved agent combining genome, age, behavior and scores

Exported Classes:
    Individual:      A complete evolved agent
    NetworkBase:     Abstract base class for network implementations
    NetworkStandard: Object-oriented neural network (single-sample processing)
    Neuron:          A computational node applying activation functions
"""

from novelneat.phenotype.network_base     import NetworkBase
from novelneat.phenotype.network_standard import Neuron, NetworkStandard
from novelneat.phenotype.individual       import Individual

__all__ = ['Individual',
           'NetworkBase',
           'NetworkStandard',
           'Neuron']
