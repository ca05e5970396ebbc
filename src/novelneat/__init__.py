"""
NovelNEAT - NEAT with novelty search, in Python.

This package evolves populations of variable-topology neural networks using a
NEAT style genetic algorithm, ranking individuals by a combination of their
fitness and the novelty of their behavior.

Main components:
- genotype: Genetic encoding (genomes, gene sets, node ID tracking)
- phenotype: Individuals and executable networks
- pool: Scores, novelty search and population management
- run: Trial execution and configuration
- activations: Activation functions for neural networks

Example:
    >>> from novelneat import Config, Progress, Trial
    >>> config = Config("config.ini")
    >>> def evaluate(individual):
    ...     outputs = individual.network().forward_pass([1.0])
    ...     return Progress(fitness=-abs(outputs[0] - 0.5), behavior=outputs)
    >>> trial = Trial(config, evaluate)
    >>> solution = trial.run()
"""

__version__ = "0.1.0"

# Import main classes for convenient access
from novelneat.run.config            import Config
from novelneat.run.progress          import Progress
from novelneat.run.trial             import Trial
from novelneat.genotype.genome       import Genome
from novelneat.genotype.id_generator import IdGenerator
from novelneat.phenotype.individual  import Individual
from novelneat.pool.population       import Population

__all__ = [
    "Config",
    "Progress",
    "Trial",
    "Genome",
    "IdGenerator",
    "Individual",
    "Population",
]
