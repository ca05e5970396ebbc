"""Pytest configuration and shared fixtures."""

import random
import pytest
import sys
from itertools import count
from pathlib   import Path

# Add the source directory to the Python path
src_dir = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_dir))


@pytest.fixture(autouse=True)
def reset_individual_id_generator():
    """Reset Individual ID generator before each test."""
    from novelneat.phenotype.individual import Individual
    Individual._id_generator = count(0)
    yield
    Individual._id_generator = count(0)


@pytest.fixture
def config():
    """A default configuration, with a small population."""
    from novelneat.run.config import Config
    config = Config()
    config.population_size = 10
    config.num_inputs      = 2
    config.num_outputs     = 1
    config.novelty_nearest_neighbors = 3
    return config


@pytest.fixture
def rng():
    """Seeded random number generator."""
    return random.Random(42)


@pytest.fixture
def id_generator():
    from novelneat.genotype.id_generator import IdGenerator
    return IdGenerator()
