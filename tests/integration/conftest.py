"""
Shared fixtures for integration tests.
"""

import pytest


@pytest.fixture
def xor_config(config):
    """Configuration for the two-input XOR problem."""
    config.population_size           = 30
    config.num_inputs                = 2
    config.num_outputs               = 1
    config.novelty_nearest_neighbors = 5
    config.max_number_generations    = 25
    config.output_activations        = ['sigmoid']
    config.new_node_probability      = 0.2
    config.new_connection_probability = 0.3
    return config
