"""
Activations Package

This package provides the activation functions available to network nodes.
Activations are referred to by name throughout the genotype, the functions
themselves are only looked up when a genome is expressed as a network.

Exported:
    activations:      Dictionary mapping activation function names to functions
    activation_codes: Dictionary mapping activation function names to 3-letter codes
    Individual activation functions: linear_activation, sigmoid_activation,
                                     tanh_activation, gaussian_activation,
                                     step_activation, sine_activation,
                                     cosine_activation, inverse_activation,
                                     absolute_activation, relu_activation,
                                     squared_activation
"""

from novelneat.activations.basic_activations import (
    activations,
    activation_codes,
    linear_activation,
    sigmoid_activation,
    tanh_activation,
    gaussian_activation,
    step_activation,
    sine_activation,
    cosine_activation,
    inverse_activation,
    absolute_activation,
    relu_activation,
    squared_activation
)

__all__ = [
    'activations',
    'activation_codes',
    'linear_activation',
    'sigmoid_activation',
    'tanh_activation',
    'gaussian_activation',
    'step_activation',
    'sine_activation',
    'cosine_activation',
    'inverse_activation',
    'absolute_activation',
    'relu_activation',
    'squared_activation'
]
