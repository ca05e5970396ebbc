"""
Unit tests for novelneat.phenotype.network_standard module.

This module contains tests for the Neuron and NetworkStandard classes,
including the handling of recurrent connections.
"""

import math
import pytest

from novelneat.genotype                   import ConnectionGene, Genome, NodeGene, NodeType
from novelneat.phenotype.network_standard import Neuron, NetworkStandard


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def hidden_genome():
    """2 inputs -> hidden relu -> output linear."""
    return Genome.from_dict({
        "inputs" : [{"id": 0, "activation": "linear"}, {"id": 1, "activation": "linear"}],
        "hidden" : [{"id": 3, "activation": "relu"}],
        "outputs": [{"id": 2, "activation": "linear"}],
        "feed_forward": [
            {"from": 0, "to": 3, "weight": 1.0},
            {"from": 1, "to": 3, "weight": -1.0},
            {"from": 3, "to": 2, "weight": 2.0},
        ],
    })


@pytest.fixture
def accumulator_genome():
    """
    1 input -> output (linear), with a recurrent self connection on the output:
    the output at step t is input(t) + output(t-1).
    """
    return Genome.from_dict({
        "inputs" : [{"id": 0, "activation": "linear"}],
        "outputs": [{"id": 1, "activation": "linear"}],
        "feed_forward": [{"from": 0, "to": 1, "weight": 1.0}],
        "recurrent"   : [{"from": 1, "to": 1, "weight": 1.0}],
    })


# ============================================================================
# Test Neuron
# ============================================================================

class TestNeuron:
    """Test Neuron.calculate_output method."""

    def test_input_neuron_passes_through(self):
        neuron = Neuron(NodeGene(0, NodeType.INPUT))
        neuron.calculate_output(-3.5)
        assert neuron.output == -3.5

    def test_hidden_neuron_applies_activation(self):
        neuron = Neuron(NodeGene(1, NodeType.HIDDEN, "tanh"))
        neuron.calculate_output(0.5)
        assert neuron.output == pytest.approx(math.tanh(0.5))

    def test_output_is_float(self):
        neuron = Neuron(NodeGene(1, NodeType.OUTPUT, "step"))
        neuron.calculate_output(2.0)
        assert neuron.output == 1.0
        assert isinstance(neuron.output, float)


# ============================================================================
# Test forward_pass
# ============================================================================

class TestForwardPass:
    """Test NetworkStandard.forward_pass method."""

    def test_hidden_layer(self, hidden_genome):
        network = NetworkStandard(hidden_genome)

        assert network.forward_pass([3.0, 1.0]) == [pytest.approx(4.0)]
        assert network.forward_pass([1.0, 3.0]) == [pytest.approx(0.0)]   # relu cuts off

    def test_unconnected_output(self):
        genome = Genome.from_dict({
            "inputs" : [{"id": 0, "activation": "linear"}],
            "outputs": [{"id": 1, "activation": "sigmoid"}],
        })
        assert NetworkStandard(genome).forward_pass([5.0]) == [pytest.approx(0.5)]

    def test_wrong_number_of_inputs(self, hidden_genome):
        with pytest.raises(ValueError, match="Expected 2 inputs, got 1"):
            NetworkStandard(hidden_genome).forward_pass([1.0])

    def test_zero_weight_connection_has_no_effect(self, hidden_genome):
        hidden_genome.feed_forward.insert(ConnectionGene(0, 0.0, 2))
        assert NetworkStandard(hidden_genome).forward_pass([3.0, 1.0]) == [pytest.approx(4.0)]

    def test_feed_forward_network_is_stateless(self, hidden_genome):
        network = NetworkStandard(hidden_genome)
        first  = network.forward_pass([2.0, 1.0])
        second = network.forward_pass([2.0, 1.0])
        assert first == second


# ============================================================================
# Test recurrent connections
# ============================================================================

class TestRecurrent:
    """Test the values carried by recurrent connections between passes."""

    def test_values_carried_to_next_pass(self, accumulator_genome):
        network = NetworkStandard(accumulator_genome)

        assert network.forward_pass([1.0]) == [pytest.approx(1.0)]
        assert network.forward_pass([1.0]) == [pytest.approx(2.0)]
        assert network.forward_pass([2.0]) == [pytest.approx(4.0)]

    def test_reset(self, accumulator_genome):
        network = NetworkStandard(accumulator_genome)
        network.forward_pass([1.0])
        network.forward_pass([1.0])

        network.reset()

        assert network.forward_pass([1.0]) == [pytest.approx(1.0)]

    def test_only_real_outputs_returned(self, accumulator_genome):
        network = NetworkStandard(accumulator_genome)
        assert len(network.forward_pass([1.0])) == 1

    def test_recurrent_weight_applied(self):
        genome = Genome.from_dict({
            "inputs" : [{"id": 0, "activation": "linear"}],
            "hidden" : [{"id": 2, "activation": "linear"}],
            "outputs": [{"id": 1, "activation": "linear"}],
            "feed_forward": [
                {"from": 0, "to": 2, "weight": 1.0},
                {"from": 2, "to": 1, "weight": 1.0},
            ],
            "recurrent": [{"from": 1, "to": 2, "weight": 0.5}],
        })
        network = NetworkStandard(genome)

        assert network.forward_pass([2.0]) == [pytest.approx(2.0)]
        assert network.forward_pass([2.0]) == [pytest.approx(3.0)]   # 2 + 0.5 * 2
        assert network.forward_pass([0.0]) == [pytest.approx(1.5)]   # 0 + 0.5 * 3


# ============================================================================
# Test introspection
# ============================================================================

class TestIntrospection:
    """Test the properties inherited from NetworkBase."""

    def test_counts(self, accumulator_genome):
        network = NetworkStandard(accumulator_genome)

        assert network.number_nodes == 2
        assert network.number_nodes_hidden == 0
        assert network.number_connections == 2
        assert network.number_connections_recurrent == 1

    def test_topological_order(self, hidden_genome):
        order = NetworkStandard._topological_sort(hidden_genome)
        assert order.index(3) > order.index(0)
        assert order.index(3) > order.index(1)
        assert order.index(2) > order.index(3)

    def test_visualize(self, accumulator_genome):
        dot = NetworkStandard(accumulator_genome).visualize(view=False)
        source = dot.source

        assert 'style=dashed' in source
        assert '0 -> 1' in source
