"""
Unit tests for novelneat.genotype.connection_gene module.
"""

import copy
import random

from novelneat.genotype.connection_gene import ConnectionGene, ConnectionType


class TestConnectionGene:
    """Test ConnectionGene construction, identity and perturbation."""

    def test_init(self):
        conn = ConnectionGene(0, 0.5, 3)
        assert conn.node_in == 0
        assert conn.node_out == 3
        assert conn.weight == 0.5
        assert conn.type == ConnectionType.FEED_FORWARD
        assert conn.key == (0, 3)

    def test_default_weight_is_uniform_in_range(self):
        rng = random.Random(0)
        for _ in range(100):
            assert -1.0 <= ConnectionGene(0, None, 1, rng=rng).weight <= 1.0

    def test_recurrent_type(self):
        conn = ConnectionGene(2, 0.1, 2, ConnectionType.RECURRENT)
        assert conn.type == ConnectionType.RECURRENT
        assert conn.key == (2, 2)

    def test_perturb_changes_weight(self):
        conn = ConnectionGene(0, 0.5, 1)
        conn.perturb(random.Random(0), 1.0)
        assert conn.weight != 0.5

    def test_perturb_with_zero_stdev(self):
        conn = ConnectionGene(0, 0.5, 1)
        conn.perturb(random.Random(0), 0.0)
        assert conn.weight == 0.5

    def test_copy_is_independent(self):
        conn = ConnectionGene(0, 0.5, 1)
        duplicate = copy.copy(conn)
        duplicate.weight = 1.0
        assert conn.weight == 0.5

    def test_equality(self):
        assert ConnectionGene(0, 0.5, 1) == ConnectionGene(0, 0.5, 1)
        assert ConnectionGene(0, 0.5, 1) != ConnectionGene(0, 0.6, 1)
        assert ConnectionGene(0, 0.5, 1) != ConnectionGene(0, 0.5, 1, ConnectionType.RECURRENT)

    def test_str(self):
        assert str(ConnectionGene(1, 0.5, 12)) == "[F,01=>12,+0.50]"
