"""
Standard Network Module

This module expresses a genome as an executable neural network, using an
object oriented representation of its nodes. Recurrent connections are
supported by unrolling: the network remembers the values carried by recurrent
connections between consecutive forward passes.

Classes:
    Neuron:          A computational node applying its activation function
    NetworkStandard: An executable network built from a genome
"""

from typing import Callable, Optional, Sequence, TYPE_CHECKING

from novelneat.genotype.node_gene    import NodeType
from novelneat.phenotype.network_base import NetworkBase

if TYPE_CHECKING:
    from novelneat.genotype import ConnectionGene, Genome, NodeGene

class Neuron:
    """
    A computational node (neuron) in a neural network.

    Input neurons pass their input through unchanged. Hidden and output neurons
    compute their output as: activation(weighted_input).

    Public Attributes:
        output: The computed output value (None until calculated)

    Public Properties:
        id:         ID of the underlying node gene
        type:       Neuron type (INPUT, HIDDEN, or OUTPUT)
        activation: Activation function applied to the weighted input

    Public Methods:
        calculate_output(input_data): Compute and store the neuron's output value
    """

    def __init__(self, gene: "NodeGene"):
        """
        Parameters:
            gene: the gene encoding the Node/Neuron
        """
        self._gene : "NodeGene"      = gene
        self.output: Optional[float] = None

    @property
    def id(self) -> int:
        return self._gene.id

    @property
    def type(self) -> NodeType:
        return self._gene.type

    @property
    def activation(self) -> Callable[[float], float]:
        return self._gene.activation_function

    def calculate_output(self, input_data: float) -> None:
        """
        Calculate the output of this node/neuron.
        The result is saved internally in 'self.output'.

        Parameters:
            input_data: the weighted sum of the neuron's inputs
        """
        if self.type == NodeType.INPUT:
            self.output = input_data
        else:
            self.output = float(self.activation(input_data))

    def __repr__(self):
        return f"Neuron(gene={self._gene!r})"

class NetworkStandard(NetworkBase):
    """
    Object-oriented implementation of an executable network.

    The network evaluates the unrolled genome (see 'Genome.unroll()'), in which
    every recurrent connection has been replaced by a feed-forward path through
    an auxiliary output node and an auxiliary input node. After each forward
    pass, the value of every auxiliary output is stored and fed to the matching
    auxiliary input on the next pass; this reproduces the one step delay of the
    recurrent connections. Stored values start at 0.0.

    Public Methods:
        forward_pass(inputs): Process inputs through the network and return outputs
        reset():              Forget the values carried by recurrent connections
    """

    def __init__(self, genome: "Genome"):
        """
        Parameters:
            genome: the Genome encoding the network
        """
        super().__init__(genome)

        self._neurons: dict[int, Neuron] = {node.id: Neuron(node) for node in self._unrolled.nodes()}

        # For each neuron, the connections ending in it
        self._incoming_connections: dict[int, list["ConnectionGene"]] = {}   # neuron ID => [ConnectionGene]
        for conn in self._unrolled.feed_forward:
            self._incoming_connections.setdefault(conn.node_out, []).append(conn)

        # Auxiliary inputs and outputs follow the genome's own, in matching order
        aux_inputs  = [node.id for node in self._unrolled.inputs][len(self._input_ids):]
        aux_outputs = [node.id for node in self._unrolled.outputs][len(self._output_ids):]
        self._memory_links: list[tuple[int, int]] = list(zip(aux_inputs, aux_outputs))

        self._memory: dict[int, float] = {}
        self.reset()

    def reset(self) -> None:
        """
        Reset the values carried by recurrent connections to 0.0.
        """
        self._memory = {aux_input: 0.0 for aux_input, _ in self._memory_links}

    def forward_pass(self, inputs: Sequence[float]) -> list[float]:
        """
        Perform a complete forward pass through the network.

        Parameters:
            inputs: the network inputs (as many as input nodes in the genome)

        Returns:
            the values of the genome's output nodes, in order
        """
        if len(inputs) != len(self._input_ids):
            raise ValueError(f"Expected {len(self._input_ids)} inputs, got {len(inputs)}")

        for neuron in self._neurons.values():
            neuron.output = None

        for input_id, value in zip(self._input_ids, inputs):
            self._neurons[input_id].calculate_output(value)
        for aux_input, value in self._memory.items():
            self._neurons[aux_input].calculate_output(value)

        # Propagate values through the network, in topological order
        for node_id in self._sorted_nodes:
            neuron = self._neurons[node_id]
            if neuron.type == NodeType.INPUT:
                continue
            conns_in   = self._incoming_connections.get(node_id, [])
            input_data = sum(c.weight * self._neurons[c.node_in].output for c in conns_in)
            neuron.calculate_output(input_data)

        for aux_input, aux_output in self._memory_links:
            self._memory[aux_input] = self._neurons[aux_output].output

        return [self._neurons[ID].output for ID in self._output_ids]

    def __str__(self):
        return "\n".join(f"  {neuron!r}" for neuron in self._neurons.values())
