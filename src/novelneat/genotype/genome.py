"""
Genome Module

This module implements the Genome class, the genetic encoding of a neural
network whose topology is evolved.

Classes:
    Genome:                     Complete genome representing a neural network structure
    ConnectionNotPossibleError: Raised when no connection can be added to a genome
"""

import math
import random
from collections import defaultdict, deque
from itertools   import count

from novelneat.run.config                import Config
from novelneat.genotype.connection_gene  import ConnectionGene, ConnectionType
from novelneat.genotype.gene_set         import GeneSet
from novelneat.genotype.id_generator     import IdGenerator
from novelneat.genotype.node_gene        import NodeGene, NodeType

class ConnectionNotPossibleError(RuntimeError):
    """
    No pair of nodes can be connected without duplicating a connection
    or (for feed-forward connections) closing a cycle.
    """

class Genome:
    """
    A genome representing a neural network as five sets of genes.

    Nodes are kept in three sets, one per node type (inputs, hidden, outputs),
    and connections in two: the feed-forward connections, which must form an
    acyclic graph, and the recurrent connections, which may form cycles and
    are evaluated with a delay of one step.

    The input and output nodes are created once per run and shared (by value)
    by every genome in the population; only the hidden nodes and the two
    connection sets evolve. Every connection refers to nodes present in the
    genome.

    Public Attributes:
        inputs:       Gene set of input nodes
        hidden:       Gene set of hidden nodes
        outputs:      Gene set of output nodes
        feed_forward: Gene set of feed-forward connections
        recurrent:    Gene set of recurrent connections

    Public Methods:
        init(rng):                          Add the initial connections
        mutate(rng, id_generator):          Apply all mutation operators
        change_weights(rng):                Perturb every connection weight
        add_connection(rng):                Add a feed-forward or recurrent connection
        add_node(rng, id_generator):        Split a feed-forward connection with a new hidden node
        alter_activation(rng):              Change the activation of a hidden node
        would_form_cycle(start, end):       Whether a feed-forward edge start->end would close a cycle
        cross_in(other, rng):               Create offspring, this genome being the fitter parent
        unroll():                           Equivalent genome without recurrent connections
        clone():                            Independent copy of this genome
        to_dict():                          Convert genome to dictionary representation

    Class Methods:
        from_dict(genome_dict, config): Create a genome from a dictionary description
    """

    def __init__(self, config: Config, id_generator: IdGenerator, rng: random.Random | None = None):
        """
        Initialize a minimal Genome.

        A minimal genome describes a network consisting only of input and output
        nodes (whose number never changes and is retrieved from the configuration)
        and having no connections. Node IDs are issued by 'id_generator', inputs
        first. Input nodes use the 'linear' activation, output nodes an activation
        drawn from the configured output candidates.

        Parameters:
            config:       Stores configuration parameters
            id_generator: Issues the IDs of the new nodes
            rng:          Random number generator
        """
        rng = rng or random.Random()
        self._config = config

        self.inputs      : GeneSet[NodeGene]       = GeneSet()
        self.hidden      : GeneSet[NodeGene]       = GeneSet()
        self.outputs     : GeneSet[NodeGene]       = GeneSet()
        self.feed_forward: GeneSet[ConnectionGene] = GeneSet()
        self.recurrent   : GeneSet[ConnectionGene] = GeneSet()

        for _ in range(config.num_inputs):
            self.inputs.insert(NodeGene(id_generator.next_id(), NodeType.INPUT, "linear"))

        for _ in range(config.num_outputs):
            activation = rng.choice(config.output_activations)
            self.outputs.insert(NodeGene(id_generator.next_id(), NodeType.OUTPUT, activation))

    @classmethod
    def _empty(cls, config: Config) -> 'Genome':
        """
        Create a genome without any genes.
        """
        genome = cls.__new__(cls)
        genome._config      = config
        genome.inputs       = GeneSet()
        genome.hidden       = GeneSet()
        genome.outputs      = GeneSet()
        genome.feed_forward = GeneSet()
        genome.recurrent    = GeneSet()
        return genome

    @property
    def config(self) -> Config:
        return self._config

    def nodes(self) -> list[NodeGene]:
        """
        All node genes: inputs, then hidden, then outputs.
        """
        return list(self.inputs) + list(self.hidden) + list(self.outputs)

    def connections(self) -> list[ConnectionGene]:
        """
        All connection genes: feed-forward, then recurrent.
        """
        return list(self.feed_forward) + list(self.recurrent)

    def __len__(self) -> int:
        """
        The number of connection genes, used as a measure of complexity.
        """
        return len(self.feed_forward) + len(self.recurrent)

    def init(self, rng: random.Random) -> None:
        """
        Add the initial connections of a freshly created genome.

        A random number of input nodes (at least one, unless the random draw is
        exactly zero), starting from a random input, is connected to every output
        node. Weights are drawn uniformly from [-1, 1].
        """
        num_connected = math.ceil(rng.random() * len(self.inputs))
        for input_node in list(self.inputs.iterate_with_random_offset(rng))[:num_connected]:
            for output_node in self.outputs:
                self._insert(self.feed_forward,
                             ConnectionGene(input_node.id, None, output_node.id, rng=rng))

    def mutate(self, rng: random.Random, id_generator: IdGenerator) -> None:
        """
        Apply to the current genome all mutation operations.

        The weights of all connections are always perturbed. Each of the remaining
        mutations occurs independently with the probability given by the configuration:
          + add a connection (a failure to find one is not an error)
          + add a node
          + change the activation of a hidden node
        """
        self.change_weights(rng)

        if rng.random() < self._config.new_connection_probability:
            try:
                self.add_connection(rng)
            except ConnectionNotPossibleError:
                pass

        if rng.random() < self._config.new_node_probability:
            self.add_node(rng, id_generator)

        if rng.random() < self._config.change_activation_probability:
            self.alter_activation(rng)

    def change_weights(self, rng: random.Random) -> None:
        """
        Perturb the weight of every feed-forward and recurrent connection,
        visiting the connections in a random order.
        """
        stdev = self._config.weight_perturbation_stdev
        for gene_set in (self.feed_forward, self.recurrent):
            for conn in rng.sample(list(gene_set), len(gene_set)):
                conn.perturb(rng, stdev)

    def alter_activation(self, rng: random.Random) -> None:
        """
        Replace the activation of a random hidden node by a different one
        from the configured candidates. Nothing changes if the genome has no
        hidden node or if there is no alternative activation.
        """
        node = self.hidden.random(rng)
        if node is None:
            return

        alternatives = [act for act in self._config.hidden_activations if act != node.activation]
        if alternatives:
            self.hidden.replace(NodeGene(node.id, NodeType.HIDDEN, rng.choice(alternatives)))

    def add_node(self, rng: random.Random, id_generator: IdGenerator) -> None:
        """
        Split a random feed-forward connection by adding a new hidden node.

        The connection a->b (weight w) is replaced, functionally, by the path
        a->N (weight 1.0) and N->b (weight w). The original connection stays in
        the genome with weight 0.0. The ID of N comes from the split cache of the
        IdGenerator, so that splitting the same connection in different genomes
        yields the same node; cached IDs already used by a hidden node of this
        genome are skipped.
        """
        # A genome without feed-forward connections has nothing to split.
        split_conn = self.feed_forward.random(rng)
        if split_conn is None:
            return

        new_node_id = next(node_id for node_id in id_generator.cached_id_for_split(split_conn.key)
                           if node_id not in self.hidden)

        new_node = NodeGene(new_node_id, NodeType.HIDDEN, rng.choice(self._config.hidden_activations))

        # First new connection: original_in -> new node (weight = 1.0)
        self._insert(self.feed_forward, ConnectionGene(split_conn.node_in, 1.0, new_node_id))

        # Second new connection: new node -> original_out (weight = old weight)
        self._insert(self.feed_forward, ConnectionGene(new_node_id, split_conn.weight, split_conn.node_out))

        self._insert(self.hidden, new_node)

        # The split connection is kept, but no longer contributes.
        self.feed_forward.replace(ConnectionGene(split_conn.node_in, 0.0, split_conn.node_out))

    def add_connection(self, rng: random.Random) -> None:
        """
        Add a new connection between two existing nodes.

        The connection is recurrent with the configured probability, feed-forward
        otherwise. Connections start at an input or hidden node and end at a
        hidden or output node. Start nodes are tried once each, beginning at a
        random one; for each, the end nodes are scanned in order and the first one
        is accepted which:
         + is not the start node itself
         + is not already connected to the start node (in the chosen set)
         + would not close a cycle (feed-forward connections only)

        Raises:
            ConnectionNotPossibleError: If no start node has an acceptable end node
        """
        is_recurrent = rng.random() < self._config.recurrent_connection_probability
        target    = self.recurrent if is_recurrent else self.feed_forward
        conn_type = ConnectionType.RECURRENT if is_recurrent else ConnectionType.FEED_FORWARD

        start_nodes = list(self.inputs) + list(self.hidden)
        end_nodes   = list(self.hidden) + list(self.outputs)

        offset = int(rng.random() * len(start_nodes))
        for start_node in start_nodes[offset:] + start_nodes[:offset]:
            for end_node in end_nodes:
                if end_node.id == start_node.id:
                    continue
                if (start_node.id, end_node.id) in target:
                    continue
                if not is_recurrent and self.would_form_cycle(start_node.id, end_node.id):
                    continue

                weight = rng.gauss(0.0, self._config.weight_perturbation_stdev)
                self._insert(target, ConnectionGene(start_node.id, weight, end_node.id, conn_type))
                return

        raise ConnectionNotPossibleError("no connection possible")

    def would_form_cycle(self, start: int, end: int) -> bool:
        """
        Check if adding a feed-forward connection start -> end would create a cycle.

        Assumes the feed-forward graph is currently acyclic. Uses a breadth-first
        search to check if 'start' can already be reached from 'end'; recurrent
        connections are not considered.

        Parameters:
            start: proposed start of the new connection
            end:   proposed end   of the new connection

        Returns:
            whether adding the new connection would create a cycle in the network
        """
        adjacency = defaultdict(list)
        for conn in self.feed_forward:
            adjacency[conn.node_in].append(conn.node_out)

        visited = {end}
        queue   = deque([end])
        while queue:
            current = queue.popleft()
            if current == start:
                return True   # found path 'end' -> 'start', would create cycle
            for neighbor in adjacency[current]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)

        return False

    def cross_in(self, other: 'Genome', rng: random.Random) -> 'Genome':
        """
        Perform NEAT crossover between this genome and another to create offspring.

        This genome is treated as the fitter parent: matching genes are inherited
        from either parent at random, disjoint and excess genes only from this
        genome. Hidden nodes, feed-forward and recurrent connections are crossed
        independently; input and output nodes are copied from this genome (both
        parents share them).

        Parameters:
            other: the weaker parent genome
            rng:   random number generator

        Returns:
            New offspring genome
        """
        offspring = Genome._empty(self._config)
        offspring.feed_forward = self.feed_forward.cross_in(other.feed_forward, rng)
        offspring.recurrent    = self.recurrent.cross_in(other.recurrent, rng)
        offspring.hidden       = self.hidden.cross_in(other.hidden, rng)
        offspring.inputs       = self.inputs.copy()
        offspring.outputs      = self.outputs.copy()
        return offspring

    def unroll(self) -> 'Genome':
        """
        Create an equivalent genome without recurrent connections.

        Each distinct source s of a recurrent connection gets an auxiliary output
        node, fed by s with weight 1.0, and an auxiliary input node. Each recurrent
        connection s -> t (weight w) becomes a feed-forward connection from the
        auxiliary input of s to t (weight w). Feeding every auxiliary input with
        the previous value of the matching auxiliary output reproduces the
        one-step delay of the recurrent connections.

        Auxiliary nodes receive negative IDs, which never clash with genome IDs.
        Auxiliary inputs and outputs are appended, in the same order, after the
        genome's own inputs and outputs.

        Returns:
            The unrolled genome
        """
        unrolled = self.clone()
        unrolled.recurrent = GeneSet()

        aux_ids = count(-1, -1)
        aux_input_of: dict[int, int] = {}   # recurrent source ID => auxiliary input ID

        for conn in sorted(self.recurrent, key=lambda c: c.key):
            if conn.node_in not in aux_input_of:
                aux_input_id  = next(aux_ids)
                aux_output_id = next(aux_ids)
                aux_input_of[conn.node_in] = aux_input_id

                unrolled._insert(unrolled.inputs,  NodeGene(aux_input_id,  NodeType.INPUT,  "linear"))
                unrolled._insert(unrolled.outputs, NodeGene(aux_output_id, NodeType.OUTPUT, "linear"))

                # Carries the value of the source into the next evaluation
                unrolled._insert(unrolled.feed_forward, ConnectionGene(conn.node_in, 1.0, aux_output_id))

            unrolled._insert(unrolled.feed_forward,
                             ConnectionGene(aux_input_of[conn.node_in], conn.weight, conn.node_out))

        return unrolled

    def clone(self) -> 'Genome':
        """
        Create an independent copy of this genome (sharing the configuration).
        """
        genome = Genome._empty(self._config)
        genome.inputs       = self.inputs.copy()
        genome.hidden       = self.hidden.copy()
        genome.outputs      = self.outputs.copy()
        genome.feed_forward = self.feed_forward.copy()
        genome.recurrent    = self.recurrent.copy()
        return genome

    def __deepcopy__(self, memo):
        return self.clone()

    @staticmethod
    def _insert(gene_set: GeneSet, gene) -> None:
        """
        Insert a gene already known to be absent from the set.

        Raises:
            RuntimeError: If a gene with the same identity is present
        """
        if not gene_set.insert(gene):
            raise RuntimeError(f"Duplicate gene {gene!r}")

    def to_dict(self) -> dict:
        """
        Convert the genome to a dictionary representation.

        This is the inverse operation of from_dict(), producing
        a dictionary that can be used to reconstruct the genome.

        Returns:
            Dictionary with the following structure:
            {
                "inputs":       [{"id": 0, "activation": "linear"}],
                "hidden":       [{"id": 2, "activation": "relu"}],
                "outputs":      [{"id": 1, "activation": "tanh"}],
                "feed_forward": [{"from": 0, "to": 2, "weight": 1.0}, ...],
                "recurrent":    [{"from": 2, "to": 2, "weight": 0.3}]
            }
        """
        def nodes(gene_set):
            return [{"id": node.id, "activation": node.activation} for node in gene_set]

        def connections(gene_set):
            return [{"from": conn.node_in, "to": conn.node_out, "weight": conn.weight} for conn in gene_set]

        return {
            "inputs"      : nodes(self.inputs),
            "hidden"      : nodes(self.hidden),
            "outputs"     : nodes(self.outputs),
            "feed_forward": connections(self.feed_forward),
            "recurrent"   : connections(self.recurrent)
        }

    @classmethod
    def from_dict(cls, genome_dict: dict, config: Config | None = None) -> 'Genome':
        """
        Create a Genome from a dictionary description (see 'to_dict()').

        The structure is validated: node IDs must be unique, connections must
        refer to existing nodes and must not be duplicated, and the feed-forward
        connections must be acyclic.

        Parameters:
            genome_dict: Dictionary describing the genome structure
            config:      Configuration used by the genome's mutations
                         (a default Config if not given)

        Returns:
            A new Genome object with the specified structure

        Raises:
            ValueError: If the structure is invalid
            KeyError:   If required fields are missing from the dictionary
        """
        genome = cls._empty(config if config is not None else Config())

        node_ids = set()
        for section, gene_set, node_type in (("inputs",  genome.inputs,  NodeType.INPUT),
                                             ("hidden",  genome.hidden,  NodeType.HIDDEN),
                                             ("outputs", genome.outputs, NodeType.OUTPUT)):
            for node_data in genome_dict.get(section, []):
                node_id = node_data["id"]
                if node_id in node_ids:
                    raise ValueError(f"Duplicate node ID {node_id}")
                node_ids.add(node_id)
                gene_set.insert(NodeGene(node_id, node_type, node_data.get("activation", "linear")))

        for section, gene_set, conn_type in (("feed_forward", genome.feed_forward, ConnectionType.FEED_FORWARD),
                                             ("recurrent",    genome.recurrent,    ConnectionType.RECURRENT)):
            for conn_data in genome_dict.get(section, []):
                node_in, node_out = conn_data["from"], conn_data["to"]

                if node_in not in node_ids:
                    raise ValueError(f"Connection references non-existent source node: {node_in}")
                if node_out not in node_ids:
                    raise ValueError(f"Connection references non-existent destination node: {node_out}")
                if conn_type == ConnectionType.FEED_FORWARD and genome.would_form_cycle(node_in, node_out):
                    raise ValueError(f"Connection from {node_in} to {node_out} would create a cycle")

                if not gene_set.insert(ConnectionGene(node_in, conn_data["weight"], node_out, conn_type)):
                    raise ValueError(f"Duplicate connection from {node_in} to {node_out}")

        return genome

    def __eq__(self, other):
        if not isinstance(other, Genome):
            return NotImplemented
        return (self.inputs       == other.inputs       and
                self.hidden       == other.hidden       and
                self.outputs      == other.outputs      and
                self.feed_forward == other.feed_forward and
                self.recurrent    == other.recurrent)

    __hash__ = None

    def __str__(self):
        node_genes_str  = str(self.inputs) + str(self.hidden) + str(self.outputs)
        conn_genes_str  = str(self.feed_forward) + str(self.recurrent)
        return f"Nodes: {node_genes_str}\nConns: {conn_genes_str}"

    def __repr__(self):
        return f"Genome({self.to_dict()!r})"
