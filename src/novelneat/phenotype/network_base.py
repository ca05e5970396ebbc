"""
Network Base Module

This module defines the abstract base class for executable networks built
from a genome. It provides a common interface and shared functionality:
topological sorting and visualization.

Classes:
    NetworkBase: Abstract base class defining the network interface
"""

from abc         import ABC, abstractmethod
from collections import deque, defaultdict
from typing      import Any, TYPE_CHECKING
import graphviz  # type: ignore

from novelneat.activations import activation_codes

if TYPE_CHECKING:
    from novelneat.genotype import Genome

class NetworkBase(ABC):
    """
    Abstract base class for network implementations.

    Networks are evaluated from the feed-forward structure of a genome. Genomes
    with recurrent connections are first unrolled (see 'Genome.unroll()'), so
    the structure an implementation works on is always acyclic.

    The base class provides:
        - Common initialization
        - Topological sort algorithm
        - Standard network introspection properties
        - Network visualization

    Public Properties (available to all subclasses):
        number_nodes:                 Total number of nodes in the genome
        number_nodes_hidden:          Number of hidden nodes in the genome
        number_connections:           Total number of connections in the genome
        number_connections_recurrent: Number of recurrent connections in the genome

    Public Methods (must be implemented by subclasses):
        forward_pass(inputs): Process inputs through the network and return outputs
    """

    def __init__(self, genome: 'Genome'):
        """
        Initialize common network attributes from genome.

        Parameters:
            genome: The Genome encoding the network structure
        """
        self._genome       = genome
        self._unrolled     = genome.unroll()
        self._input_ids    = [gene.id for gene in genome.inputs]
        self._output_ids   = [gene.id for gene in genome.outputs]
        self._sorted_nodes = self._topological_sort(self._unrolled)

    @property
    def number_nodes(self) -> int:
        """Total number of nodes in the network."""
        return len(self._genome.nodes())

    @property
    def number_nodes_hidden(self) -> int:
        """Number of hidden nodes in the network."""
        return len(self._genome.hidden)

    @property
    def number_connections(self) -> int:
        """Total number of connections in the network."""
        return len(self._genome)

    @property
    def number_connections_recurrent(self) -> int:
        """Number of recurrent connections in the network."""
        return len(self._genome.recurrent)

    @abstractmethod
    def forward_pass(self, inputs: Any) -> Any:
        """
        Perform a complete forward pass through the network.

        Parameters:
            inputs: Network inputs (implementation-specific type)

        Returns:
            Network outputs (implementation-specific type)
        """
        pass

    @staticmethod
    def _topological_sort(genome: 'Genome') -> list[int]:
        """
        Perform topological sort using Kahn's algorithm.

        Sorts the network nodes in topological order, ensuring that all
        dependencies (incoming connections) are processed before each node.
        Only feed-forward connections are considered; they form a DAG.

        Parameters:
            genome: The Genome containing node and connection genes

        Returns:
            List of node IDs in topological order
        """
        node_ids = [node.id for node in genome.nodes()]

        adjacency = defaultdict(list)
        in_degree = {node_id: 0 for node_id in node_ids}

        for conn in genome.feed_forward:
            adjacency[conn.node_in].append(conn.node_out)
            in_degree[conn.node_out] += 1

        # Start with nodes that have no incoming edges
        queue = deque([node_id for node_id, degree in in_degree.items() if degree == 0])
        result = []

        while queue:
            node_id = queue.popleft()
            result.append(node_id)

            for neighbor in adjacency[node_id]:
                in_degree[neighbor] -= 1
                if in_degree[neighbor] == 0:
                    queue.append(neighbor)

        return result

    def visualize(self, view: bool = True) -> graphviz.Digraph:
        """
        Visualize the network using Graphviz.

        Feed-forward connections are drawn in black, recurrent ones dashed in red.
        Connections with zero weight (left behind by node additions) are drawn in
        light gray.

        Parameters:
            view: If True, automatically open the visualization after rendering

        Returns:
            graphviz.Digraph object representing the network
        """
        dot = graphviz.Digraph()
        dot.attr(rankdir='LR')  # Left to right layout
        dot.attr('graph', labelloc='t')

        base_attrs = {'color': 'black', 'style': 'filled', 'shape': 'circle', 'penwidth': '0.5',
                      'fontsize': '5', 'width': '0.5', 'height': '0.5', 'fixedsize': 'true'}
        fill_color = {'INPUT': 'lightgrey', 'HIDDEN': 'lightblue', 'OUTPUT': 'white'}

        clusters = (('cluster_input',  'source', 'Inputs',  self._genome.inputs),
                    ('cluster_hidden', 'same',   'Hidden',  self._genome.hidden),
                    ('cluster_output', 'sink',   'Outputs', self._genome.outputs))

        for name, rank, label, gene_set in clusters:
            if not gene_set:
                continue
            with dot.subgraph(name=name) as cluster:
                cluster.attr(rank=rank, label=label, style='invisible')
                for node_gene in sorted(gene_set, key=lambda n: n.id):
                    attrs = dict(base_attrs, fillcolor=fill_color[node_gene.type.name])
                    attrs['label'] = f"id={node_gene.id}\\n{activation_codes[node_gene.activation]}"
                    cluster.node(str(node_gene.id), **attrs)

        for conn in self._genome.connections():
            edge_attrs = {
                'label'     : f"w={conn.weight:.2f}",
                'fontsize'  : '5',
                'penwidth'  : '0.5',
                'arrowsize' : '0.5',
                'labelfloat': 'false'
            }

            if conn.type.name == 'RECURRENT':
                edge_attrs['color'] = 'red'
                edge_attrs['style'] = 'dashed'
            elif conn.weight == 0.0:
                edge_attrs['color'] = 'lightgray'
            else:
                edge_attrs['color'] = 'black'

            dot.edge(str(conn.node_in), str(conn.node_out), **edge_attrs)

        if view:
            dot.view(cleanup=True)

        return dot
