import configparser
import os
from novelneat.activations import activations

class Config:

    @staticmethod
    def _parse_activation_options(raw_options):
        """
        Parse a set of candidate activation functions from string to list.

        Parameters:
            raw_options: Either "all", a comma-separated list, or already a list

        Returns:
            List of activation function names
        """
        # If already a list, validate and return it
        if isinstance(raw_options, (list, tuple)):
            parsed = list(raw_options)
        elif raw_options == 'all':
            return list(activations.keys())
        else:
            # Parse comma-separated list
            parsed = [opt.strip() for opt in raw_options.split(',') if opt.strip()]

        for opt in parsed:
            if opt not in activations:
                raise ValueError(f"Invalid activation function '{opt}'")
        return parsed

    def __init__(self, config_file: str | None = None):
        """
        Initialize Config by parsing an INI file, or create a default Config.

        Parameters:
            config_file: Path to the INI configuration file.
                         If None, creates a Config holding the built-in defaults,
                         which can then be adjusted by setting attributes.
        """

        # Default config for testing/manual setup
        if config_file is None:
            self.seed                      = 42
            self.population_size           = 100
            self.survival_rate             = 0.5
            self.num_inputs                = 1
            self.num_outputs               = 1
            self.novelty_nearest_neighbors = 10

            self.output_activations = ['tanh']
            self.hidden_activations = ['linear', 'sigmoid', 'tanh', 'gaussian', 'step',
                                       'sine', 'cosine', 'inverse', 'absolute', 'relu']

            self.new_node_probability             = 0.05
            self.new_connection_probability       = 0.1
            self.recurrent_connection_probability = 0.3
            self.change_activation_probability    = 0.05
            self.weight_perturbation_stdev        = 1.0

            self.max_number_generations = None
            return

        if not os.path.exists(config_file):
            raise FileNotFoundError(f"Configuration file '{config_file}' not found")

        parser = configparser.ConfigParser()
        parser.read(config_file)

        # Sentinel for missing default values
        _NO_DEFAULT = object()

        # Helper function to safely parse values
        def get_value(section, key, value_type, default=_NO_DEFAULT):
            try:
                raw_value = parser.get(section, key)
                if raw_value.lower() == 'none':
                    return None
                if value_type == int:
                    return parser.getint(section, key)
                elif value_type == float:
                    return parser.getfloat(section, key)
                elif value_type == bool:
                    return parser.getboolean(section, key)
                elif value_type == str:
                    return raw_value
            except (configparser.NoSectionError, configparser.NoOptionError):
                if default is not _NO_DEFAULT:
                    return default
                raise

        # [SETUP]

        # Seed of the random number generator driving a run.
        self.seed = get_value('SETUP', 'seed', int)

        # The number of individuals in each generation.
        self.population_size = get_value('SETUP', 'population_size', int)

        # The fraction of the population (rounded up) surviving each generation.
        self.survival_rate = get_value('SETUP', 'survival_rate', float)

        # The number of input nodes, through which the network receives inputs.
        self.num_inputs = get_value('SETUP', 'num_inputs', int)

        # The number of output nodes, to which the network delivers outputs.
        self.num_outputs = get_value('SETUP', 'num_outputs', int)

        # The number of nearest neighbours (in behaviour space) averaged
        # over when calculating the novelty of an individual.
        self.novelty_nearest_neighbors = get_value('SETUP', 'novelty_nearest_neighbors', int)

        # [ACTIVATIONS]

        # Candidate activation functions for output nodes.
        # Options: "all" or a comma-separated list (see 'basic_activations.py').
        raw_options = get_value('ACTIVATIONS', 'output_activations', str, default='tanh')
        self.output_activations = self._parse_activation_options(raw_options)

        # Candidate activation functions for hidden nodes, used both when
        # creating a node and when mutating its activation.
        raw_options = get_value('ACTIVATIONS', 'hidden_activations', str, default='all')
        self.hidden_activations = self._parse_activation_options(raw_options)

        # [MUTATION]

        # The probability that mutation will add a new node by splitting
        # an existing feed-forward connection.
        self.new_node_probability = get_value('MUTATION', 'new_node_probability', float)

        # The probability that mutation will add a connection between existing nodes.
        self.new_connection_probability = get_value('MUTATION', 'new_connection_probability', float)

        # The probability that a newly added connection is recurrent.
        self.recurrent_connection_probability = get_value('MUTATION', 'recurrent_connection_probability', float)

        # The probability that mutation will change the activation function of a hidden node.
        self.change_activation_probability = get_value('MUTATION', 'change_activation_probability', float)

        # The standard deviation of the zero-centered normal distribution
        # from which a 'weight' perturbation value is drawn.
        self.weight_perturbation_stdev = get_value('MUTATION', 'weight_perturbation_stdev', float)

        # [TERMINATION]

        # The number of generations after which to stop the run.
        # Use "None" to run until a solution is found.
        self.max_number_generations = get_value('TERMINATION', 'max_number_generations', int, default=None)

    def __setattr__(self, name, value):
        """
        Override 'setattr' to automatically parse activation candidates when set.
        This allows users to write config.hidden_activations = "all" and have it
        automatically converted to the list of activation names.
        """
        if name in ('output_activations', 'hidden_activations'):
            value = self._parse_activation_options(value)
        super().__setattr__(name, value)
