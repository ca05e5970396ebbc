"""
XOR Problem Implementation for novelneat

This module implements the classic XOR (exclusive OR) problem as a benchmark
for the algorithm. XOR cannot be solved by a network without hidden nodes,
making it a minimal test case for topology-evolving algorithms.

The XOR Problem:
    Input (0, 0) → Output 0
    Input (0, 1) → Output 1
    Input (1, 0) → Output 1
    Input (1, 1) → Output 0

Fitness Function:
    Fitness = 4.0 - Σ(output - target)²

Behavior:
    The vector of the four network outputs. Two networks behave alike when
    they respond alike to the four cases, whatever their topology; novelty
    rewards networks exploring new responses.

Solution:
    A network whose four outputs all round to the expected values.

Classes:
    Trial_XOR: Trial for solving XOR

Usage:
    python trial_XOR.py [num_jobs]
"""

import sys
import autograd.numpy as np  # type: ignore
from pathlib import Path

from novelneat.run.config import Config
from novelneat.phenotype  import Individual
from novelneat.run        import Evaluation, Progress, Trial

class Trial_XOR(Trial):
    """
    Trial for solving the XOR (exclusive OR) problem.

    Implemented Methods:
        _evaluate(individual):        Test network on all 4 XOR cases
        _report_progress(evaluation): Display generation statistics and XOR truth table
        _final_report():              Visualize the evolved network structure
    """

    xor_inputs  = np.array([[0.0, 0.0], [0.0, 1.0], [1.0, 0.0], [1.0, 1.0]])
    xor_outputs = np.array([0.0, 1.0, 1.0, 0.0])

    def _outputs(self, individual: Individual) -> list[float]:
        network = individual.network()
        outputs = []
        for inputs in self.xor_inputs:
            network.reset()
            outputs.append(network.forward_pass(inputs)[0])
        return outputs

    def _evaluate(self, individual: Individual) -> Progress:
        """
        Evaluate an individual on the four XOR cases.

        Parameters:
            individual: The individual to evaluate

        Returns:
            Fitness and behavior, marked as a solution if all cases are right
        """
        outputs  = np.array(self._outputs(individual))
        errors   = outputs - self.xor_outputs
        progress = Progress(4.0 - np.sum(errors ** 2), outputs)

        if np.all(np.round(outputs) == self.xor_outputs):
            return progress.solved(individual)
        return progress

    def _report_progress(self, evaluation: Evaluation):
        """
        Print a report describing the current generation.
        """
        if evaluation.is_solution or evaluation.statistics.num_generation % 10 != 0:
            return

        stats = evaluation.statistics
        best  = stats.population.top_performer

        s  = f"===============\n"
        s += f"GENERATION {stats.num_generation:04d}\n"
        s += f"{stats.population}\n"
        s += '\n'
        s += str(best)
        s += '\n\n'

        s += "input         output   target  error\n"
        s += "------------------------------------\n"
        for inputs, output, target in zip(self.xor_inputs, self._outputs(best), self.xor_outputs):
            s += f"{inputs.tolist()} -> {output:.4f}    {target}   {abs(output - target):.4f}\n"

        print(s)

    def _final_report(self):
        """
        Display results at the end of the trial.
        """
        super()._final_report()
        if self.failed:
            return

        try:
            self.solution.network().visualize()
            print("Network visualization saved as 'Digraph.gv.pdf'")
        except Exception as e:
            print(f"Could not visualize network: {e}")

if __name__ == "__main__":
    num_jobs = int(sys.argv[1]) if len(sys.argv) > 1 else 1
    config   = Config(str(Path(__file__).parent / "config_xor.ini"))
    Trial_XOR(config).run(num_jobs)
