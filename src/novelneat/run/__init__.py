"""
NovelNEAT Run Package

This package implements the execution of evolutionary runs.

A trial represents a complete evolutionary run, managing the population
through generations until a solution is found or the maximum number of
generations is reached.

Modules:
    config:   Configuration management
    progress: The result of evaluating one individual
    trial:    Driver of an evolutionary run

Exported Classes:
    Config:     Configuration parameters
    Progress:   Fitness and/or behavior reported by the evaluation of an individual
    Trial:      One independent run, with joblib parallelization
    Evaluation: Outcome of one generation of a trial
    Statistics: Statistics of one generation of a trial
"""

from novelneat.run.config   import Config
from novelneat.run.progress import Progress
from novelneat.run.trial    import Evaluation, Statistics, Trial

__all__ = ['Config', 'Progress', 'Trial', 'Evaluation', 'Statistics']
