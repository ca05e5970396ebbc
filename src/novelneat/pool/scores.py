"""
Scores Module

This module implements the three-stage transform applied to the scalar scores
of individuals, identically for fitness and for novelty:

    raw        -> as supplied by the evaluator (fitness) or the novelty engine (novelty)
    shifted    =  raw - baseline, the baseline being the population minimum
    normalized =  shifted / max(normalize_with, 1.0), where 'normalize_with' is
                  the largest shifted value in the population

The floor of 1.0 prevents blowing up small differences when the spread of the
population's scores is close to zero.

Classes:
    Score:           A raw score together with its shifted and normalized values
    FitnessScore:    Score derived from the fitness reported by the evaluator
    NoveltyScore:    Score derived from the novelty of an individual's behavior
    ScoreStatistics: Population-wide minimum, average and maximum of a score
"""

from typing import Sequence

class Score:
    """
    A score at the three stages of the transform.

    Public Attributes:
        raw:        The untransformed value
        shifted:    raw - baseline
        normalized: shifted / max(normalize_with, 1.0)
    """

    def __init__(self, raw: float, baseline: float, normalize_with: float):
        """
        Parameters:
            raw:            The untransformed value
            baseline:       Value subtracted from 'raw'
            normalize_with: Value dividing the shifted score (floored at 1.0)
        """
        self.raw       : float = float(raw)
        self.shifted   : float = self.raw - baseline
        self.normalized: float = self.shifted / max(normalize_with, 1.0)

    def to_dict(self) -> dict:
        return {"raw": self.raw, "shifted": self.shifted, "normalized": self.normalized}

    @classmethod
    def from_dict(cls, score_dict: dict) -> 'Score':
        score = cls.__new__(cls)
        score.raw        = float(score_dict["raw"])
        score.shifted    = float(score_dict["shifted"])
        score.normalized = float(score_dict["normalized"])
        return score

    def __eq__(self, other):
        if not isinstance(other, Score):
            return NotImplemented
        return (type(self) is type(other) and
                (self.raw, self.shifted, self.normalized) == (other.raw, other.shifted, other.normalized))

    __hash__ = None

    def __repr__(self):
        return (f"{type(self).__name__}(raw={self.raw:.4f}, shifted={self.shifted:.4f}, "
                f"normalized={self.normalized:.4f})")

class FitnessScore(Score):
    pass

class NoveltyScore(Score):
    pass

class ScoreStatistics:
    """
    Minimum, average and maximum of a score across a population, at each of
    the three stages of the transform.

    Public Attributes:
        raw_minimum, raw_average, raw_maximum
        shifted_minimum, shifted_average, shifted_maximum
        normalized_minimum, normalized_average, normalized_maximum
        baseline:       The population minimum raw value
        normalize_with: The population maximum shifted value

    Class Methods:
        from_raw(raw_values, score_class): Statistics and per-value scores for a population
    """

    def __init__(self):
        self.raw_minimum       : float = 0.0
        self.raw_average       : float = 0.0
        self.raw_maximum       : float = 0.0
        self.shifted_minimum   : float = 0.0
        self.shifted_average   : float = 0.0
        self.shifted_maximum   : float = 0.0
        self.normalized_minimum: float = 0.0
        self.normalized_average: float = 0.0
        self.normalized_maximum: float = 0.0
        self.baseline          : float = 0.0
        self.normalize_with    : float = 0.0

    @classmethod
    def from_raw(cls, raw_values: Sequence[float], score_class: type = Score) -> tuple['ScoreStatistics', list[Score]]:
        """
        Derive the statistics of a population from its raw values and build
        the score of every value.

        The baseline is the minimum raw value and the value normalized by is
        the maximum shifted value (so that, with a spread of at least 1.0, the
        normalized values span [0, 1]).

        Parameters:
            raw_values:  The raw values, one per scored individual
            score_class: The Score (sub)class to instantiate

        Returns:
            The statistics, and the scores in the order of 'raw_values'
            (an empty list, with all statistics zero, if there are no values)
        """
        stats = cls()
        if not raw_values:
            return stats, []

        raw_minimum = min(raw_values)
        raw_maximum = max(raw_values)
        raw_average = sum(raw_values) / len(raw_values)

        stats.baseline       = raw_minimum
        stats.normalize_with = raw_maximum - raw_minimum

        minimum = Score(raw_minimum, stats.baseline, stats.normalize_with)
        average = Score(raw_average, stats.baseline, stats.normalize_with)
        maximum = Score(raw_maximum, stats.baseline, stats.normalize_with)

        stats.raw_minimum,        stats.raw_average,        stats.raw_maximum        = minimum.raw,        average.raw,        maximum.raw
        stats.shifted_minimum,    stats.shifted_average,    stats.shifted_maximum    = minimum.shifted,    average.shifted,    maximum.shifted
        stats.normalized_minimum, stats.normalized_average, stats.normalized_maximum = minimum.normalized, average.normalized, maximum.normalized

        scores = [score_class(raw, stats.baseline, stats.normalize_with) for raw in raw_values]
        return stats, scores

    def __repr__(self):
        return (f"ScoreStatistics(raw=[{self.raw_minimum:.4f}, {self.raw_average:.4f}, {self.raw_maximum:.4f}], "
                f"normalized=[{self.normalized_minimum:.4f}, {self.normalized_average:.4f}, {self.normalized_maximum:.4f}])")
