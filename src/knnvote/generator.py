"""
Synthetic dataset generation.

Features are drawn uniformly from [0.0, 1.0) and training labels uniformly
from {0, 1}. All randomness goes through a numpy Generator so callers (and
tests) can make a run reproducible by passing a seed.
"""

import logging
from typing import List, Optional

import numpy as np

from .points import FeatureVector, LabeledPoint, feature_vector

logger = logging.getLogger(__name__)


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Return a numpy Generator; entropy seeded when seed is None."""
    return np.random.default_rng(seed)


def generate_points(n: int, d: int, rng: np.random.Generator, labeled: bool = False) -> list:
    """
    Generate n points of dimensionality d.

    Parameters:
    - n: int, number of points
    - d: int, number of features per point
    - rng: numpy Generator
    - labeled: bool, attach a random 0/1 label to each point

    Returns:
    - list of LabeledPoint if labeled, else list of feature tuples
    """
    features = rng.random((n, d))
    if not labeled:
        points = [feature_vector(row) for row in features]
    else:
        labels = rng.integers(0, 2, size=n)
        points = [LabeledPoint(feature_vector(row), int(label)) for row, label in zip(features, labels)]

    logger.debug(f"Generated {n} {'labeled' if labeled else 'unlabeled'} points with d={d}")
    return points


def generate_training_set(n: int, d: int, rng: np.random.Generator) -> List[LabeledPoint]:
    return generate_points(n, d, rng, labeled=True)


def generate_test_set(n: int, d: int, rng: np.random.Generator) -> List[FeatureVector]:
    return generate_points(n, d, rng, labeled=False)
