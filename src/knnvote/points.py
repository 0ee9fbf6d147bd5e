"""
Point types shared by the generator, the engine and the presentation layer.

A feature vector is a plain tuple of floats. Labels are stored next to the
features rather than inside them; ``as_row`` rebuilds the flat
"features followed by label" row used for printing and export.
"""

from typing import NamedTuple, Tuple

FeatureVector = Tuple[float, ...]


def point_row(point) -> tuple:
    """Features of a labeled or predicted point followed by its label."""
    return tuple(point.features) + (point.label,)


class LabeledPoint(NamedTuple):
    features: FeatureVector
    label: int

    as_row = point_row


class PredictedPoint(NamedTuple):
    """A test point together with the label predicted for it."""

    features: FeatureVector
    label: int

    as_row = point_row


class Neighbor(NamedTuple):
    """(distance, training index) pair; lives only for one query."""

    distance: float
    index: int


def feature_vector(values) -> FeatureVector:
    """Freeze any numeric sequence into a FeatureVector."""
    return tuple(float(v) for v in values)
