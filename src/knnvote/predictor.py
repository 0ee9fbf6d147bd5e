import logging
from typing import List, Sequence

from .classifier import majority_vote
from .points import PredictedPoint, feature_vector
from .selector import select_k_nearest, validate_k

logger = logging.getLogger(__name__)


def predict_one(train: Sequence, query, k: int, d: int) -> int:
    """Predict the label of a single query point."""
    neighbors = select_k_nearest(train, query, k, d)
    return majority_vote(neighbors, train)


def classify_all(train: Sequence, test: Sequence, k: int, d: int) -> List[PredictedPoint]:
    """
    Classify every test point against the training set.

    Parameters:
    - train: sequence of LabeledPoint
    - test: sequence of feature vectors
    - k: int, number of neighbors that vote
    - d: int, dimensionality

    Returns:
    - list of PredictedPoint, in the same order as test

    Raises:
    - InvalidK / InsufficientTrainingData before any point is classified
    """
    # bad k is a configuration error, reject it once for the whole batch
    validate_k(k, len(train))
    logger.info(f"Classifying {len(test)} test points against {len(train)} training points (k={k}, d={d})")

    predictions = []
    for i, point in enumerate(test):
        label = predict_one(train, point, k, d)
        logger.debug(f"Test point {i}: predicted label {label}")
        predictions.append(PredictedPoint(feature_vector(point), label))

    ones = sum(p.label for p in predictions)
    logger.info(f"Predicted {ones} points as 1 and {len(predictions) - ones} as 0")
    return predictions
