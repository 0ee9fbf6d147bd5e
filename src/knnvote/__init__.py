"""
knnvote - k-nearest-neighbor binary classification

Classifies unlabeled feature vectors by majority vote among their k nearest
labeled neighbors under Euclidean distance, using a bounded max-heap for
neighbor selection.
"""

__version__ = "0.1.0"
__author__ = "knnvote developers"

from .classifier import majority_vote, vote_tally
from .distance import euclidean_distance
from .errors import InsufficientTrainingData, InvalidArgument, InvalidK
from .points import LabeledPoint, Neighbor, PredictedPoint
from .predictor import classify_all, predict_one
from .selector import NeighborHeap, select_k_nearest, validate_k

__all__ = [
    "InsufficientTrainingData",
    "InvalidArgument",
    "InvalidK",
    "LabeledPoint",
    "Neighbor",
    "NeighborHeap",
    "PredictedPoint",
    "classify_all",
    "euclidean_distance",
    "majority_vote",
    "predict_one",
    "select_k_nearest",
    "validate_k",
    "vote_tally",
]
