import numpy as np


def euclidean_distance(a, b, d):
    """
    Euclidean distance over the first d features of two vectors.

    Parameters:
    - a, b: sequences (tuple, list or numpy array) with at least d components
    - d: int, number of leading components to compare

    Returns:
    - float, non-negative distance
    """
    # anything past index d (e.g. a trailing label) is ignored
    diff = np.asarray(a[:d], dtype=float) - np.asarray(b[:d], dtype=float)
    return float(np.sqrt(np.sum(diff * diff)))
