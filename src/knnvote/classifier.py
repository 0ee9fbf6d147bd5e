def vote_tally(neighbors, train):
    """
    Signed tally of neighbor labels: label 0 counts -1, label 1 counts +1.
    """
    tally = 0
    for neighbor in neighbors:
        tally += -1 if train[neighbor.index].label == 0 else 1
    return tally


def majority_vote(neighbors, train):
    """
    Reduce the labels of the selected neighbors to one binary label.

    Parameters:
    - neighbors: iterable of Neighbor, indices into train
    - train: sequence of LabeledPoint

    Returns:
    - int, 1 if the tally is >= 0 else 0. An even split therefore
      predicts 1.
    """
    return 1 if vote_tally(neighbors, train) >= 0 else 0
