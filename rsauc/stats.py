"""Statistics for binary classifiers

Available Functions:
- midrank: tie aware rank of each sample in the combined sample
- u_statistic: Mann-Whitney U statistic of the positive class scores
- auc: compute AUC from sample scores and class labels by rank sums
- auc_pairwise: compute AUC by comparing every positive, negative pair
"""

import logging

import numpy as np
from . import validate as val

logger = logging.getLogger(__name__)


def _doubled_midrank(x):
    """Twice the midrank of each element of x, as int64.

    A tie group occupying the sorted (1-based) positions i, i+1, ..., j
    receives the midrank (i + j) / 2, hence twice the midrank is the
    integer i + j.

    Args:
        x: ((N,) ndarray) of values, ties allowed

    Returns:
        ((N,) ndarray) of int64 doubled midranks
    """
    N = x.size
    order = np.argsort(x, kind="mergesort")
    xs = x[order]

    # first sorted position (0-based) of each tie group, and one past its last
    starts = np.flatnonzero(np.r_[True, xs[1:] != xs[:-1]]).astype(np.int64)
    ends = np.r_[starts[1:], N].astype(np.int64)

    r2 = np.empty(N, dtype=np.int64)
    r2[order] = np.repeat(starts + 1 + ends, ends - starts)
    return r2

def midrank(x):
    """Rank samples, assigning tied values the average of their ranks.

    rank(x_k) = #(x < x_k) + 1 + #(x == x_k, excluding x_k) / 2

    Computed from a single sort of x, so O(N log N).

    Args:
        x: ((N,) array-like) of values, ties allowed

    Returns:
        ((N,) ndarray) of float ranks on the interval [1, N]
    """
    x = np.asarray(x)
    if x.ndim != 1:
        raise val.InvalidInput("x must be a 1-d array.")
    return _doubled_midrank(x) / 2

def _sample(scores, labels):
    """Convert to ndarray, validate, and count each class.

    Counts are python int so that products of counts can not overflow.

    Returns:
        s: ((N,) ndarray) scores
        y: ((N,) ndarray) labels
        num_pos: (int) number of samples with label 1
        num_neg: (int) number of samples with label 0
    """
    try:
        s = np.asarray(scores)
        y = np.asarray(labels)
    except (TypeError, ValueError) as err:
        raise val.InvalidInput("Scores and labels must be 1-d arrays of "
                               "numbers.") from err

    val.validate_sample_data(s, y)

    num_pos = int(np.count_nonzero(y == 1))
    num_neg = s.size - num_pos

    logger.debug("sample of %d scores, %d positive and %d negative",
                 s.size, num_pos, num_neg)
    return s, y, num_pos, num_neg

def _doubled_u(s, y, num_pos):
    """Twice the Mann-Whitney U statistic of the positive class, exactly."""
    rank_sum2 = int(np.sum(_doubled_midrank(s)[y == 1], dtype=np.int64))
    return rank_sum2 - num_pos * (num_pos + 1)

def u_statistic(scores, labels):
    """Mann-Whitney U statistic of the positive class.

    U = (sum of positive class midranks) - N1 (N1 + 1) / 2

    equal to the number of (positive, negative) sample pairs in which the
    positive sample has the higher score, with ties counted as one half.

    Args:
        scores: ((N,) array-like) of real valued sample scores
        labels: ((N,) array-like) of sample class labels [0, 1]

    Returns:
        (float) on the interval [0, N1 * N0]

    Raises:
        InvalidInput: see rsauc.validate.validate_sample_data
    """
    s, y, num_pos, _ = _sample(scores, labels)
    return _doubled_u(s, y, num_pos) / 2

def auc(scores, labels):
    """Given sample scores and class labels compute AUC by rank sums.

    The AUC is the probability that a randomly drawn positive class score
    exceeds a randomly drawn negative class score, ties counted as one half.
    By the Mann-Whitney identity

    AUC = (S1 - N1 (N1 + 1) / 2) / (N1 N0)

    where S1 is the sum of midranks of the positive class samples, and N1, N0
    are the number of positive and negative class samples.  Higher scores
    are assumed to indicate the positive class.

    Rank sums are accumulated exactly as doubled midranks in int64, and class
    counts are python int, so that no intermediate overflows for up to
    rsauc.validate.MAX_OBSERVATIONS samples.

    Args:
        scores: ((N,) array-like) of real valued sample scores, ties allowed
        labels: ((N,) array-like) of sample class labels [0, 1], both
            classes present

    Returns:
        (float) on the interval [0, 1] representing the AUC

    Raises:
        InvalidInput: if scores and labels differ in length, labels are not
            binary, only one class is present, or scores are not finite
    """
    s, y, num_pos, num_neg = _sample(scores, labels)
    return _doubled_u(s, y, num_pos) / (2 * num_pos * num_neg)

def auc_pairwise(scores, labels):
    """Compute AUC by comparing each positive with each negative sample.

    Reference O(N1 N0) implementation of auc, useful for verification on
    small samples.

    Args:
        scores: ((N,) array-like) of real valued sample scores, ties allowed
        labels: ((N,) array-like) of sample class labels [0, 1]

    Returns:
        (float) on the interval [0, 1] representing the AUC
    """
    s, y, num_pos, num_neg = _sample(scores, labels)

    neg = s[y == 0]
    wins2 = 0
    for p in s[y == 1]:
        wins2 += 2 * int(np.count_nonzero(neg < p))
        wins2 += int(np.count_nonzero(neg == p))

    return wins2 / (2 * num_pos * num_neg)
