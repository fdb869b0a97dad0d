"""Sample score data sets from Gaussian distributions.

The data consist of an (N,) ndarray of sample scores and an (N,) ndarray of
true sample labels.  Scores of each class are drawn from a unit variance
Gaussian, and the distance between the class means is chosen so that the
expected AUC equals a specified value.

Available Functions:
- data_set: generate a synthetic data set composed of sample
    scores and class labels
"""

import logging

import numpy as np
from scipy.special import ndtri     # inverse standard normal cumulative

logger = logging.getLogger(__name__)


def _auc_2_delta(auc, v):
    """Compute the difference of class conditioned means (delta) from the AUC.

    According to Marzban, reference below, delta is related to the AUC by

    delta = \\sqrt{\\sigma_0^2 + \\sigma_1^2} \\Phi^{-1} (AUC)

    with \\sigma_y^2 begin the conditional variance given y and \\Phi the
    standard normal cumulative distribution.

    Args:
        auc: (float) [0, 1]
        v: ((2) tuple) of (\\sigma_0^2, \\sigma_1^2)

    Returns:
        (float) E[s|y = 1] - E[s|y = 0]

    Reference:
        Marzban, "The ROC Curve and the Area under It as Performance Measures",
            Weather and Forecasting, 2004.
    """
    if auc < 0 or auc > 1:
        raise ValueError("AUC is defined on interval [0,1].")
    if len(v) != 2:
        raise ValueError(("Must supply len 2 tuple with class conditioned "
                        "variances"))
    if v[0] < 0 or v[1] < 0:
        raise ValueError("By definition, variances must be greater than 0.")
    return np.sqrt(v[0] + v[1]) * ndtri(auc)

def data_set(auc, prevalence, N, seed=None):
    """Sample scores and sample class labels.

    Negative class scores are drawn from N(0, 1) and positive class scores
    from N(delta, 1), where delta is computed from the specified AUC.  The
    first int(N * prevalence) samples are from the positive class.

    Args:
        auc: (float) on the interval (0, 1)
        prevalence: (float) number of positive class / number samples (0, 1)
        N: (int) > 1
        seed: any seed compatible with np.random.default_rng

    Returns:
        s: ((N,) ndarray) real valued sample scores
        y: ((N,) ndarray) binary [0,1] integer sample class labels
    """
    if auc <= 0 or auc >= 1:
        raise ValueError("Finite scores require AUC in interval (0,1).")
    if prevalence <= 0 or prevalence >= 1:
        raise ValueError("Prevalence must by in interval (0,1).")
    if np.mod(N, 1) != 0 or N < 2:
        raise ValueError("N must be an integer greater than 1.")

    N = int(N)
    N1 = int(N * prevalence)

    if N1 < 1 or N1 == N:
        raise ValueError("N and prevalence must give samples of both classes.")

    delta = _auc_2_delta(auc, (1, 1))

    # create random number generator object accoring to seed
    rng = np.random.default_rng(seed)

    s = np.hstack([rng.normal(loc=delta, size=N1),
                   rng.normal(size=N-N1)])

    # Construct the label array
    y = np.zeros(N, dtype=int)
    y[:N1] = 1

    logger.debug("sampled %d scores, %d positive, class mean difference %g",
                 N, N1, delta)
    return s, y
