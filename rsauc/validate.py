"""Tools for determining whether data follow the score and label convention.

Available Classes:
- InvalidInput: raised for data that can not be scored

Available Functions:
- validate_score_data
- validate_label_data
- validate_sample_data
"""
import numpy as np

# largest number of samples for which rank sums are exact in int64
MAX_OBSERVATIONS = 10**9


class InvalidInput(ValueError):
    """Scores or labels that violate the input convention."""


def _is_numeric(x):
    """Is the ndarray x of boolean, integer or floating point dtype?"""
    return (np.issubdtype(x.dtype, np.bool_) or
            np.issubdtype(x.dtype, np.integer) or
            np.issubdtype(x.dtype, np.floating))

def _is_disjoint(x, y):
    """Are the ndarray x and y disjoint?"""
    if x.ndim != 1 or y.ndim != 1:
        raise InvalidInput("Inputs must be 1-d ndarrays")

    test_val = np.setdiff1d(x, y).size
    test_val += np.setdiff1d(y, x).size

    return test_val == 0

def validate_score_data(s):
    """Test whether data are a 1-d ndarray of finite real scores.

    Boolean scores are accepted and ordered False < True, as labels are.

    Args:
        s : ((N,) ndarray) sample scores, ties allowed

    Raises:
        InvalidInput: if s is not an ndarray, is empty, is not 1-d,
            or contains values that are not finite real numbers
    """
    if not isinstance(s, np.ndarray):
        raise InvalidInput("Scores must be an ndarray.")

    if s.size == 0:
        raise InvalidInput("Input data is empty")

    if s.ndim != 1:
        raise InvalidInput("Scores must be 1-dimensional, i.e. have shape (N,)")

    if not _is_numeric(s):
        raise InvalidInput("Scores must be real numbers.")

    if not np.isfinite(s).all():
        raise InvalidInput("Scores must be finite.")

def validate_label_data(y):
    """Test if labels satisfy convention.

    Both classes must be represented, otherwise the AUC is undefined.

    Args:
        y : (N,) ndarray of values

    Raises:
        InvalidInput: if y is not ndarray
        InvalidInput: if not binary (0, 1) values, or only one class present
    """
    if not isinstance(y, np.ndarray):
        raise InvalidInput("Input must be ndarray.")

    if y.ndim != 1:
        raise InvalidInput("Labels be 1-dimensional, i.e. have shape (N,)")

    if not _is_numeric(y):
        raise InvalidInput("Label data must be numeric (0,1) values.")

    true_y = np.array([0,1])

    if not _is_disjoint(true_y, y):
        raise InvalidInput(("Label data must be binary (0,1) values with "
                            "both classes present."))

def validate_sample_data(s, y):
    """Test scores and labels individually and as aligned pairs.

    Args:
        s : ((N,) ndarray) sample scores
        y : ((N,) ndarray) sample class labels [0, 1]

    Raises:
        InvalidInput: see validate_score_data and validate_label_data
        InvalidInput: if s and y differ in length
        InvalidInput: if there are more than MAX_OBSERVATIONS samples
    """
    validate_score_data(s)
    validate_label_data(y)

    if s.shape != y.shape:
        raise InvalidInput(("Scores and labels must have the same length, "
                            "got {} and {}.").format(s.size, y.size))

    if s.size > MAX_OBSERVATIONS:
        raise InvalidInput(("At most {} samples are supported, "
                            "got {}.").format(MAX_OBSERVATIONS, s.size))
