import numpy as np


#######################################################################
#                             Assertions                              #
#######################################################################


def is_symmetric(X):
    """Check that an array `X` is symmetric along its main diagonal"""
    return np.allclose(X, X.T)


def is_nonnegative(X):
    """True if every entry of `X` is >= 0. NaNs count as violations."""
    X = np.asarray(X)
    return bool(np.all(X >= 0))


def has_zero_diagonal(X):
    """True if the main diagonal of the square matrix `X` is all zeros"""
    return np.array_equal(np.diag(X), np.zeros(X.shape[0]))


#######################################################################
#                           Data Generators                           #
#######################################################################


def random_tensor(shape):
    """Create a random real-valued tensor of shape `shape`."""
    offset = np.random.randint(-300, 300, shape)
    return np.random.rand(*shape) + offset


def random_vector_pair(n_dims=None, max_dims=100):
    """
    Create two random real vectors of equal length. If `n_dims` is None, the
    length is drawn uniformly from [1, `max_dims`).
    """
    if n_dims is None:
        n_dims = np.random.randint(1, max_dims)
    x = random_tensor((n_dims,))
    y = random_tensor((n_dims,))
    return x, y


def random_lmetric_params(max_p=6):
    """Draw a random (`p`, `take_root`) configuration"""
    p = int(np.random.randint(1, max_p))
    take_root = bool(np.random.rand() < 0.5)
    return p, take_root
