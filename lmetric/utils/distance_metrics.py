from ..metrics.lmetric import (
    LMetric,
    EuclideanDistance,
    ManhattanDistance,
    SquaredEuclideanDistance,
)

_MANHATTAN = ManhattanDistance()
_SQUARED_EUCLIDEAN = SquaredEuclideanDistance()
_EUCLIDEAN = EuclideanDistance()


def euclidean(x, y):
    """
    Compute the Euclidean (`L2`) distance between two real vectors

    Notes
    -----
    The Euclidean distance between two vectors **x** and **y** is

    .. math::

        d(\\mathbf{x}, \\mathbf{y}) = \\sqrt{ \\sum_i (x_i - y_i)^2  }

    Parameters
    ----------
    x,y : :py:class:`ndarray <numpy.ndarray>` s of shape `(N,)`
        The two vectors to compute the distance between

    Returns
    -------
    d : float
        The L2 distance between **x** and **y**.
    """
    return _EUCLIDEAN(x, y)


def squared_euclidean(x, y):
    """
    Compute the squared Euclidean distance between two real vectors

    Notes
    -----
    The squared Euclidean distance between two vectors **x** and **y** is

    .. math::

        d(\\mathbf{x}, \\mathbf{y}) = \\sum_i (x_i - y_i)^2

    It orders pairs of points exactly as :func:`euclidean` does while skipping
    the square root.

    Parameters
    ----------
    x,y : :py:class:`ndarray <numpy.ndarray>` s of shape `(N,)`
        The two vectors to compute the distance between

    Returns
    -------
    d : float
        The squared L2 distance between **x** and **y**.
    """
    return _SQUARED_EUCLIDEAN(x, y)


def manhattan(x, y):
    """
    Compute the Manhattan (`L1`) distance between two real vectors

    Notes
    -----
    The Manhattan distance between two vectors **x** and **y** is

    .. math::

        d(\\mathbf{x}, \\mathbf{y}) = \\sum_i |x_i - y_i|

    Parameters
    ----------
    x,y : :py:class:`ndarray <numpy.ndarray>` s of shape `(N,)`
        The two vectors to compute the distance between

    Returns
    -------
    d : float
        The L1 distance between **x** and **y**.
    """
    return _MANHATTAN(x, y)


def minkowski(x, y, p, take_root=True):
    """
    Compute the Minkowski-`p` distance between two real vectors.

    Notes
    -----
    The Minkowski-`p` distance between two vectors **x** and **y** is

    .. math::

        d(\\mathbf{x}, \\mathbf{y}) = \\left( \\sum_i |x_i - y_i|^p \\right)^{1/p}

    Parameters
    ----------
    x,y : :py:class:`ndarray <numpy.ndarray>` s of shape `(N,)`
        The two vectors to compute the distance between
    p : int >= 1
        The parameter of the distance function. When `p = 1`, this is the `L1`
        distance, and when `p=2`, this is the `L2` distance.
    take_root : bool
        Whether to apply the final `1/p` power. Default is True.

    Returns
    -------
    d : float
        The Minkowski-`p` distance between **x** and **y**.
    """
    return LMetric(p, take_root)(x, y)
