import re
import ast
import numbers
import warnings
from abc import ABC, abstractmethod

import numpy as np


class MetricBase(ABC):
    def __init__(self):
        super().__init__()
        self.hyperparameters = {}

    @property
    @abstractmethod
    def parameters(self):
        raise NotImplementedError

    @abstractmethod
    def _evaluate(self, a, b):
        raise NotImplementedError

    def evaluate(self, a, b):
        """
        Compute the distance between two vectors.

        Parameters
        ----------
        a, b : array-like of shape `(N,)`
            The two vectors to compute the distance between.

        Returns
        -------
        d : float
            The distance between **a** and **b**.
        """
        a, b = metric_checks(a, b)
        return self._evaluate(a, b)

    def __call__(self, a, b):
        """Refer to documentation for the `evaluate` method"""
        return self.evaluate(a, b)

    def __str__(self):
        P, H = self.parameters, self.hyperparameters
        p_str = ", ".join(["{}={}".format(k, v) for k, v in P.items()])
        return "{}({})".format(H["id"], p_str)

    def __repr__(self):
        return str(self)

    def __eq__(self, other):
        if not isinstance(other, MetricBase):
            return NotImplemented
        return self.parameters == other.parameters

    def __hash__(self):
        return hash(tuple(self.parameters.items()))

    def summary(self):
        """Return the dictionary of metric parameters, hyperparameters, and ID"""
        return {
            "id": self.hyperparameters["id"],
            "parameters": self.parameters,
            "hyperparameters": dict(self.hyperparameters),
        }


class LMetric(MetricBase):
    def __init__(self, p, take_root=False):
        """
        The `L_p` metric for an arbitrary positive integer `p`, with an option
        to take the `p`-th root.

        Notes
        -----
        For input vectors :math:`\\mathbf{x}` and :math:`\\mathbf{y}` of
        dimension `N`, the `L_p` metric is

        .. math::

            d(\\mathbf{x}, \\mathbf{y}) =
                \\left( \\sum_{i=1}^N |x_i - y_i|^p \\right)^{1/p}

        When `take_root` is False the outer root is skipped, giving

        .. math::

            d(\\mathbf{x}, \\mathbf{y}) = \\sum_{i=1}^N |x_i - y_i|^p

        which is monotone in the rooted distance and one ``pow`` call cheaper,
        so it is sufficient whenever distances are only compared against
        each other.

        The configuration is fixed at construction time. Use
        :meth:`set_params` to derive a differently configured metric.

        Parameters
        ----------
        p : int
            Power of the metric. `p` = 1 gives the Manhattan (`L1`) distance
            and `p` = 2 the Euclidean (`L2`) distance.
        take_root : bool
            Whether to take the `p`-th root of the accumulated sum before
            returning it. Default is False.
        """
        super().__init__()
        if isinstance(p, bool) or not isinstance(p, numbers.Integral) or p < 1:
            raise ValueError("p must be a positive integer, but got {!r}".format(p))
        if not isinstance(take_root, (bool, np.bool_)):
            fstr = "take_root must be a bool, but got {!r}"
            raise ValueError(fstr.format(take_root))

        self._p = int(p)
        self._take_root = bool(take_root)
        self.hyperparameters = {"id": "LMetric"}

    @property
    def p(self):
        return self._p

    @property
    def take_root(self):
        return self._take_root

    @property
    def parameters(self):
        return {"p": self._p, "take_root": self._take_root}

    def _evaluate(self, a, b):
        total = _accumulate(np.abs(a - b) ** self._p)
        if not self._take_root:
            return total
        return total ** (1.0 / self._p)

    def pairwise(self, X, Y=None):
        """
        Compute the distance between all pairs of rows in `X` and `Y`.

        Parameters
        ----------
        X : array-like of shape `(N, C)`
            Collection of `N` input vectors.
        Y : array-like of shape `(M, C)` or None
            Collection of `M` input vectors. If None, assume `Y` = `X`.
            Default is None.

        Returns
        -------
        D : :py:class:`ndarray <numpy.ndarray>` of shape `(N, M)`
            Pairwise distance matrix. Entry (`i`, `j`) equals
            ``self.evaluate(X[i], Y[j])``.
        """
        X, Y = pairwise_checks(X, Y)

        # one column at a time keeps memory at O(N * M) and adds the terms in
        # the same ascending order as `evaluate`
        D = np.zeros((X.shape[0], Y.shape[0]))
        for j in range(X.shape[1]):
            D += np.abs(X[:, j, np.newaxis] - Y[np.newaxis, :, j]) ** self._p

        if self._take_root:
            D = D ** (1.0 / self._p)
        return D

    def set_params(self, summary_dict):
        """
        Derive a new metric from this one using the settings in
        `summary_dict`.

        Parameters
        ----------
        summary_dict : dict
            A dictionary with keys 'parameters' and 'hyperparameters',
            structured as would be returned by the :meth:`summary` method. If
            a particular parameter is not included in this dict, the current
            value will be used. The flat form ``{"p": 3}`` is also accepted.

        Returns
        -------
        new_metric : :class:`LMetric` instance
            A metric with the merged configuration. If the configuration
            matches one of the presets, an instance of that preset is
            returned. The current metric is left unchanged.
        """
        sd = dict(summary_dict)

        # collapse `parameters` and `hyperparameters` nested dicts into a single
        # merged dictionary
        for k in ["parameters", "hyperparameters"]:
            if k in sd:
                sd.update(sd.pop(k))

        params = self.parameters
        for k, v in sd.items():
            if k in params:
                params[k] = v
            elif k == "id":
                if v != self.hyperparameters["id"]:
                    fstr = "Ignoring metric id {!r}; deriving from {!r} instead"
                    warnings.warn(fstr.format(v, self.hyperparameters["id"]))
            else:
                warnings.warn("Ignoring unrecognized metric parameter {!r}".format(k))
        return make_lmetric(**params)


class ManhattanDistance(LMetric):
    def __init__(self):
        """The Manhattan (`L1`) distance, :math:`\\sum_i |x_i - y_i|`."""
        super().__init__(p=1, take_root=False)
        self.hyperparameters = {"id": "ManhattanDistance"}


class SquaredEuclideanDistance(LMetric):
    def __init__(self):
        """The squared Euclidean (`L2`) distance, :math:`\\sum_i (x_i - y_i)^2`."""
        super().__init__(p=2, take_root=False)
        self.hyperparameters = {"id": "SquaredEuclideanDistance"}


class EuclideanDistance(LMetric):
    def __init__(self):
        """The Euclidean (`L2`) distance, :math:`\\sqrt{\\sum_i (x_i - y_i)^2}`."""
        super().__init__(p=2, take_root=True)
        self.hyperparameters = {"id": "EuclideanDistance"}


PRESETS = {
    (1, False): ManhattanDistance,
    (2, False): SquaredEuclideanDistance,
    (2, True): EuclideanDistance,
}


def make_lmetric(p, take_root=False):
    """
    Return the preset matching (`p`, `take_root`) if there is one, otherwise a
    plain :class:`LMetric`.
    """
    # validate before the lookup so that e.g. p=True is not mistaken for p=1
    metric = LMetric(p, take_root)
    preset = PRESETS.get((metric.p, metric.take_root))
    return metric if preset is None else preset()


class MetricInitializer(object):
    def __init__(self, param=None):
        """
        A class for initializing distance metrics. Valid inputs are:
            (a) __str__ representations of `MetricBase` instances
            (b) `MetricBase` instances
            (c) Parameter dicts (e.g., as produced via the :meth:`summary`
                method in `MetricBase` instances)
            (d) Preset names such as "manhattan", "squared_euclidean" or
                "euclidean"

        If `param` is None, return `EuclideanDistance`.
        """
        self.param = param

    def __call__(self):
        param = self.param
        if param is None:
            metric = EuclideanDistance()
        elif isinstance(param, MetricBase):
            metric = param
        elif isinstance(param, str):
            metric = self.init_from_str()
        elif isinstance(param, dict):
            metric = self.init_from_dict()
        else:
            fstr = "Cannot initialize a metric from {!r}"
            raise ValueError(fstr.format(param))
        return metric

    def init_from_str(self):
        r = r"([a-zA-Z0-9_]*)=([^,)]*)"
        kwargs = {k: ast.literal_eval(v.strip()) for k, v in re.findall(r, self.param)}
        mt_str = self.param.lower().replace("_", "").replace(" ", "")

        if mt_str.startswith("manhattan"):
            metric = ManhattanDistance().set_params(kwargs)
        elif mt_str.startswith("squaredeuclidean"):
            metric = SquaredEuclideanDistance().set_params(kwargs)
        elif mt_str.startswith("euclidean"):
            metric = EuclideanDistance().set_params(kwargs)
        elif mt_str.startswith("lmetric"):
            if "p" not in kwargs:
                fstr = "LMetric string must specify `p`: {}"
                raise ValueError(fstr.format(self.param))
            metric = LMetric(kwargs.pop("p")).set_params(kwargs)
        else:
            raise NotImplementedError("{}".format(mt_str))
        return metric

    def init_from_dict(self):
        S = self.param
        mc = S["hyperparameters"] if "hyperparameters" in S else None

        if mc is None:
            raise ValueError("Must have `hyperparameters` key: {}".format(S))
        if "id" not in mc:
            raise ValueError("`hyperparameters` must have an `id` key: {}".format(S))

        if mc["id"] == "ManhattanDistance":
            metric = ManhattanDistance().set_params(S)
        elif mc["id"] == "SquaredEuclideanDistance":
            metric = SquaredEuclideanDistance().set_params(S)
        elif mc["id"] == "EuclideanDistance":
            metric = EuclideanDistance().set_params(S)
        elif mc["id"] == "LMetric":
            P = S.get("parameters", {})
            if "p" not in P:
                raise ValueError("LMetric summary must specify `p`: {}".format(S))
            metric = LMetric(P["p"]).set_params(S)
        else:
            raise NotImplementedError("{}".format(mc["id"]))
        return metric


def metric_checks(a, b):
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)

    if a.ndim != 1 or b.ndim != 1:
        fstr = "a and b must be 1-dimensional, but got {} and {} dimensions"
        raise ValueError(fstr.format(a.ndim, b.ndim))
    if a.shape[0] != b.shape[0]:
        fstr = "a and b must have the same length, but got {} and {}"
        raise ValueError(fstr.format(a.shape[0], b.shape[0]))
    return a, b


def pairwise_checks(X, Y):
    X = np.asarray(X, dtype=float)
    X = X.reshape(1, -1) if X.ndim == 1 else X
    Y = X if Y is None else np.asarray(Y, dtype=float)
    Y = Y.reshape(1, -1) if Y.ndim == 1 else Y

    if X.ndim != 2 or Y.ndim != 2:
        fstr = "X and Y must have 2 dimensions, but got {} and {}"
        raise ValueError(fstr.format(X.ndim, Y.ndim))
    if X.shape[1] != Y.shape[1]:
        fstr = "X and Y must have the same number of columns, but got {} and {}"
        raise ValueError(fstr.format(X.shape[1], Y.shape[1]))
    return X, Y


def _accumulate(terms):
    """
    Sum the 1-D array `terms` strictly left to right.

    ``np.sum`` uses pairwise summation, which can differ from sequential
    addition in the last few bits; ``np.cumsum`` does not.
    """
    if terms.shape[0] == 0:
        return 0.0
    return float(np.cumsum(terms)[-1])
