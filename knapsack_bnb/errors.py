"""Exceptions raised by the knapsack solver."""


class KnapsackError(Exception):
    """Base class for every error raised by this package."""


class InvalidInstance(KnapsackError, ValueError):
    """Raised when an item or budget cannot describe a solvable knapsack."""


class OutOfRange(KnapsackError, IndexError):
    """Raised when an item index falls outside [0, n)."""


class SearchLimitReached(KnapsackError):
    """
    Raised when a search exceeds its node or time limit.

    The incumbent is reported for diagnostics only; no Solution is built.
    """
    def __init__(self, message, best_value, nodes):
        super().__init__(message)
        self.best_value = best_value
        self.nodes = nodes
