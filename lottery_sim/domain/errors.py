class LotterySimError(Exception):
    """Base class for errors raised by the lottery simulator."""


class LoadError(LotterySimError):
    """The digit statistics could not be turned into a weight table."""


class DegenerateTableError(LoadError):
    """Every digit weight is zero, so no digit can ever be drawn."""


class DistributionError(LotterySimError):
    """Weighted sampling was attempted over weights that sum to zero."""
