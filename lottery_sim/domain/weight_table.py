"""Digit weight tables that bias the lottery draws.

A table holds one non-negative integer weight per digit 0-9. Tables are built
once at startup, either from statistic rows or from the fallback literal, and
are shared read-only afterwards.
"""

import logging
from typing import Iterable, Sequence, Tuple

import numpy as np
from pydantic import BaseModel, field_validator

from lottery_sim.domain.errors import DegenerateTableError, DistributionError, LoadError

DIGIT_COUNT = 10

FALLBACK_WEIGHTS = (10, 12, 15, 20, 18, 25, 30, 22, 17, 14)

MAX_FREQUENCY = 2**32 - 1


class WeightTable(BaseModel):
    weights: Tuple[int, ...]

    class Config:
        frozen = True

    @field_validator("weights")
    @classmethod
    def check_weights(cls, weights: Tuple[int, ...]) -> Tuple[int, ...]:
        if len(weights) != DIGIT_COUNT:
            raise ValueError(
                f"weights must have exactly {DIGIT_COUNT} entries, got {len(weights)}"
            )
        if any(weight < 0 for weight in weights):
            raise ValueError("weights must be non-negative")
        if any(weight > MAX_FREQUENCY for weight in weights):
            raise ValueError(f"weights must not exceed {MAX_FREQUENCY}")
        return weights

    @property
    def total(self) -> int:
        return sum(self.weights)

    def probabilities(self) -> np.ndarray:
        """Return the draw probability of each digit.

        Raises:
            DistributionError: when every weight is zero
        """
        total = self.total
        if total == 0:
            raise DistributionError(f"cannot sample from weights {list(self.weights)}")
        return np.asarray(self.weights, dtype=np.float64) / total


def fallback_weight_table() -> WeightTable:
    """Return the table used when the statistics cannot be loaded."""
    return WeightTable(weights=FALLBACK_WEIGHTS)


def _parse_field(value: str, field_name: str, line_number: int) -> int:
    try:
        return int(value.strip())
    except ValueError as e:
        raise LoadError(
            f"row {line_number}: {field_name} {value!r} is not an integer"
        ) from e


def build_weight_table(rows: Iterable[Sequence[str]]) -> WeightTable:
    """Build a weight table from (digit, frequency) rows.

    Rows may come in any order and need not cover every digit. When a digit
    appears more than once the last row wins. Digits outside 0-9 are ignored.

    Args:
        rows (Iterable[Sequence[str]]): Text fields of each record

    Raises:
        LoadError: A row is malformed or a field is not a non-negative integer
        DegenerateTableError: No digit ended up with a positive weight

    Returns:
        WeightTable: The loaded table
    """
    weights = [0] * DIGIT_COUNT

    for line_number, row in enumerate(rows, start=1):
        if len(row) == 0:
            continue
        if len(row) != 2:
            raise LoadError(
                f"row {line_number}: expected 2 fields (digit, frequency), got {len(row)}"
            )
        digit = _parse_field(row[0], "digit", line_number)
        frequency = _parse_field(row[1], "frequency", line_number)
        if frequency < 0:
            raise LoadError(f"row {line_number}: frequency {frequency} is negative")
        if frequency > MAX_FREQUENCY:
            raise LoadError(
                f"row {line_number}: frequency {frequency} exceeds {MAX_FREQUENCY}"
            )
        # negative digits count as out of range rather than unparsable
        if 0 <= digit < DIGIT_COUNT:
            weights[digit] = frequency

    for digit, weight in enumerate(weights):
        if weight == 0:
            logging.warning(f"No frequency data for digit {digit}")

    if sum(weights) == 0:
        raise DegenerateTableError("every digit has zero frequency")

    return WeightTable(weights=tuple(weights))
