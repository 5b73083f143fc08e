import csv
import logging
from pathlib import Path
from typing import List, Union

from lottery_sim.domain.errors import LoadError
from lottery_sim.domain.weight_table import (
    WeightTable,
    build_weight_table,
    fallback_weight_table,
)


def read_statistic_rows(
    file_path: Union[str, Path], has_header: bool = True
) -> List[List[str]]:
    """Read the (digit, frequency) records of a statistics CSV file

    Args:
        file_path (Union[str, Path]): Path of the CSV file
        has_header (bool, optional): Skip the first line. Defaults to True.

    Raises:
        LoadError: The file cannot be opened or is not valid CSV

    Returns:
        List[List[str]]: The raw records
    """
    try:
        with open(file_path, newline="", encoding="utf-8") as f:
            rows = list(csv.reader(f))
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise LoadError(f"cannot read {file_path}: {e}") from e
    if has_header:
        return rows[1:]
    return rows


def load_statistics(file_path: Union[str, Path], has_header: bool = True) -> WeightTable:
    rows = read_statistic_rows(file_path, has_header=has_header)
    return build_weight_table(rows)


def load_weight_table_or_fallback(
    file_path: Union[str, Path], has_header: bool = True
) -> WeightTable:
    """Load the weight table, or use the fallback table if loading fails.

    This never raises LoadError.
    """
    try:
        table = load_statistics(file_path, has_header=has_header)
    except LoadError as e:
        logging.warning(f"Error loading statistics: {e}. Using default weights")
        table = fallback_weight_table()
    logging.info(f"Loaded weights: {list(table.weights)}")
    return table
