import logging
from pathlib import Path

import pytest

from lottery_sim.domain.errors import DegenerateTableError, LoadError
from lottery_sim.domain.weight_table import FALLBACK_WEIGHTS
from lottery_sim.services.statistics_loader import (
    load_statistics,
    load_weight_table_or_fallback,
    read_statistic_rows,
)


def write_stats(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "lottery_stats.csv"
    path.write_text(text, encoding="utf-8")
    return path


def test_header_line_is_skipped(tmp_path: Path) -> None:
    path = write_stats(tmp_path, "digit,frequency\n0,5\n1,6\n")
    assert read_statistic_rows(path) == [["0", "5"], ["1", "6"]]


def test_headerless_file_keeps_first_line(tmp_path: Path) -> None:
    path = write_stats(tmp_path, "3,50\n3,10\n")
    table = load_statistics(path, has_header=False)
    assert table.weights[3] == 10


def test_full_file_loads_every_digit(tmp_path: Path) -> None:
    lines = "\n".join(f"{digit},{digit + 1}" for digit in range(10))
    path = write_stats(tmp_path, f"digit,frequency\n{lines}\n")
    table = load_statistics(path)
    assert table.weights == (1, 2, 3, 4, 5, 6, 7, 8, 9, 10)


def test_missing_file_raises_load_error(tmp_path: Path) -> None:
    with pytest.raises(LoadError):
        load_statistics(tmp_path / "missing.csv")


def test_malformed_row_raises_load_error(tmp_path: Path) -> None:
    path = write_stats(tmp_path, "digit,frequency\n1,20\n4,abc\n")
    with pytest.raises(LoadError):
        load_statistics(path)


def test_all_zero_file_raises_degenerate_error(tmp_path: Path) -> None:
    path = write_stats(tmp_path, "digit,frequency\n0,0\n1,0\n")
    with pytest.raises(DegenerateTableError):
        load_statistics(path)


def test_malformed_file_falls_back_to_default_weights(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    path = write_stats(tmp_path, "digit,frequency\n4,abc\n")
    with caplog.at_level(logging.WARNING):
        table = load_weight_table_or_fallback(path)

    assert table.weights == FALLBACK_WEIGHTS
    assert any("Using default weights" in record.getMessage() for record in caplog.records)
    assert any("abc" in record.getMessage() for record in caplog.records)


def test_missing_file_falls_back_to_default_weights(tmp_path: Path) -> None:
    table = load_weight_table_or_fallback(tmp_path / "missing.csv")
    assert table.weights == FALLBACK_WEIGHTS


def test_all_zero_file_falls_back_to_default_weights(tmp_path: Path) -> None:
    path = write_stats(tmp_path, "digit,frequency\n0,0\n")
    table = load_weight_table_or_fallback(path)
    assert table.weights == FALLBACK_WEIGHTS


def test_sparse_file_is_kept_with_warnings(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    path = write_stats(tmp_path, "digit,frequency\n0,1\n1,2\n2,3\n3,4\n4,5\n")
    with caplog.at_level(logging.WARNING):
        table = load_weight_table_or_fallback(path)

    assert table.weights == (1, 2, 3, 4, 5, 0, 0, 0, 0, 0)
    warnings = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
    assert len([m for m in warnings if m.startswith("No frequency data")]) == 5
    assert not any("Using default weights" in message for message in warnings)


@pytest.mark.parametrize("frequency", ["5000000000", "9" * 400])
def test_oversized_frequency_falls_back_to_default_weights(
    tmp_path: Path, frequency: str
) -> None:
    path = write_stats(tmp_path, f"digit,frequency\n1,{frequency}\n")
    table = load_weight_table_or_fallback(path)
    assert table.weights == FALLBACK_WEIGHTS
