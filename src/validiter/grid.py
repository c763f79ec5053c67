"""Validated parsing of delimited numeric grids.

Each line is parsed cell by cell with ``attempt(float, ...)``, validated
and collected into a row; the row outcomes are then rebased so that
grid-level checks (row count, constant row length) can be chained.

Basic usage:
    from validiter.grid import load_grid

    result = load_grid("1.2, 3.0\\n4.2, 0.5")
    if result.is_success:
        matrix = result.value
"""

import logging
import math
from pathlib import Path
from typing import Iterable

from .config import GridConfig
from .consume import collect
from .outcome import Outcome
from .producers import attempt, rebase
from .valid_iter import ValidIter

logger = logging.getLogger(__name__)


def parse_row(line: str, config: GridConfig | None = None) -> Outcome[list[float]]:
    """Parse and validate a single line into a row of floats.

    A blank line is a row with zero cells.

    Args:
        line: One line of delimited text
        config: Grid checks to apply (defaults to GridConfig())

    Returns:
        ``Success(row)`` or the first cell-level failure
    """
    config = config or GridConfig()
    cells = [] if not line.strip() else line.split(config.delimiter)

    row = attempt(float, (cell.strip() for cell in cells)).at_least(config.min_columns)
    if config.max_columns is not None:
        row = row.at_most(config.max_columns)
    if config.finite_only:
        row = row.ensure(math.isfinite)
    if config.low is not None or config.high is not None:
        low = config.low if config.low is not None else float("-inf")
        high = config.high if config.high is not None else float("inf")
        row = row.between(low, high)
    if config.non_negative:
        row = row.ensure(lambda cell: cell >= 0.0)
    return row.collect()


def parse_lines(lines: Iterable[str], config: GridConfig | None = None) -> ValidIter[list[float]]:
    """Lazily validate an iterable of lines as grid rows.

    Args:
        lines: Lines of delimited text, consumed one at a time
        config: Grid checks to apply (defaults to GridConfig())

    Returns:
        Validated iterator with one outcome per row, plus a trailing
        TooFew failure when there are fewer than ``min_rows`` rows
    """
    config = config or GridConfig()
    if config.skip_blank_lines:
        lines = (line for line in lines if line.strip())

    rows = rebase(parse_row(line, config) for line in lines).at_least(config.min_rows)
    if config.max_rows is not None:
        rows = rows.at_most(config.max_rows)
    if config.constant_row_length:
        rows = rows.const_over(len)
    return rows


def parse_grid(text: str, config: GridConfig | None = None) -> ValidIter[list[float]]:
    """Lazily validate grid text, one outcome per row."""
    return parse_lines(text.splitlines(), config)


def load_grid(text: str, config: GridConfig | None = None) -> Outcome[list[list[float]]]:
    """Parse grid text into a matrix, stopping at the first failing row.

    Args:
        text: Delimited numeric text, one row per line
        config: Grid checks to apply

    Returns:
        ``Success(matrix)`` or the first failure
    """
    return collect(parse_grid(text, config))


def read_grid(path: Path, config: GridConfig | None = None) -> Outcome[list[list[float]]]:
    """Parse a grid file into a matrix, stopping at the first failing row.

    Raises:
        FileNotFoundError: If the file does not exist
    """
    logger.info(f"Reading grid from {path}")
    with open(path, encoding="utf-8") as f:
        result = collect(parse_lines((line.rstrip("\n") for line in f), config))
    logger.debug(f"Grid {path}: {'valid' if result.is_success else 'invalid'}")
    return result
