"""
Matrix Validator for the Banker's Algorithm Visualizer.

Enforces shape and domain invariants on the allocation matrix, the
maximum-demand matrix and the available vector before any analysis runs.

Raw cell input (text typed into an editing surface, values read from a
scenario file) is coerced first: anything non-numeric or unparsable becomes 0
instead of being rejected. Negative numbers survive coercion and are rejected
here with DomainError.
"""

import re
import numpy as np
from typing import Any, List, Sequence


_LEADING_INT = re.compile(r'^\s*([+-]?\d+)')

# Largest unit count a cell may hold. Column sums of P such cells must still
# fit the int64 arrays the analysis runs on.
MAX_UNITS = int(np.iinfo(np.int32).max)


class ValidationError(Exception):
    """Base class for invalid allocation-state input."""
    pass


class ShapeError(ValidationError):
    """Matrix or vector dimensions inconsistent with the declared P/R."""
    pass


class DomainError(ValidationError):
    """A matrix or vector value is negative or not an integer."""
    pass


def coerce_cell(value: Any) -> int:
    """
    Coerce one raw cell value to an integer.

    Mirrors integer-prefix parsing of form input:
    - ints pass through unchanged
    - floats are truncated toward zero
    - strings parse their leading integer ("12abc" -> 12, "2.5" -> 2, "-3" -> -3)
    - anything else (None, "", "abc", NaN) becomes 0

    Args:
        value: Raw cell value

    Returns:
        Integer value (may be negative; validation rejects that later)
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, np.integer)):
        return int(value)
    if isinstance(value, (float, np.floating)):
        if not np.isfinite(value):
            return 0
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        return int(match.group(1)) if match else 0
    return 0


def coerce_vector(values: Sequence[Any]) -> List[int]:
    """Coerce every cell of a raw vector."""
    return [coerce_cell(v) for v in values]


def coerce_matrix(rows: Sequence[Sequence[Any]]) -> List[List[int]]:
    """Coerce every cell of a raw matrix, keeping its shape."""
    return [coerce_vector(row) for row in rows]


def validate_state(
    num_processes: int,
    num_resources: int,
    allocation: Sequence[Sequence[int]],
    max_demand: Sequence[Sequence[int]],
    available: Sequence[int]
) -> None:
    """
    Validate an allocation state against its declared dimensions.

    Checks:
    1. allocation and max_demand have exactly P rows of R columns
    2. available has exactly R entries
    3. every value is a non-negative integer

    max_demand >= allocation is deliberately not checked; need derivation
    clamps those cells to zero.

    Args:
        num_processes: Declared process count P
        num_resources: Declared resource count R
        allocation: [P][R] resources held by each process
        max_demand: [P][R] maximum demand of each process
        available: [R] unallocated units per resource type

    Raises:
        ShapeError: If any dimension mismatches P/R
        DomainError: If any value is negative or non-integer
    """
    if num_processes < 0 or num_resources < 0:
        raise ShapeError(
            f"Process and resource counts must be non-negative "
            f"(processes: {num_processes}, resources: {num_resources})"
        )

    _check_matrix_shape("allocation", allocation, num_processes, num_resources)
    _check_matrix_shape("max_demand", max_demand, num_processes, num_resources)
    _check_vector_shape("available", available, num_resources)

    for i, row in enumerate(allocation):
        for j, value in enumerate(row):
            check_cell(value, f"allocation[{i}][{j}]")
    for i, row in enumerate(max_demand):
        for j, value in enumerate(row):
            check_cell(value, f"max_demand[{i}][{j}]")
    for j, value in enumerate(available):
        check_cell(value, f"available[{j}]")


def check_cell(value: Any, where: str = "cell") -> int:
    """
    Check that a single value is a non-negative integer.

    Args:
        value: Value to check
        where: Location used in the error message

    Returns:
        The value as a Python int

    Raises:
        DomainError: If value is negative, too large or not an integer
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise DomainError(f"{where} must be an integer, got {value!r}")
    if value < 0:
        raise DomainError(f"{where} must be non-negative, got {value}")
    if value > MAX_UNITS:
        raise DomainError(f"{where} must be at most {MAX_UNITS}, got {value}")
    return int(value)


def _check_matrix_shape(name: str, matrix: Any, rows: int, cols: int) -> None:
    """Raise ShapeError unless matrix is rows x cols."""
    actual_rows = _length(matrix, name)
    if actual_rows != rows:
        raise ShapeError(f"{name} has {actual_rows} rows, expected {rows}")

    for i, row in enumerate(matrix):
        actual_cols = _length(row, f"{name}[{i}]")
        if actual_cols != cols:
            raise ShapeError(
                f"{name}[{i}] has {actual_cols} columns, expected {cols}"
            )


def _check_vector_shape(name: str, vector: Any, size: int) -> None:
    """Raise ShapeError unless vector has exactly `size` entries."""
    actual = _length(vector, name)
    if actual != size:
        raise ShapeError(f"{name} has {actual} entries, expected {size}")
    for j, value in enumerate(vector):
        if _is_sequence(value):
            raise ShapeError(f"{name}[{j}] must be a scalar")


def _is_sequence(value: Any) -> bool:
    if isinstance(value, (str, bytes)):
        return False
    if isinstance(value, np.ndarray):
        return value.ndim > 0
    return hasattr(value, '__len__')


def _length(value: Any, name: str) -> int:
    if not _is_sequence(value):
        raise ShapeError(f"{name} must be a sequence")
    return len(value)
