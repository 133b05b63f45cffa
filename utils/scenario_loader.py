"""
Scenario Loader for the Banker's Algorithm Visualizer.

Loads and validates JSON scenario files describing one allocation state.

Format:
    {
        "description": "optional text",
        "processes": 5,            (optional, defaults to len(allocation))
        "resources": 3,            (optional, defaults to len(available))
        "allocation": [[...], ...],
        "max_demand": [[...], ...],
        "available": [...]
    }

Cells are coerced the same way form input is (unparsable -> 0) before
validation.
"""

import json
from typing import Any, Dict, List, Tuple

from models.allocation_state import AllocationState
from algorithms.validation import ValidationError, coerce_cell, coerce_matrix, coerce_vector


class ScenarioLoadError(Exception):
    """Exception raised when scenario file cannot be loaded or is invalid."""
    pass


REQUIRED_FIELDS = ('allocation', 'max_demand', 'available')


def load_scenario(file_path: str) -> Tuple[AllocationState, str]:
    """
    Load scenario from JSON file.

    Args:
        file_path: Path to scenario JSON file

    Returns:
        Tuple of (AllocationState, description)

    Raises:
        ScenarioLoadError: If file cannot be loaded or is invalid
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        raise ScenarioLoadError(f"Scenario file not found: {file_path}")
    except json.JSONDecodeError as e:
        raise ScenarioLoadError(f"Invalid JSON in scenario file: {e}")
    except UnicodeDecodeError as e:
        raise ScenarioLoadError(f"Scenario file is not UTF-8 text: {e}")
    except OSError as e:
        raise ScenarioLoadError(f"Cannot read scenario file {file_path}: {e}")

    return parse_scenario(data), data.get('description', '')


def parse_scenario(data: Dict[str, Any]) -> AllocationState:
    """
    Build an allocation state from already-decoded scenario data.

    Raises:
        ScenarioLoadError: If fields are missing or the state is invalid
    """
    if not isinstance(data, dict):
        raise ScenarioLoadError("Scenario must be a JSON object")

    for field in REQUIRED_FIELDS:
        if field not in data:
            raise ScenarioLoadError(f"Scenario missing '{field}' field")

    allocation = _matrix(data, 'allocation')
    max_demand = _matrix(data, 'max_demand')
    available = _vector(data, 'available')

    num_processes = coerce_cell(data['processes']) if 'processes' in data else len(allocation)
    num_resources = coerce_cell(data['resources']) if 'resources' in data else len(available)

    try:
        return AllocationState.from_lists(
            allocation,
            max_demand,
            available,
            num_processes,
            num_resources
        )
    except ValidationError as e:
        raise ScenarioLoadError(f"Invalid allocation state: {e}")


def _matrix(data: Dict[str, Any], field: str) -> List[List[int]]:
    rows = data[field]
    if not isinstance(rows, list) or not all(isinstance(row, list) for row in rows):
        raise ScenarioLoadError(f"'{field}' must be a list of rows")
    return coerce_matrix(rows)


def _vector(data: Dict[str, Any], field: str) -> List[int]:
    values = data[field]
    if not isinstance(values, list):
        raise ScenarioLoadError(f"'{field}' must be a list")
    return coerce_vector(values)


def get_scenario_description(file_path: str) -> str:
    """
    Get description from scenario file without full loading.

    Args:
        file_path: Path to scenario JSON file

    Returns:
        Description string, or empty string if not present or unreadable
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, ValueError):
        return ''
    return data.get('description', '') if isinstance(data, dict) else ''
