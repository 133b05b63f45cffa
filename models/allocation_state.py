"""
Allocation State model for the Banker's Algorithm Visualizer.

Holds the three caller-owned inputs of one analysis run: the allocation
matrix, the maximum-demand matrix and the available vector. A state is an
immutable snapshot; editing a cell produces a new state.
"""

import numpy as np
from typing import List, Optional, Sequence
from dataclasses import dataclass

from algorithms.validation import ShapeError, validate_state, check_cell


def _frozen(values, shape) -> np.ndarray:
    """Copy values into a read-only int array of the given shape."""
    array = np.array(values, dtype=np.int64).reshape(shape)
    array.setflags(write=False)
    return array


def _check_index(index, size: int, name: str) -> int:
    """Reject indices outside 0..size-1 (negative indices do not wrap)."""
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        raise ShapeError(f"{name} index must be an integer, got {index!r}")
    if not 0 <= index < size:
        raise ShapeError(f"{name} index {index} out of range 0..{size - 1}")
    return int(index)


@dataclass(frozen=True, eq=False)
class AllocationState:
    """
    Snapshot of resource allocation for P processes and R resource types.

    Attributes:
        allocation: [P][R] resources of type j currently held by process i
        max_demand: [P][R] maximum demand declared by process i for resource j
        available: [R] unallocated units of each resource type

    All three arrays are read-only. Use from_lists() to build a validated state.
    """
    allocation: np.ndarray
    max_demand: np.ndarray
    available: np.ndarray

    @classmethod
    def from_lists(
        cls,
        allocation: Sequence[Sequence[int]],
        max_demand: Sequence[Sequence[int]],
        available: Sequence[int],
        num_processes: Optional[int] = None,
        num_resources: Optional[int] = None
    ) -> "AllocationState":
        """
        Build a validated state from nested lists.

        Counts default to the shape of the inputs when not declared.

        Raises:
            ShapeError: If dimensions mismatch the declared counts
            DomainError: If any value is negative or non-integer
        """
        if num_processes is None:
            num_processes = len(allocation)
        if num_resources is None:
            num_resources = len(available)

        validate_state(num_processes, num_resources, allocation, max_demand, available)

        shape = (num_processes, num_resources)
        return cls(
            allocation=_frozen(allocation, shape),
            max_demand=_frozen(max_demand, shape),
            available=_frozen(available, (num_resources,))
        )

    @classmethod
    def empty(cls, num_processes: int, num_resources: int) -> "AllocationState":
        """All-zero state of the given dimensions."""
        return cls.from_lists(
            [[0] * num_resources for _ in range(num_processes)],
            [[0] * num_resources for _ in range(num_processes)],
            [0] * num_resources,
            num_processes,
            num_resources
        )

    @property
    def num_processes(self) -> int:
        """Number of processes in the system."""
        return self.allocation.shape[0]

    @property
    def num_resources(self) -> int:
        """Number of resource types in the system."""
        return self.available.shape[0]

    @property
    def total_allocated(self) -> np.ndarray:
        """[R] column totals of the allocation matrix."""
        return self.allocation.sum(axis=0)

    def with_allocation(self, process: int, resource: int, value: int) -> "AllocationState":
        """New state with allocation[process][resource] replaced."""
        process = _check_index(process, self.num_processes, "process")
        resource = _check_index(resource, self.num_resources, "resource")
        updated = self.allocation.copy()
        updated[process][resource] = check_cell(value, f"allocation[{process}][{resource}]")
        return AllocationState(
            allocation=_frozen(updated, updated.shape),
            max_demand=self.max_demand,
            available=self.available
        )

    def with_max_demand(self, process: int, resource: int, value: int) -> "AllocationState":
        """New state with max_demand[process][resource] replaced."""
        process = _check_index(process, self.num_processes, "process")
        resource = _check_index(resource, self.num_resources, "resource")
        updated = self.max_demand.copy()
        updated[process][resource] = check_cell(value, f"max_demand[{process}][{resource}]")
        return AllocationState(
            allocation=self.allocation,
            max_demand=_frozen(updated, updated.shape),
            available=self.available
        )

    def with_available(self, resource: int, value: int) -> "AllocationState":
        """New state with available[resource] replaced."""
        resource = _check_index(resource, self.num_resources, "resource")
        updated = self.available.copy()
        updated[resource] = check_cell(value, f"available[{resource}]")
        return AllocationState(
            allocation=self.allocation,
            max_demand=self.max_demand,
            available=_frozen(updated, updated.shape)
        )

    def to_lists(self) -> dict:
        """Plain nested-list form of the state."""
        return {
            'allocation': self.allocation.tolist(),
            'max_demand': self.max_demand.tolist(),
            'available': self.available.tolist()
        }

    def display(self, need: Optional[np.ndarray] = None) -> str:
        """
        Generate readable string representation of the state.

        Args:
            need: Optional need matrix to print alongside the inputs

        Returns:
            Formatted string showing all matrices and vectors
        """
        output = []
        output.append("\n" + "="*60)
        output.append("ALLOCATION STATE")
        output.append("="*60)

        output.append("\nAvailable Resources:")
        avail = ", ".join(f"R{j}:{self.available[j]:2}" for j in range(self.num_resources))
        output.append(f"  [{avail}]")

        output.extend(self._format_matrix("Allocation Matrix:", self.allocation))
        output.extend(self._format_matrix("Max Demand Matrix:", self.max_demand))
        if need is not None:
            output.extend(self._format_matrix("Need Matrix (Max - Allocation):", need))

        output.append("\n" + "="*60)
        return "\n".join(output)

    def _format_matrix(self, title: str, matrix: np.ndarray) -> List[str]:
        lines = ["\n" + title]
        lines.append("     " + " ".join([f"R{j:2}" for j in range(self.num_resources)]))
        for i in range(self.num_processes):
            row = f"  P{i}: "
            row += " ".join([f"{matrix[i][j]:3}" for j in range(self.num_resources)])
            lines.append(row)
        return lines
