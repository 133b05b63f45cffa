"""
Need Calculator for the Banker's Algorithm Visualizer.

Derives the need matrix (remaining demand of every process) and the
per-resource availability summary, each with its trace entries.
"""

import numpy as np
from typing import List, Tuple

from analysis.trace import TraceEntry, TraceKind


def compute_need(allocation, max_demand) -> Tuple[np.ndarray, List[TraceEntry]]:
    """
    Compute Need = Max - Allocation, clamped at zero.

    Need[i][j] = max(0, Max[i][j] - Allocation[i][j])

    A cell where Max < Allocation is a caller error; it yields 0 rather
    than a negative need.

    Args:
        allocation: [P][R] current allocation
        max_demand: [P][R] maximum demand

    Returns:
        Tuple of (need matrix [P][R], one calculation entry per cell, row-major)
    """
    allocation = np.asarray(allocation, dtype=np.int64)
    max_demand = np.asarray(max_demand, dtype=np.int64)

    need = np.maximum(max_demand - allocation, 0)
    need.setflags(write=False)

    entries = []
    num_processes, num_resources = need.shape if need.ndim == 2 else (0, 0)
    for i in range(num_processes):
        for j in range(num_resources):
            max_value = int(max_demand[i][j])
            allocated = int(allocation[i][j])
            need_value = int(need[i][j])
            entries.append(TraceEntry(
                kind=TraceKind.CALCULATION,
                message=f"Need for P{i}, R{j}",
                process=i,
                resource=j,
                max_value=max_value,
                allocated=allocated,
                need=need_value,
                formula=(
                    f"Need[P{i}][R{j}] = Max[P{i}][R{j}] - Allocation[P{i}][R{j}] "
                    f"= {max_value} - {allocated} = {need_value}"
                )
            ))

    return need, entries


def describe_available(allocation, available) -> List[TraceEntry]:
    """
    Summarize each resource type: units available and units held.

    Args:
        allocation: [P][R] current allocation
        available: [R] unallocated units

    Returns:
        One available entry per resource type
    """
    available = np.asarray(available, dtype=np.int64)
    allocation = np.asarray(allocation, dtype=np.int64).reshape(len(allocation), len(available))
    totals = allocation.sum(axis=0)

    return [
        TraceEntry(
            kind=TraceKind.AVAILABLE,
            message=f"Resource R{j}",
            resource=j,
            available=int(available[j]),
            total_allocated=int(totals[j])
        )
        for j in range(len(available))
    ]
