"""
State evaluation pipeline for the Banker's Algorithm Visualizer.

Runs validate -> need -> safety -> graphs as one unit. Either the whole
evaluation is returned or a validation error is raised; no partial result
escapes.
"""

import numpy as np
from dataclasses import dataclass

from models.allocation_state import AllocationState
from models.graph import Graph
from algorithms.validation import validate_state
from algorithms.need import compute_need, describe_available
from algorithms.safety import analyze_safety, SafetyResult
from algorithms.allocation_graph import build_allocation_graph
from algorithms.wait_for_graph import build_wait_for_graph
from analysis.trace import Trace


@dataclass(frozen=True, eq=False)
class StateEvaluation:
    """
    Every derived entity of one allocation state.

    Attributes:
        state: The evaluated input snapshot
        need: [P][R] need matrix
        safety: Safety classification, sequence and safety trace
        trace: Full log (need calculations, availability, safety steps)
        allocation_graph: Resource-allocation graph
        wait_for_graph: Wait-for graph
    """
    state: AllocationState
    need: np.ndarray
    safety: SafetyResult
    trace: Trace
    allocation_graph: Graph
    wait_for_graph: Graph

    @property
    def safe(self) -> bool:
        return self.safety.safe


def evaluate_state(state: AllocationState) -> StateEvaluation:
    """
    Evaluate an allocation state end to end.

    Args:
        state: Allocation snapshot

    Returns:
        StateEvaluation holding need, safety result, trace and both graphs

    Raises:
        ShapeError / DomainError: If the state fails validation
    """
    validate_state(
        state.num_processes,
        state.num_resources,
        state.allocation,
        state.max_demand,
        state.available
    )

    need, calculations = compute_need(state.allocation, state.max_demand)
    safety = analyze_safety(state.allocation, need, state.available)

    trace = Trace()
    trace.extend(calculations)
    trace.extend(describe_available(state.allocation, state.available))
    trace.extend(safety.trace.entries)

    return StateEvaluation(
        state=state,
        need=need,
        safety=safety,
        trace=trace,
        allocation_graph=build_allocation_graph(state.allocation, need, state.available),
        wait_for_graph=build_wait_for_graph(state.allocation, need, state.available)
    )
