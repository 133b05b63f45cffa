"""
Analysis session for the Banker's Algorithm Visualizer.

Holds the current allocation state for an editing front end and the
entities derived from it. Each step is triggered explicitly; editing an
input cell replaces the state and drops whatever was derived from it.

Invalidation rule:
- edit allocation or max_demand -> drop need, availability summary,
  safety result and both graphs
- edit available -> drop availability summary, safety result and both graphs
"""

import numpy as np
from typing import Any, List, Optional, Tuple

from models.allocation_state import AllocationState
from models.graph import Graph
from algorithms.validation import coerce_cell
from algorithms.need import compute_need, describe_available
from algorithms.safety import analyze_safety, SafetyResult
from algorithms.allocation_graph import build_allocation_graph
from algorithms.wait_for_graph import build_wait_for_graph
from analysis.evaluation import evaluate_state, StateEvaluation
from analysis.trace import Trace, TraceEntry, TraceKind
from utils.logger import AnalysisLogger


class AnalysisSession:
    """
    Current state plus cached derived entities.

    Attributes:
        state: Current allocation snapshot
        need: Need matrix, or None until compute_need() runs
        safety: Safety result, or None until find_safe_sequence() runs
        allocation_graph / wait_for_graph: Graphs, or None until build_graphs() runs
    """

    def __init__(
        self,
        state: Optional[AllocationState] = None,
        logger: Optional[AnalysisLogger] = None
    ):
        self.logger = logger
        self.state = state if state is not None else AllocationState.empty(5, 3)
        self._clear_all()

    def _clear_all(self) -> None:
        self.need: Optional[np.ndarray] = None
        self._calculations: List[TraceEntry] = []
        self._clear_availability()

    def _clear_availability(self) -> None:
        self._availability: List[TraceEntry] = []
        self.safety: Optional[SafetyResult] = None
        self.allocation_graph: Optional[Graph] = None
        self.wait_for_graph: Optional[Graph] = None

    def _debug(self, message: str) -> None:
        if self.logger:
            self.logger.log(message, "debug")

    # Inputs

    def resize(self, num_processes: int, num_resources: int) -> None:
        """Replace the state with an all-zero state of new dimensions."""
        self.load(AllocationState.empty(num_processes, num_resources))

    def load(self, state: AllocationState) -> None:
        """Replace the whole state (e.g. a loaded scenario or generated sample)."""
        self.state = state
        self._clear_all()
        self._debug(
            f"Loaded state: {state.num_processes} processes, "
            f"{state.num_resources} resources"
        )

    def set_allocation(self, process: int, resource: int, value: Any) -> None:
        """Edit one allocation cell from raw input."""
        self.state = self.state.with_allocation(process, resource, coerce_cell(value))
        self._clear_all()
        self._debug(f"Edited allocation[{process}][{resource}]; derived results dropped")

    def set_max_demand(self, process: int, resource: int, value: Any) -> None:
        """Edit one max-demand cell from raw input."""
        self.state = self.state.with_max_demand(process, resource, coerce_cell(value))
        self._clear_all()
        self._debug(f"Edited max_demand[{process}][{resource}]; derived results dropped")

    def set_available(self, resource: int, value: Any) -> None:
        """Edit one available cell from raw input."""
        self.state = self.state.with_available(resource, coerce_cell(value))
        self._clear_availability()
        self._debug(f"Edited available[{resource}]; safety result and graphs dropped")

    # Derivation steps

    def compute_need(self) -> np.ndarray:
        """Derive the need matrix for the current state."""
        self.need, self._calculations = compute_need(self.state.allocation, self.state.max_demand)
        if self.logger:
            self.logger.log_need(self.need)
        return self.need

    def describe_available(self) -> List[TraceEntry]:
        """Summarize availability per resource type."""
        self._availability = describe_available(self.state.allocation, self.state.available)
        return self._availability

    def find_safe_sequence(self) -> SafetyResult:
        """Run the safety algorithm, deriving need first if necessary."""
        if self.need is None:
            self.compute_need()
        self.safety = analyze_safety(self.state.allocation, self.need, self.state.available)
        if self.logger:
            self.logger.log_result(self.safety)
        return self.safety

    def build_graphs(self) -> Tuple[Graph, Graph]:
        """
        Build both graphs from the current state.

        Without a need matrix the allocation graph has no request edges and
        the wait-for graph is empty.
        """
        self.allocation_graph = build_allocation_graph(
            self.state.allocation, self.need, self.state.available
        )
        self.wait_for_graph = build_wait_for_graph(
            self.state.allocation, self.need, self.state.available
        )
        if self.logger:
            self.logger.log_graph("Resource-Allocation Graph", self.allocation_graph)
            self.logger.log_graph("Wait-For Graph", self.wait_for_graph)
        return self.allocation_graph, self.wait_for_graph

    def evaluate(self) -> StateEvaluation:
        """Run every step at once and cache the results."""
        evaluation = evaluate_state(self.state)
        self.need = evaluation.need
        self._calculations = evaluation.trace.get_entries_by_kind(TraceKind.CALCULATION)
        self._availability = evaluation.trace.get_entries_by_kind(TraceKind.AVAILABLE)
        self.safety = evaluation.safety
        self.allocation_graph = evaluation.allocation_graph
        self.wait_for_graph = evaluation.wait_for_graph
        return evaluation

    @property
    def trace(self) -> Trace:
        """Log of every step run since the last edit, in step order."""
        trace = Trace()
        trace.extend(self._calculations)
        trace.extend(self._availability)
        if self.safety is not None:
            trace.extend(self.safety.trace.entries)
        return trace
