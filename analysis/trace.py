"""
Trace Model for the Banker's Algorithm Visualizer.

Defines the step records emitted while deriving the need matrix and
running the safety algorithm. A trace explains the decisions made; nothing
reads it back to drive control flow.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


class TraceKind(Enum):
    """Types of trace entries."""
    CALCULATION = "calculation"
    AVAILABLE = "available"
    INIT = "init"
    CHECK = "check"
    EXECUTE = "execute"
    RESULT = "result"


@dataclass(frozen=True)
class TraceEntry:
    """
    A single step of the analysis.

    Only the fields relevant to the entry's kind are populated.

    Attributes:
        kind: Type of entry
        message: Human-readable headline
        process: Process index involved (calculation, check, execute)
        resource: Resource index involved (calculation, available)
        max_value: Max[i][j] operand (calculation)
        allocated: Allocation[i][j] operand (calculation)
        need: Computed Need[i][j] (calculation)
        formula: Formula string (calculation)
        available: Available count (available)
        total_allocated: Column total of allocation (available)
        work: Work vector after the step (init, execute)
        finish: Finish flags (init)
        comparisons: Per-resource Need <= Work comparisons (check)
        can_allocate: Whether every comparison held (check)
        updates: Per-resource Work update strings (execute)
        sequence: Safe sequence so far (execute, result)
        success: Whether the state is safe (result)
        completed: Granted processes when unsafe (result)
        remaining: Processes never granted (result)
    """
    kind: TraceKind
    message: str = ""
    process: Optional[int] = None
    resource: Optional[int] = None
    max_value: Optional[int] = None
    allocated: Optional[int] = None
    need: Optional[int] = None
    formula: str = ""
    available: Optional[int] = None
    total_allocated: Optional[int] = None
    work: Tuple[int, ...] = ()
    finish: Tuple[bool, ...] = ()
    comparisons: Tuple[str, ...] = ()
    can_allocate: Optional[bool] = None
    updates: Tuple[str, ...] = ()
    sequence: Tuple[int, ...] = ()
    success: Optional[bool] = None
    completed: Tuple[int, ...] = ()
    remaining: Tuple[int, ...] = ()

    def details(self) -> str:
        """Detail line shown under the headline."""
        if self.kind == TraceKind.CALCULATION:
            return self.formula
        elif self.kind == TraceKind.AVAILABLE:
            return (
                f"Resource {self.resource}: Available = {self.available}, "
                f"Total Allocated = {self.total_allocated}"
            )
        elif self.kind == TraceKind.INIT:
            flags = ", ".join('T' if f else 'F' for f in self.finish)
            return f"Work = [{', '.join(str(w) for w in self.work)}], Finish = [{flags}]"
        elif self.kind == TraceKind.CHECK:
            return " ".join(self.comparisons)
        elif self.kind == TraceKind.EXECUTE:
            return " ".join(self.updates)
        elif self.kind == TraceKind.RESULT:
            seq = " -> ".join(f"P{i}" for i in self.sequence)
            if self.success:
                return f"Sequence: {seq}"
            completed = ", ".join(f"P{i}" for i in self.completed)
            remaining = ", ".join(f"P{i}" for i in self.remaining)
            return f"Completed: [{completed}], Deadlocked: [{remaining}]"
        return ""

    def __str__(self) -> str:
        """Format entry for logging."""
        base = f"[{self.kind.value}]"
        if self.message:
            base += f" {self.message}"
        details = self.details()
        return f"{base}: {details}" if details else base


@dataclass
class Trace:
    """Append-only collection of trace entries."""
    entries: List[TraceEntry] = field(default_factory=list)

    def add(self, entry: TraceEntry) -> None:
        """Add an entry to the trace."""
        self.entries.append(entry)

    def extend(self, entries: List[TraceEntry]) -> None:
        self.entries.extend(entries)

    def get_entries_by_kind(self, kind: TraceKind) -> List[TraceEntry]:
        """Get all entries of a specific kind."""
        return [e for e in self.entries if e.kind == kind]

    def last(self) -> Optional[TraceEntry]:
        return self.entries[-1] if self.entries else None

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def display(self) -> str:
        """Format all entries for display."""
        return "\n".join(str(entry) for entry in self.entries)
