"""
Safety Algorithm (Banker's Algorithm) for the Banker's Algorithm Visualizer.

Searches for a safe sequence over a fixed allocation state and classifies the
state as SAFE or DEADLOCK, recording every decision in a trace.
"""

import numpy as np
from dataclasses import dataclass, field
from typing import Sequence, Tuple

from analysis.trace import Trace, TraceEntry, TraceKind


@dataclass(frozen=True)
class SafetyResult:
    """
    Outcome of one safety analysis.

    Attributes:
        safe: True if every process could be granted in some order
        sequence: Completion order found (length P when safe)
        completed: Granted processes when unsafe (empty when safe)
        deadlocked: Processes never granted when unsafe (empty when safe)
        trace: Full step log (init, check, execute, result)
    """
    safe: bool
    sequence: Tuple[int, ...]
    completed: Tuple[int, ...] = ()
    deadlocked: Tuple[int, ...] = ()
    trace: Trace = field(default_factory=Trace)

    def __post_init__(self):
        for name in ('sequence', 'completed', 'deadlocked'):
            object.__setattr__(self, name, tuple(getattr(self, name)))

    @property
    def is_deadlock(self) -> bool:
        return not self.safe

    def describe(self) -> str:
        if self.safe:
            return "SAFE (sequence: " + " -> ".join(f"P{i}" for i in self.sequence) + ")"
        blocked = ", ".join(f"P{i}" for i in self.deadlocked)
        return f"DEADLOCK (deadlocked: [{blocked}])"


def analyze_safety(allocation, need, available) -> SafetyResult:
    """
    Check if the state is safe using Banker's safety algorithm.

    Algorithm:
    1. Initialize Work = Available, Finish = [False] * P
    2. Scan processes 0..P-1 for the first i where Finish[i] == False and
       Need[i] <= Work
    3. If found: Finish[i] = True, Work += Allocation[i], append i to the
       sequence, then restart the scan from process 0
    4. Stop after P grants (SAFE) or after a full scan grants nobody (DEADLOCK)

    The "first eligible, restart from zero" order is part of the contract:
    the same state always yields the same sequence and trace.

    Time Complexity: O(P²×R)

    Args:
        allocation: [P][R] current allocation
        need: [P][R] remaining need (from compute_need)
        available: [R] unallocated units

    Returns:
        SafetyResult with the sequence, classification and trace

    References:
        Silberschatz, A., Galvin, P. B., & Gagne, G. (2018).
        Operating System Concepts (10th ed.). Chapter 7.5: Deadlock Avoidance.
    """
    available = np.asarray(available, dtype=np.int64)
    num_resources = len(available)
    num_processes = len(allocation)
    allocation = np.asarray(allocation, dtype=np.int64).reshape(num_processes, num_resources)
    need = np.asarray(need, dtype=np.int64).reshape(num_processes, num_resources)

    trace = Trace()

    # Work = copy of Available (the caller's vector is never modified)
    work = available.copy()
    finish = [False] * num_processes
    sequence = []

    trace.add(TraceEntry(
        kind=TraceKind.INIT,
        message="Initializing Safe Sequence Detection",
        work=tuple(int(w) for w in work),
        finish=tuple(finish)
    ))

    count = 0
    found = True
    while count < num_processes and found:
        found = False

        for i in range(num_processes):
            if finish[i]:
                continue

            comparisons = []
            for j in range(num_resources):
                op = ">" if need[i][j] > work[j] else "<="
                comparisons.append(
                    f"Need[P{i}][R{j}]({need[i][j]}) {op} Work[R{j}]({work[j]})"
                )
            can_allocate = bool(np.all(need[i] <= work))

            trace.add(TraceEntry(
                kind=TraceKind.CHECK,
                message=f"Checking Process P{i}",
                process=i,
                comparisons=tuple(comparisons),
                can_allocate=can_allocate
            ))

            if can_allocate:
                found = True
                finish[i] = True
                sequence.append(i)

                # Process runs to completion and returns its allocation
                previous = work.copy()
                work = work + allocation[i]
                updates = tuple(
                    f"Work[R{j}] = Work[R{j}] + Allocation[P{i}][R{j}] "
                    f"= {previous[j]} + {allocation[i][j]} = {work[j]}"
                    for j in range(num_resources)
                )

                trace.add(TraceEntry(
                    kind=TraceKind.EXECUTE,
                    message=f"Executing Process P{i}",
                    process=i,
                    work=tuple(int(w) for w in work),
                    updates=updates,
                    sequence=tuple(sequence)
                ))

                count += 1
                break  # Restart search from process 0

    safe = len(sequence) == num_processes
    completed = () if safe else tuple(sequence)
    deadlocked = () if safe else tuple(i for i in range(num_processes) if not finish[i])

    trace.add(TraceEntry(
        kind=TraceKind.RESULT,
        message="Safe Sequence Found" if safe else "Deadlock Detected - Unsafe State",
        success=safe,
        sequence=tuple(sequence),
        completed=completed,
        remaining=deadlocked
    ))

    return SafetyResult(
        safe=safe,
        sequence=tuple(sequence),
        completed=completed,
        deadlocked=deadlocked,
        trace=trace
    )


def verify_sequence(allocation, need, available, sequence: Sequence[int]) -> bool:
    """
    Replay a completion order and check every grant was feasible.

    Starting from Work = Available, each process in turn must satisfy
    Need[i] <= Work before its allocation is added back to Work.

    Args:
        allocation: [P][R] current allocation
        need: [P][R] remaining need
        available: [R] unallocated units
        sequence: Process indices in completion order

    Returns:
        True if no step required more than Work held
    """
    available = np.asarray(available, dtype=np.int64)
    num_resources = len(available)
    allocation = np.asarray(allocation, dtype=np.int64).reshape(len(allocation), num_resources)
    need = np.asarray(need, dtype=np.int64).reshape(len(allocation), num_resources)

    if len(set(sequence)) != len(sequence):
        return False

    work = available.copy()
    for i in sequence:
        if not 0 <= i < allocation.shape[0]:
            return False
        if np.any(need[i] > work):
            return False
        work = work + allocation[i]
    return True
