"""
Logger utility for the Banker's Algorithm Visualizer.

Provides step-by-step logging of an analysis run with verbosity levels.
"""

from typing import Optional
from datetime import datetime

import numpy as np


class AnalysisLogger:
    """
    Logger for analysis steps and results.

    Format: "[check] Checking Process P1: Need[P1][R0](1) <= Work[R0](3) ..."
    """

    def __init__(self, verbose: bool = False, log_file: Optional[str] = None):
        """
        Initialize logger.

        Args:
            verbose: Enable debug output
            log_file: Optional file path mirroring console output
        """
        self.verbose = verbose
        self.log_file = log_file
        self.file_handle = None

        if self.log_file:
            self.file_handle = open(self.log_file, 'w', encoding='utf-8')
            self._write_header()

    def _write_header(self) -> None:
        """Write log file header."""
        if self.file_handle:
            timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
            self.file_handle.write(f"Analysis Log - {timestamp}\n")
            self.file_handle.write("="*60 + "\n\n")

    def log(self, message: str, level: str = "info") -> None:
        """
        Log a message.

        Args:
            message: Message to log
            level: Log level (info, debug, warning, error)
        """
        if level == "debug" and not self.verbose:
            return

        formatted = self._format_message(message, level)

        print(formatted)

        if self.file_handle:
            self.file_handle.write(formatted + "\n")
            self.file_handle.flush()

    def _format_message(self, message: str, level: str) -> str:
        """Format message with level prefix."""
        if level == "error":
            return f"[ERROR] {message}"
        elif level == "warning":
            return f"[WARNING] {message}"
        elif level == "debug":
            return f"[DEBUG] {message}"
        else:
            return message

    def log_need(self, need: np.ndarray) -> None:
        """Log the derived need matrix, one row per process."""
        self.log("Need Matrix (Max - Allocation):")
        for i, row in enumerate(need):
            self.log(f"  P{i}: {[int(v) for v in row]}")

    def log_trace(self, trace) -> None:
        """
        Log every entry of a trace.

        Calculation and check entries are debug-level; the rest are info.
        """
        for entry in trace:
            level = "debug" if entry.kind.value in ("calculation", "check") else "info"
            self.log(f"  {entry}", level)

    def log_result(self, result) -> None:
        """
        Log a safety classification.

        Args:
            result: SafetyResult from the safety algorithm
        """
        if result.safe:
            self.log(f"State is {result.describe()}")
        else:
            self.log(f"State is {result.describe()}", "warning")
            completed = ", ".join(f"P{i}" for i in result.completed)
            self.log(f"  Completed before blocking: [{completed}]")

    def log_graph(self, title: str, graph) -> None:
        """
        Log a graph summary; individual edges at debug level.

        Args:
            title: Graph name
            graph: Graph view-model
        """
        self.log(f"{title}: {len(graph.nodes)} nodes, {len(graph.edges)} edges")
        for edge in graph.edges:
            self.log(f"  {edge}", "debug")

    def close(self) -> None:
        """Close log file if open."""
        if self.file_handle:
            self.file_handle.close()
            self.file_handle = None

    def __del__(self):
        """Cleanup on destruction."""
        self.close()
