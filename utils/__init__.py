"""
Utilities for the Banker's Algorithm Visualizer.
Scenario loading, sample generation and logging.
"""
