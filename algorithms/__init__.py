"""
Algorithms package for the Banker's Algorithm Visualizer.
Contains input validation, need derivation, the safety algorithm and the graph builders.
"""
