"""
Models package for the Banker's Algorithm Visualizer.
Contains the allocation state snapshot and the graph view-models.
"""
