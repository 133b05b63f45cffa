"""
Analysis package for the Banker's Algorithm Visualizer.
Contains the step trace, the evaluation pipeline, the editing session and graph export.
"""
