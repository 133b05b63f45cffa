#!/usr/bin/env python3
"""
Banker's Algorithm Visualizer
Command-line entry point for the state-evaluation engine.

Loads an allocation state (scenario file or generated sample), derives the
need matrix, runs the safety algorithm and builds the resource-allocation
and wait-for graphs.
"""

import argparse
import sys
from typing import List, Optional

from models.allocation_state import AllocationState
from utils.scenario_loader import load_scenario, ScenarioLoadError
from utils.sample_generator import generate_sample
from utils.logger import AnalysisLogger
from analysis.evaluation import evaluate_state, StateEvaluation
from analysis.export import save_graph, GraphExportError
from algorithms.allocation_graph import request_reveal_order


def run_analysis(
    state: AllocationState,
    logger: AnalysisLogger,
    show_trace: bool = False
) -> StateEvaluation:
    """
    Evaluate a state and log every stage.

    Args:
        state: Allocation snapshot to analyze
        logger: Output sink
        show_trace: Log the full step trace

    Returns:
        StateEvaluation with need, safety result and graphs
    """
    evaluation = evaluate_state(state)

    logger.log(f"\n{'='*60}")
    logger.log("STATE EVALUATION")
    logger.log(f"{'='*60}")
    logger.log(state.display(evaluation.need))

    if show_trace:
        logger.log("\nTrace:")
        logger.log_trace(evaluation.trace)

    logger.log("")
    logger.log_result(evaluation.safety)

    logger.log("")
    logger.log_graph("Resource-Allocation Graph", evaluation.allocation_graph)
    logger.log_graph("Wait-For Graph", evaluation.wait_for_graph)

    pending = request_reveal_order(evaluation.allocation_graph)
    logger.log(f"  Pending requests: {len(pending)}", "debug")

    return evaluation


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the visualizer."""
    parser = argparse.ArgumentParser(
        description="Banker's Algorithm Visualizer - safety analysis of an allocation state"
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        '--scenario',
        type=str,
        help='Path to scenario JSON file'
    )
    source.add_argument(
        '--sample',
        action='store_true',
        help='Generate a random sample state'
    )
    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Seed for --sample (default: random)'
    )
    parser.add_argument(
        '--show-trace',
        action='store_true',
        help='Print the full step trace'
    )
    parser.add_argument(
        '--export-graph',
        choices=['resource', 'wait'],
        help='Write one graph as JSON for an external viewer'
    )
    parser.add_argument(
        '--output',
        type=str,
        default='graph.json',
        help='Output path for --export-graph (default: graph.json)'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose logging'
    )
    parser.add_argument(
        '--log-file',
        type=str,
        default=None,
        help='Mirror output to a log file'
    )

    args = parser.parse_args(argv)

    if args.seed is not None and not args.sample:
        parser.error('--seed requires --sample')

    logger = AnalysisLogger(verbose=args.verbose, log_file=args.log_file)
    try:
        if args.sample:
            sample = generate_sample(seed=args.seed)
            state = sample.state
            logger.log(f"Generated sample ({sample.recipe} recipe)")
        else:
            try:
                state, description = load_scenario(args.scenario)
            except ScenarioLoadError as e:
                logger.log(f"Failed to load scenario: {e}", "error")
                return 1
            logger.log(f"Scenario: {args.scenario}")
            if description:
                logger.log(f"  {description}")

        evaluation = run_analysis(state, logger, args.show_trace)

        if args.export_graph:
            graph = (
                evaluation.allocation_graph if args.export_graph == 'resource'
                else evaluation.wait_for_graph
            )
            try:
                path = save_graph(graph, args.export_graph, args.output)
            except GraphExportError as e:
                logger.log(str(e), "error")
                return 1
            logger.log(f"\nExported {args.export_graph} graph to {path}")

        return 0
    finally:
        logger.close()


if __name__ == '__main__':
    sys.exit(main())
