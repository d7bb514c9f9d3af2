#!/usr/bin/env python3
# explore_graph.py
# This file is part of Taurus - A Labelled Transition System Explorer
#
# Command-line interface for transition graph queries with configurable logging levels

import sys
import argparse
from pathlib import Path
from typing import List

from core.graph import TransitionGraph
from query import ParseError, QueryError, evaluate, format_result
from utils.graph_reader import GraphFormatError, validate_graph_file
from utils.logger import LogLevel, get_logger


def configure_logging_for_explorer(debug: bool = False) -> None:
    """Configure logging levels for the explorer.

    Query results are reported at INFO, so INFO stays enabled unless debug
    output is requested.

    Args:
        debug: Enable DEBUG level logging
    """
    logger = get_logger()

    if debug:
        logger.set_level(LogLevel.DEBUG)
    else:
        logger.set_level(LogLevel.INFO)


def print_graph_summary(graph: TransitionGraph, list_nodes: bool = False) -> None:
    """Print node and edge counts and the current selection.

    Args:
        graph: Loaded graph
        list_nodes: Also print every node and edge
    """
    logger = get_logger()

    selected = graph.get_selected()
    tau_count = sum(1 for node in graph.nodes if node.is_tau)
    logger.graph_summary(
        len(graph.nodes), len(graph.edges), tau_count, str(selected) if selected else None
    )

    if list_nodes:
        logger.info("\n📋 Nodes:")
        for node in graph.nodes:
            debug_label = f" {node.info.debug}" if node.info.debug else ""
            logger.info(f"  {node}{debug_label}")
        logger.info("\n🔗 Edges:")
        for edge in graph.edges:
            logger.info(f"  {edge}")


def run_queries(graph: TransitionGraph, queries: List[str]) -> int:
    """Evaluate each query string and report its results.

    Args:
        graph: Graph to answer the queries from
        queries: Query strings, each holding one or more ``;``-separated queries

    Returns:
        Number of queries evaluated
    """
    logger = get_logger()
    count = 0

    for text in queries:
        for query, result in evaluate(graph, text):
            count += 1
            logger.query_evaluated(str(query), format_result(result))

    return count


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Taurus Labelled Transition System Explorer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python explore_graph.py -g graph.json --summary
  python explore_graph.py -g graph.json -q "tau_closure(selected())"
  python explore_graph.py -g graph.json -q "children(0); parent(3)" --debug
  python explore_graph.py -g graph.json --validate-only

Query functions:
  empty()  selected()  node(n)  parent(n)  child(n)  is_tau(n)
  children(n)  non_tau_children(n)  tau_children(n)  tau_closure(n)

  A query may stand in for n, e.g. tau_closure(parent(4)).
        """,
    )

    parser.add_argument(
        "-g", "--graph", required=True, type=Path, help="Path to JSON graph dump"
    )

    parser.add_argument(
        "-q",
        "--query",
        action="append",
        default=[],
        dest="queries",
        help="Query to evaluate (repeatable)",
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="List every node and edge"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output"
    )

    parser.add_argument(
        "--validate-only", action="store_true", help="Only validate graph file format"
    )

    parser.add_argument(
        "--summary", action="store_true", help="Print graph summary before queries"
    )

    return parser


def main(argv: List[str] = None) -> int:
    """Main entry point for the graph explorer.

    Args:
        argv: Command line arguments (defaults to ``sys.argv[1:]``)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging_for_explorer(debug=args.debug)
    logger = get_logger()

    try:
        logger.info(f"🔍 Validating graph file: {args.graph}")
        graph = validate_graph_file(str(args.graph))

        if args.validate_only:
            logger.info("✅ Graph validation successful. Exiting.")
            return 0

        if args.summary or args.verbose:
            print_graph_summary(graph, list_nodes=args.verbose)

        if not args.queries:
            logger.debug("No queries given")
            return 0

        count = run_queries(graph, args.queries)
        logger.debug(f"Evaluated {count} queries")
        return 0

    except GraphFormatError as e:
        logger.error(f"Graph file error: {e}")
        return 1

    except ParseError as e:
        logger.error(f"Query parsing error: {e}")
        return 2

    except QueryError as e:
        logger.error(f"Query evaluation error: {e}")
        return 3

    except KeyboardInterrupt:
        logger.error("Exploration interrupted by user")
        return 4

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return 5


if __name__ == "__main__":
    sys.exit(main())
