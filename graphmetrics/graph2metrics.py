#!/usr/bin/env python3
"""
graph2metrics.py - Compute structural metrics for a graph document.

Input: JSON graph document {"directed": bool, "node_count": int, "edges": [[u, v], ...]}
Output: JSON snapshot of the MetricsResult (stdout, or --output file)
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from graphmetrics.errors import NumericInstabilityError
from graphmetrics.graph import Graph
from graphmetrics.metrics import MetricsResult, compute_metrics
from graphmetrics.utils.config import (ConfigValidationError,
                                       get_engine_settings, load_config)
from graphmetrics.utils.exit_codes import (EXIT_CONFIG_ERROR,
                                           EXIT_INPUT_ERROR, EXIT_IO_ERROR,
                                           EXIT_RUNTIME_ERROR, EXIT_SUCCESS,
                                           log_exit)
from graphmetrics.utils.validation import (GraphInvariantError,
                                           ValidationError,
                                           validate_graph_invariants)


def setup_logging(log_file: Path, verbose: bool = False) -> logging.Logger:
    """Set up logging configuration.

    Args:
        log_file: Path to log file
        verbose: Log at DEBUG level

    Returns:
        Configured logger instance
    """
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.FileHandler(log_file, encoding="utf-8"), logging.StreamHandler()],
        force=True,
    )

    logger = logging.getLogger("graph2metrics")
    logger.info("Logging initialized")
    return logger


def load_graph(input_file: Path, logger: logging.Logger) -> Graph:
    """Load and validate a graph document.

    Args:
        input_file: JSON graph document
        logger: Logger instance

    Returns:
        Graph built from the document

    Raises:
        FileNotFoundError: If the input file does not exist
        ValidationError: If the document is not valid JSON or breaks the schema
        GraphInvariantError: If an edge references a missing node
    """
    if not input_file.exists():
        raise FileNotFoundError(f"Graph file not found: {input_file}")

    logger.info(f"Loading graph: {input_file}")
    try:
        with open(input_file, encoding="utf-8") as f:
            graph_data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON in {input_file}: {e}")

    logger.info("Validating graph data")
    validate_graph_invariants(graph_data)

    graph = Graph.from_edges(
        graph_data["node_count"],
        [tuple(edge) for edge in graph_data["edges"]],
        directed=graph_data["directed"],
    )

    logger.info("Graph statistics:")
    logger.info(f"  - Nodes: {graph.node_count}")
    logger.info(f"  - Edges: {graph.edge_count}")
    logger.info(f"  - Is directed: {graph.directed}")

    return graph


def save_output_data(
    result: MetricsResult, output_file: Optional[Path], logger: logging.Logger
) -> None:
    """Write the metrics snapshot as JSON to a file, or stdout when no file is given."""
    snapshot = result.to_dict()

    if output_file is None:
        json.dump(snapshot, sys.stdout, ensure_ascii=False, indent=2)
        sys.stdout.write("\n")
        return

    output_file.parent.mkdir(parents=True, exist_ok=True)
    logger.info(f"Saving metrics: {output_file}")
    with open(output_file, "w", encoding="utf-8") as f:
        json.dump(snapshot, f, ensure_ascii=False, indent=2)


def _report(message: str) -> None:
    # Console progress goes to stderr so stdout stays pure JSON
    print(message, file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for graph2metrics utility.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = argparse.ArgumentParser(
        description="Compute structural metrics for an unweighted graph"
    )
    parser.add_argument("input", type=Path, help="JSON graph document")
    parser.add_argument(
        "--output", type=Path, default=None, help="Write metrics JSON here instead of stdout"
    )
    parser.add_argument(
        "--config", type=Path, default=None, help="TOML configuration (default: bundled config.toml)"
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=Path("logs") / "graph2metrics.log",
        help="Log file path",
    )
    parser.add_argument("--verbose", action="store_true", help="Log at DEBUG level")
    args = parser.parse_args(argv)

    logger = setup_logging(args.log_file, args.verbose)

    try:
        logger.info("=== START graph2metrics ===")

        config: Dict[str, Any] = load_config(args.config)
        settings = get_engine_settings(config)
        if not args.verbose:
            logging.getLogger().setLevel(settings["log_level"].upper())
        logger.info(f"Config loaded, bfs_workers: {settings['bfs_workers']}")

        graph = load_graph(args.input, logger)
        _report(f"Graph loaded: {graph.node_count} nodes, {graph.edge_count} edges")

        result = compute_metrics(graph, config, logger)

        save_output_data(result, args.output, logger)

        success_msg = "Graph metrics computed successfully"
        _report(f"✓ {success_msg}")
        logger.info("=== SUCCESS graph2metrics ===")
        log_exit(logger, EXIT_SUCCESS, success_msg)
        return EXIT_SUCCESS

    except FileNotFoundError as e:
        error_msg = f"Input file not found: {e}"
        _report(f"✗ Error: {error_msg}")
        log_exit(logger, EXIT_INPUT_ERROR, error_msg)
        return EXIT_INPUT_ERROR

    except ConfigValidationError as e:
        error_msg = f"Configuration error: {e}"
        _report(f"✗ Error: {error_msg}")
        log_exit(logger, EXIT_CONFIG_ERROR, error_msg)
        return EXIT_CONFIG_ERROR

    except (ValidationError, GraphInvariantError) as e:
        error_msg = f"Validation error: {e}"
        _report(f"✗ Error: {error_msg}")
        log_exit(logger, EXIT_INPUT_ERROR, error_msg)
        return EXIT_INPUT_ERROR

    except NumericInstabilityError as e:
        error_msg = f"Numerical failure: {e}"
        _report(f"✗ Error: {error_msg}")
        log_exit(logger, EXIT_RUNTIME_ERROR, error_msg)
        return EXIT_RUNTIME_ERROR

    except OSError as e:
        error_msg = f"I/O error: {e}"
        _report(f"✗ Error: {error_msg}")
        log_exit(logger, EXIT_IO_ERROR, error_msg)
        return EXIT_IO_ERROR

    except Exception as e:
        error_msg = f"Unexpected error: {e}"
        _report(f"✗ Error: {error_msg}")
        log_exit(logger, EXIT_RUNTIME_ERROR, error_msg)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
