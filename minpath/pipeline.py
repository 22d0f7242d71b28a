"""Command-line pipeline for minpath.

The pipeline is organized in several stages:

1. Configuration (environment, then command-line overrides).
2. Graph loading (edge-list text to the in-memory graph store).
3. Path computation (Dijkstra from the source to the target vertex).
4. Output (result lines on stdout, one diagnostic on stderr).

Exit status is 0 on success, 1 when the input cannot be read or parsed
and 2 when the target is unreachable.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import AppConfig, get_config
from .container import Container
from .domain.errors import ConfigurationError, GraphParseError, MinPathError, NoPathFoundError
from .monitoring import configure_logging
from .services import ShortestPathService, describe_error

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_NO_PATH = 2

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minpath",
        description="Find a minimum-cost path in an undirected weighted graph.",
    )
    parser.add_argument("--input", help="Edge-list file (default: input.txt).")
    parser.add_argument("--source", help="Source vertex name (default: a).")
    parser.add_argument("--target", help="Target vertex name (default: z).")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level for diagnostics on stderr.",
    )
    return parser


def build_config(args: argparse.Namespace, base: Optional[AppConfig] = None) -> AppConfig:
    """Apply command-line overrides on top of the environment configuration."""
    config = base or get_config()

    graph = config.graph
    if args.input is not None:
        graph = graph.model_copy(update={"input_file": Path(args.input)})

    solver = config.solver
    updates = {
        key: value
        for key, value in (("source", args.source), ("target", args.target))
        if value is not None
    }
    if updates:
        solver = solver.model_copy(update=updates)

    observability = config.observability
    if args.log_level is not None:
        observability = observability.model_copy(update={"level": args.log_level})

    return config.model_copy(
        update={"graph": graph, "solver": solver, "observability": observability}
    )


def solve_and_print(service: ShortestPathService) -> int:
    """Run one query and print the result or a diagnostic.

    Returns:
        The process exit status.
    """
    try:
        graph, result = service.solve()
        lines = service.format_result(graph, result)
    except GraphParseError as e:
        logger.debug(
            "Parse failure",
            extra={"line_number": e.line_number, "line": e.line, "reason": e.message},
        )
        print(describe_error(e), file=sys.stderr)
        return EXIT_INPUT_ERROR
    except NoPathFoundError as e:
        print(describe_error(e), file=sys.stderr)
        return EXIT_NO_PATH
    except MinPathError as e:
        print(describe_error(e), file=sys.stderr)
        return EXIT_INPUT_ERROR
    except Exception:
        logger.exception(
            "Unexpected failure",
            extra={"service": type(service).__name__},
        )
        return EXIT_INPUT_ERROR

    for line in lines:
        print(line)
    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for the ``minpath`` command."""
    args = build_parser().parse_args(argv)
    config = build_config(args)

    try:
        configure_logging(config.observability)
    except ConfigurationError as e:
        print(str(e), file=sys.stderr)
        return EXIT_INPUT_ERROR

    container = Container.create_default(config)
    service = container.resolve(ShortestPathService)
    return solve_and_print(service)


def run_pipeline() -> None:
    """Run main() and exit the process with its status."""
    sys.exit(main())


if __name__ == "__main__":
    run_pipeline()
