"""Simple launcher for minpath.

Runs the command-line pipeline from a source checkout, without
installing the package first.
"""

from __future__ import annotations

from minpath.pipeline import run_pipeline


def main() -> None:
    run_pipeline()


if __name__ == "__main__":
    main()
