"""CLI entrypoint for the SAT-backed crossword solver."""

import sys

from crossword_sat.cli import main


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
