"""Allow ``python -m eight_puzzle``."""

from eight_puzzle.cli.main import main

if __name__ == "__main__":  # pragma: no cover
    main()
