"""Allow ``python -m tree_parser``."""

from tree_parser.cli import main

if __name__ == "__main__":
    main()
