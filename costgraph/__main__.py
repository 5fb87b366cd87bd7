"""Allow ``python -m costgraph``."""

from costgraph.cli import main

if __name__ == "__main__":
    main()
