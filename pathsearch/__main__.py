"""Allow ``python -m pathsearch``."""

from pathsearch.cli import main

if __name__ == "__main__":
    main()
