"""Main entry point for anagramarama, for use with `python -m anagramarama`."""

import sys

from anagramarama import main

# Guarded so that worker processes started with "spawn" do not rerun the CLI.
if __name__ == "__main__":
    sys.exit(main())
