"""
Entry point for running colorwrap as a module: `python -m colorwrap`

The console script defined in pyproject.toml calls `colorwrap.main:main`
directly; both paths end up in the same function.
"""

import sys

from .main import main

if __name__ == "__main__":
    sys.exit(main())
