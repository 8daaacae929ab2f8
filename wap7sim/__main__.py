"""Run the simulator with ``python -m wap7sim``."""

import sys

from wap7sim.console import main

if __name__ == "__main__":
    sys.exit(main())
