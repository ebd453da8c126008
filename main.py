# main.py
"""Run the amortization CLI from a source checkout: python main.py -p 100000 -r 0.05 -n 360"""

import sys

from amort.cli import main

if __name__ == "__main__":
    sys.exit(main())
