# main.py
import sys

from poker_discard.cli import main

# =============================================================================
# DISCARD ESTIMATOR
#   python main.py --trials 750000 < hands.txt
# =============================================================================
if __name__ == "__main__":
    sys.exit(main())
