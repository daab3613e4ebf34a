import sys
import os

# Shared sample tables live next to this file (tests/samples.py)
tests_dir = os.path.dirname(os.path.abspath(__file__))
if tests_dir not in sys.path:
    sys.path.insert(0, tests_dir)
