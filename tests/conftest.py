import os
import sys


def pytest_configure():
    # Ensure the repo root is importable so `quantumpass.*` works without install
    root = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    if root not in sys.path:
        sys.path.insert(0, root)
