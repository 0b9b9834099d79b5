"""
Pytest configuration for the test suite.

Adds the project root to sys.path so that imports like
``from phone_reader.phone import ...`` and ``import main`` work without
installing the package.
"""

import sys
from pathlib import Path

# Add project root so ``phone_reader`` and ``main`` import
_project_root = str(Path(__file__).resolve().parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)
