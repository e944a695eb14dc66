"""Test configuration and fixtures.

Provides:
- Python path setup for imports
"""

import sys
from pathlib import Path

# Add the src directory to the Python path for imports
src_root = Path(__file__).parent.parent / "src"
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))
