import sys
from pathlib import Path

# Make `src/` and the shared test helpers importable without an install.
_HERE = Path(__file__).resolve().parent
for _p in (_HERE.parent / "src", _HERE):
    if str(_p) not in sys.path:
        sys.path.insert(0, str(_p))
