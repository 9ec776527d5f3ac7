import sys
from pathlib import Path

import matplotlib

# Headless backend for all rendering tests
matplotlib.use("Agg")

# Add src to Python path
src_path = str(Path(__file__).parent.parent / "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
