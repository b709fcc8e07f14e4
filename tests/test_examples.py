"""Smoke tests for example scripts.

These tests ensure that the example scripts run their main execution paths
without raising exceptions.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

# Determine the repo root
ROOT = Path(__file__).resolve().parents[1]


def test_graph_algorithms_demo_runs() -> None:
    """Test that examples/graph_algorithms_demo.py runs successfully."""
    script = ROOT / "examples" / "graph_algorithms_demo.py"
    assert script.exists(), f"Example script not found: {script}"

    result = subprocess.run(
        [sys.executable, str(script)],
        capture_output=True,
        text=True,
        check=False,
        timeout=30,  # Should complete in seconds
    )

    assert result.returncode == 0, (
        f"Example script failed with return code {result.returncode}.\n"
        f"STDOUT:\n{result.stdout}\n"
        f"STDERR:\n{result.stderr}"
    )

    # Shortest path A -> B -> C -> D costs 4.5 against 6.5 via A -> C
    assert "Shortest path A to D: A -> B -> C -> D (weight 4.5)" in result.stdout
    assert "All examples completed" in result.stdout
