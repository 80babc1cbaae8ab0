"""
Unit tests for the wealthcalc package namespace.
"""

import subprocess
import sys

import wealthcalc
from wealthcalc import cli


class TestPackage:
    """Test top-level exports."""

    def test_version_shared_with_cli(self):
        assert cli.__version__ == wealthcalc.__version__

    def test_engine_import_does_not_load_cli_stack(self):
        """Importing the engine leaves click and rich unloaded."""
        code = (
            "import sys, wealthcalc; "
            "print(any(m in sys.modules for m in ('click', 'rich', 'wealthcalc.cli')))"
        )
        result = subprocess.run(
            [sys.executable, "-c", code], capture_output=True, text=True, check=True
        )
        assert result.stdout.strip() == "False"
