"""
run_layout.py - CLI Entry Point

Forwards execution to the CLI defined in `src/simple_masonry/cli.py`.

Usage:
    python run_layout.py --columns 3 --width 900 --image a.jpg [options]

This wrapper allows you to run the tool directly without needing to
modify PYTHONPATH or install the project as a package.

For help on available options, run:
    python run_layout.py --help
"""
import sys
# Source code in src/ subdirectory
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

import simple_masonry.cli as sm_cli

if __name__ == "__main__":
    sys.exit(sm_cli.main())
