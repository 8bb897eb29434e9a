"""
Entry point for running xcresult_summary as a module.

Usage:
    python -m xcresult_summary [command] [options]
"""

from xcresult_summary.cli import main

if __name__ == "__main__":
    main()
