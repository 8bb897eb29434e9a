"""
xcresult-summary

Summarizes Xcode result bundles (.xcresult) for CI: build status, test
statistics, failures with source locations, and GitHub Actions outputs.
"""

__version__ = "0.1.0"

from xcresult_summary.core.config import Config
from xcresult_summary.core.pipeline import SummaryPipeline, run

__all__ = [
    "Config",
    "SummaryPipeline",
    "run",
]
