"""
Core modules for xcresult-summary.
"""

from xcresult_summary.core.config import Config
from xcresult_summary.core.errors import (
    XcresultSummaryError,
    ConfigurationError,
    BundleNotFoundError,
    ToolInvocationError,
    ResultParseError,
    ResultFormatError,
)

__all__ = [
    "Config",
    "XcresultSummaryError",
    "ConfigurationError",
    "BundleNotFoundError",
    "ToolInvocationError",
    "ResultParseError",
    "ResultFormatError",
]
