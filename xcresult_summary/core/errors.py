"""
Custom exceptions for xcresult-summary.
"""


class XcresultSummaryError(Exception):
    """Base exception for all xcresult-summary errors."""
    pass


class ConfigurationError(XcresultSummaryError):
    """Raised when configuration is invalid or a required input is missing."""
    pass


class BundleNotFoundError(XcresultSummaryError):
    """Raised when the result bundle path does not exist."""
    pass


class ToolInvocationError(XcresultSummaryError):
    """Raised when xcresulttool cannot be run or exits with an error."""
    pass


class ResultParseError(XcresultSummaryError):
    """Raised when xcresulttool output is not valid JSON."""
    pass


class ResultFormatError(XcresultSummaryError):
    """Raised when parsed JSON does not have the expected shape."""
    pass
