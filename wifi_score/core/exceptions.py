"""
Custom exception hierarchy for the wifi score reporter.

All application exceptions inherit from WifiScoreError.
"""


class WifiScoreError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(WifiScoreError):
    """Invalid or missing configuration."""

    pass


# =============================================================================
# Scoring Errors
# =============================================================================


class ScoringError(WifiScoreError):
    """Base for scoring-related errors."""

    pass


class HistoryFormatError(ScoringError):
    """A link metrics history record could not be formatted.

    Raised while rendering a poll into its csv line. The reporter drops the
    record and carries on with the rest of the poll.
    """

    pass


# =============================================================================
# Dump Errors
# =============================================================================


class DumpError(WifiScoreError):
    """Diagnostic dump error."""

    pass


class DumpTargetNotFoundError(DumpError):
    """No dump target is registered under the requested tag."""

    pass
