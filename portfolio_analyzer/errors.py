"""Exceptions raised while acquiring profile data."""


class PortfolioAnalyzerError(Exception):
    """Base class for analysis failures surfaced to the caller."""


class InvalidInputError(PortfolioAnalyzerError, ValueError):
    """The identifier is empty or cannot be parsed into a username."""


class NotFoundError(PortfolioAnalyzerError):
    """The requested GitHub user does not exist."""


class RateLimitedError(PortfolioAnalyzerError):
    """GitHub refused the request because the rate limit was exceeded."""


class TransportFailureError(PortfolioAnalyzerError):
    """Any other failure: network errors, bad status codes, malformed payloads."""
