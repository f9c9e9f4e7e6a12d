class AnalysisError(Exception):
    """Base exception for the structured analysis stage."""


class ConfigurationError(AnalysisError):
    """Raised when the generative-text service has no usable credentials."""


class AnalysisServiceError(AnalysisError):
    """Raised when the AI provider call fails, times out, or returns nothing."""


class MalformedAnalysisOutput(AnalysisError):
    """Raised when model output is not a usable findings object.

    The parser always absorbs it into a fallback record.
    """
