# topic_sentiment/sentiment_analysis/errors.py
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    CONFIGURATION_ERROR = "ConfigurationError"
    INVALID_INPUT = "InvalidInput"
    CONTENT_UNAVAILABLE = "ContentUnavailable"
    EMPTY_RESPONSE = "EmptyResponse"
    MALFORMED_RESPONSE = "MalformedResponse"
    UNKNOWN_ERROR = "UnknownError"


class AnalysisError(Exception):
    """Base error for the sentiment pipeline. ``kind`` tells callers what went wrong."""

    kind: ErrorKind = ErrorKind.UNKNOWN_ERROR

    def __init__(self, message: str, kind: Optional[ErrorKind] = None):
        super().__init__(message)
        self.message = message
        if kind is not None:
            self.kind = kind


class ConfigurationError(AnalysisError):
    """No API credential configured."""

    kind = ErrorKind.CONFIGURATION_ERROR


class InvalidInput(AnalysisError):
    """Post text or topic is blank."""

    kind = ErrorKind.INVALID_INPUT


class ContentUnavailable(AnalysisError):
    """The model could not retrieve the text behind a URL."""

    kind = ErrorKind.CONTENT_UNAVAILABLE


class EmptyResponse(AnalysisError):
    """The structured analysis request came back without text."""

    kind = ErrorKind.EMPTY_RESPONSE


class MalformedResponse(AnalysisError):
    """The structured analysis reply was not valid JSON or did not match the schema."""

    kind = ErrorKind.MALFORMED_RESPONSE


class UnknownError(AnalysisError):
    """Any failure that is not already an AnalysisError, e.g. a transport error."""

    kind = ErrorKind.UNKNOWN_ERROR


class AnalysisFailed(AnalysisError):
    """Raised once at the orchestration boundary, wrapping the stage that failed."""

    PREFIX = "Analysis failed: "

    @classmethod
    def wrap(cls, error: Exception) -> "AnalysisFailed":
        if not isinstance(error, AnalysisError):
            error = UnknownError(str(error) or error.__class__.__name__)
        return cls(f"{cls.PREFIX}{error.message}", kind=error.kind)
