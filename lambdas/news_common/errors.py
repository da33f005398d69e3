# lambdas/news_common/errors.py
from typing import Optional

from botocore.exceptions import BotoCoreError, ClientError


class NewsApiError(Exception):
    """Base class for every error raised by the news API."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(NewsApiError):
    """Raised at cold start when required environment configuration is missing."""
    pass


class StorageError(NewsApiError):
    """
    Any failure coming back from the DynamoDB layer: throttling, connectivity,
    a missing table, a malformed request.
    """

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.code = code

    @classmethod
    def from_boto(cls, error: Exception) -> "StorageError":
        if isinstance(error, ClientError):
            details = error.response.get('Error', {})
            return cls(details.get('Message') or str(error), code=details.get('Code'))
        if isinstance(error, BotoCoreError):
            return cls(str(error), code=error.__class__.__name__)
        return cls(str(error) or 'Unknown error')


class InvalidRequestError(NewsApiError, ValueError):
    """Client input errors, answered with a 400."""
    pass


class MissingBodyError(InvalidRequestError):
    pass


class MalformedBodyError(InvalidRequestError):
    pass
