"""Custom exceptions for CDN invalidation."""

from typing import Iterable


class CDNError(Exception):
    """Base exception for CDN errors."""

    pass


class ConfigurationError(CDNError):
    """Configuration or environment variable errors."""

    pass


class CDNProviderError(CDNError):
    """CloudFront API call errors."""

    pass


class InvalidationRequestFailed(CDNError):
    """The provider rejected or could not complete an invalidation request."""

    def __init__(self, paths: Iterable[str], message: str = None):
        self.paths = list(paths)
        quoted = '", "'.join(self.paths)
        super().__init__(message or f'Unable to flush paths "{quoted}".')


class UnknownStatus(CDNError):
    """The provider returned an invalidation status we do not recognise."""

    def __init__(self, status: str):
        self.status = status
        super().__init__(f'Unable to determine the flush status from the given response: "{status}".')
