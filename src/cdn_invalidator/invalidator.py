"""CDN Invalidator - CloudFront cache flushing for media files."""

import uuid
from typing import Iterable

from shared.errors import CDNProviderError, InvalidationRequestFailed, UnknownStatus
from shared.logger import StructuredLogger
from shared.models import CDNConfig, InvalidationRequest, InvalidationResult, InvalidationStatus
from shared.paths import MediaPathGenerator, PathResolver


class InvalidationStatusMapper:
    """Translate CloudFront invalidation states into InvalidationStatus."""

    STATUSES = {
        "InProgress": InvalidationStatus.WAITING,
        "Completed": InvalidationStatus.OK,
    }

    @classmethod
    def map(cls, remote_status: str) -> InvalidationStatus:
        try:
            return cls.STATUSES[remote_status]
        except KeyError:
            raise UnknownStatus(remote_status) from None


class CDNInvalidationClient:
    """Flush media paths from a CloudFront distribution."""

    def __init__(self, config: CDNConfig, cloudfront, path_generator: MediaPathGenerator = None):
        """
        Args:
            config: Distribution id and base path of the CDN
            cloudfront: Transport exposing create_invalidation/get_invalidation (see CloudFrontHelper)
            path_generator: Storage layout used by flush_media
        """
        self.config = config
        self.cloudfront = cloudfront
        self.path_generator = path_generator or MediaPathGenerator()

    def get_path(self, relative_path: str, strict: bool = False) -> str:
        return PathResolver.resolve(self.config.base_path, relative_path, strict)

    def flush_paths(self, paths: Iterable[str]) -> InvalidationResult:
        """
        Invalidate all paths in a single CloudFront request.

        Paths are sent as given; use get_path() first for paths relative to the base path.

        Returns:
            InvalidationResult with the provider-issued id and mapped status
        """
        request = InvalidationRequest.of(paths)

        try:
            invalidation = self.cloudfront.create_invalidation(
                self.config.distribution_id,
                self._caller_reference(),
                list(request.paths),
            )
        except CDNProviderError as e:
            StructuredLogger.error(
                "Cache invalidation failed",
                exception=e,
                distribution_id=self.config.distribution_id,
                paths=list(request.paths),
            )
            raise InvalidationRequestFailed(request.paths) from e

        status = InvalidationStatusMapper.map(invalidation.status)
        StructuredLogger.info(
            "Cache invalidation requested",
            distribution_id=self.config.distribution_id,
            invalidation_id=invalidation.id,
            status=status.value,
        )
        return InvalidationResult(invalidation_id=invalidation.id, status=status)

    def flush(self, path: str) -> InvalidationResult:
        return self.flush_paths([path])

    def flush_by_string(self, path: str) -> InvalidationResult:
        """Same as flush(); kept for existing callers."""
        return self.flush(path)

    def flush_media(self, context: str, media_id: int) -> InvalidationResult:
        """Invalidate every file stored under a media item's directory."""
        directory = self.path_generator.generate_path(context, media_id)
        return self.flush(self.get_path(f"{directory}/*", True))

    def get_flush_status(self, invalidation_id: str) -> InvalidationStatus:
        invalidation = self.cloudfront.get_invalidation(self.config.distribution_id, invalidation_id)

        status = InvalidationStatusMapper.map(invalidation.status)
        StructuredLogger.debug("Fetched invalidation status", invalidation_id=invalidation_id, status=status.value)
        return status

    @staticmethod
    def _caller_reference() -> str:
        return uuid.uuid4().hex
