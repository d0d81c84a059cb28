"""AWS service helpers for CloudFront."""

from typing import List

import boto3
from botocore.config import Config as BotoConfig
from botocore.exceptions import BotoCoreError, ClientError

from shared.errors import CDNProviderError
from shared.logger import StructuredLogger
from shared.models import ProviderInvalidation


class CloudFrontHelper:
    """CloudFront invalidation operations."""

    def __init__(self, region_name: str = "us-east-1", max_attempts: int = 3, client=None):
        self.client = client or boto3.client(
            "cloudfront",
            region_name=region_name,
            config=BotoConfig(retries={"max_attempts": max_attempts, "mode": "standard"}),
        )

    def create_invalidation(
        self,
        distribution_id: str,
        caller_reference: str,
        paths: List[str],
    ) -> ProviderInvalidation:
        """Create one invalidation covering all given paths."""
        try:
            StructuredLogger.info(
                "Creating CloudFront invalidation",
                distribution_id=distribution_id,
                paths_count=len(paths),
            )

            response = self.client.create_invalidation(
                DistributionId=distribution_id,
                InvalidationBatch={
                    "Paths": {"Quantity": len(paths), "Items": list(paths)},
                    "CallerReference": caller_reference,
                },
            )

            invalidation = self._parse(response)
            StructuredLogger.info(
                "CloudFront invalidation created",
                invalidation_id=invalidation.id,
                distribution_id=distribution_id,
            )
            return invalidation
        except (ClientError, BotoCoreError) as e:
            raise CDNProviderError(f"Error invalidating CloudFront: {str(e)}") from e

    def get_invalidation(self, distribution_id: str, invalidation_id: str) -> ProviderInvalidation:
        """Fetch the current state of an invalidation."""
        try:
            response = self.client.get_invalidation(DistributionId=distribution_id, Id=invalidation_id)
            return self._parse(response)
        except (ClientError, BotoCoreError) as e:
            raise CDNProviderError(f"Error fetching CloudFront invalidation {invalidation_id}: {str(e)}") from e

    @staticmethod
    def _parse(response: dict) -> ProviderInvalidation:
        try:
            invalidation = response["Invalidation"]
            return ProviderInvalidation(id=invalidation["Id"], status=invalidation["Status"])
        except (KeyError, TypeError) as e:
            raise CDNProviderError(f"Malformed CloudFront invalidation response: missing {str(e)}") from e
