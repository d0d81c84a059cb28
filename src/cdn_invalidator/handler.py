"""Lambda handlers for CDN cache invalidation."""

import json
from typing import Any, Dict, List

from shared.aws_helpers import CloudFrontHelper
from shared.config import Config
from shared.errors import CDNError
from shared.logger import StructuredLogger
from shared.models import CDNConfig
from invalidator import CDNInvalidationClient


def build_client() -> CDNInvalidationClient:
    """Wire the invalidation client from environment configuration."""
    Config.validate()

    cloudfront = CloudFrontHelper(region_name=Config.AWS_REGION, max_attempts=Config.CDN_MAX_ATTEMPTS)
    return CDNInvalidationClient(CDNConfig.from_env(), cloudfront)


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Process SQS messages to invalidate CloudFront cache.

    Expected SQS message body (any combination of keys):
    {
        "paths_to_invalidate": ["/media/user/0001/01/thumb_10_big.jpg", ...],
        "relative_paths": ["user/0001/01/thumb_10_small.jpg", ...],
        "media_context": "user",
        "media_id": 10
    }
    """
    try:
        StructuredLogger.info("CDN invalidator lambda invoked", request_id=context.aws_request_id)

        client = build_client()

        invalidation_ids = []
        failed = 0

        for record in event.get("Records", []):
            try:
                message_body = json.loads(record["body"])
                _process_message(client, message_body, invalidation_ids)

            except json.JSONDecodeError as e:
                failed += 1
                StructuredLogger.error(
                    "Invalid SQS message format",
                    exception=e,
                    request_id=context.aws_request_id,
                )
            except (CDNError, KeyError, TypeError, ValueError) as e:
                failed += 1
                StructuredLogger.error(
                    "Error processing SQS record",
                    exception=e,
                    message_id=record.get("messageId"),
                    request_id=context.aws_request_id,
                )

        return {
            "statusCode": 200,
            "body": json.dumps({"invalidation_ids": invalidation_ids, "failed_records": failed}),
        }

    except CDNError as e:
        StructuredLogger.error(
            "CDN error",
            exception=e,
            request_id=context.aws_request_id,
        )
        return {
            "statusCode": 400,
            "body": json.dumps({"error": str(e)}),
        }
    except Exception as e:
        StructuredLogger.error(
            "Unexpected error in CDN invalidator",
            exception=e,
            request_id=context.aws_request_id,
        )
        return {
            "statusCode": 500,
            "body": json.dumps({"error": "Internal server error"}),
        }


def status_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """Report the status of an invalidation: {"invalidation_id": "..."}."""
    invalidation_id = event.get("invalidation_id")
    if not invalidation_id:
        return {
            "statusCode": 400,
            "body": json.dumps({"error": "Missing invalidation_id"}),
        }

    try:
        status = build_client().get_flush_status(invalidation_id)
    except CDNError as e:
        StructuredLogger.error(
            "Invalidation status lookup failed",
            exception=e,
            invalidation_id=invalidation_id,
            request_id=context.aws_request_id,
        )
        return {
            "statusCode": 400,
            "body": json.dumps({"error": str(e)}),
        }
    except Exception as e:
        StructuredLogger.error(
            "Unexpected error in invalidation status lookup",
            exception=e,
            invalidation_id=invalidation_id,
            request_id=context.aws_request_id,
        )
        return {
            "statusCode": 500,
            "body": json.dumps({"error": "Internal server error"}),
        }

    return {
        "statusCode": 200,
        "body": json.dumps({"invalidation_id": invalidation_id, "status": status.value}),
    }


def _process_message(
    client: CDNInvalidationClient,
    message_body: Dict[str, Any],
    invalidation_ids: List[str],
) -> None:
    """Flush everything a message asks for, appending each id as soon as it is issued."""
    if not isinstance(message_body, dict):
        raise TypeError("SQS message body must be a JSON object")

    absolute_paths = _string_list(message_body, "paths_to_invalidate")
    relative_paths = _string_list(message_body, "relative_paths")

    media_id = message_body.get("media_id")
    if media_id is not None:
        media_id = int(media_id)
    media_context = message_body.get("media_context", Config.CDN_MEDIA_CONTEXT)
    if not isinstance(media_context, str):
        raise TypeError("media_context must be a string")

    paths = absolute_paths + [client.get_path(path, True) for path in relative_paths]

    if paths:
        invalidation_ids.append(client.flush_paths(paths).invalidation_id)

    if media_id is not None:
        invalidation_ids.append(client.flush_media(media_context, media_id).invalidation_id)

    if not paths and media_id is None:
        StructuredLogger.warning("No paths provided for invalidation")


def _string_list(message_body: Dict[str, Any], key: str) -> List[str]:
    value = message_body.get(key, [])
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise TypeError(f"{key} must be a list of strings")
    return value
