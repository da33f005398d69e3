# lambdas/news_common/request_parser.py
import base64
import binascii
import json
import uuid
from dataclasses import dataclass
from typing import Any, Dict, Optional

from lambdas.news_common.errors import MalformedBodyError, MissingBodyError


@dataclass
class RequestInfo:
    """The parts of an API Gateway proxy event that end up in the logs."""
    request_id: str
    method: str
    path: str
    query_params: Optional[Dict[str, str]] = None
    source_ip: Optional[str] = None
    user_agent: Optional[str] = None


def extract_request_info(event: dict, context: object, default_method: str, default_path: str) -> RequestInfo:
    """
    Pulls the correlation id, client IP and user agent out of an API Gateway
    REST event. Nothing here is allowed to fail: whatever is missing is logged as None.

    The correlation id is the API Gateway request id, then the Lambda request
    id, then a freshly generated UUID.
    """
    event = event if isinstance(event, dict) else {}
    request_context = event.get('requestContext')
    request_context = request_context if isinstance(request_context, dict) else {}
    identity = request_context.get('identity')
    identity = identity if isinstance(identity, dict) else {}

    request_id = (
        request_context.get('requestId')
        or getattr(context, 'aws_request_id', None)
        or str(uuid.uuid4())
    )

    return RequestInfo(
        request_id=request_id,
        method=event.get('httpMethod') or default_method,
        path=event.get('path') or default_path,
        query_params=event.get('queryStringParameters'),
        source_ip=identity.get('sourceIp'),
        user_agent=identity.get('userAgent'),
    )


def parse_json_body(event: dict) -> Any:
    """
    Decodes the request body of a POST event.

    Returns:
        The decoded JSON value. This is usually a dict but may be any JSON type.

    Raises:
        MissingBodyError: If there is no body or it is empty.
        MalformedBodyError: If the body is not valid base64 (when flagged) or JSON.
    """
    body = event.get('body')
    if not body:
        raise MissingBodyError('Request body is missing')

    if event.get('isBase64Encoded'):
        try:
            body = base64.b64decode(body, validate=True).decode('utf-8')
        except (binascii.Error, UnicodeDecodeError) as e:
            raise MalformedBodyError('Request body is not valid JSON') from e

    try:
        return json.loads(body)
    except (json.JSONDecodeError, TypeError) as e:
        raise MalformedBodyError('Request body is not valid JSON') from e
