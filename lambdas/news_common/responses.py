# lambdas/news_common/responses.py
import json
from typing import Any

ALLOWED_ORIGIN = '*'


def build_response(status_code: int, body: Any, allowed_methods: str) -> dict:
    """Helper function to build the API Gateway proxy response, CORS headers included."""
    return {
        'statusCode': status_code,
        'headers': {
            'Content-Type': 'application/json',
            'Access-Control-Allow-Origin': ALLOWED_ORIGIN,
            'Access-Control-Allow-Methods': allowed_methods,
            'Access-Control-Allow-Headers': 'Content-Type',
        },
        'body': json.dumps(body),
    }
