# lambdas/get_news/app.py
from aws_lambda_powertools import Logger

from lambdas.news_common.errors import ConfigurationError, StorageError
from lambdas.news_common.news_store import NewsStore
from lambdas.news_common.request_logger import RequestLogger, build_logger
from lambdas.news_common.request_parser import extract_request_info
from lambdas.news_common.responses import build_response
from lambdas.news_common.settings import load_settings

ALLOWED_METHODS = 'GET, OPTIONS'

# Initialize resources once for Lambda container reuse.
try:
    SETTINGS = load_settings()
except ConfigurationError as e:
    # This will cause a Lambda init failure, which is appropriate for missing config.
    print(f"FATAL: {e}")
    raise

LOGGER = build_logger(SETTINGS)
NEWS_STORE = NewsStore.from_settings(SETTINGS, LOGGER)


def list_news(event: dict, context: object, store: NewsStore, logger: Logger) -> dict:
    """
    Returns every stored news item as a JSON array.
    A storage failure becomes a 500 that carries the backend's error message.
    """
    request = extract_request_info(event, context, default_method='GET', default_path='/news')
    log = RequestLogger(logger, request.request_id)
    log.request_received(request, include_query=True)

    try:
        items = store.scan_all()
        log.info('Scan completed', itemCount=len(items))
        # json.dumps can fail on attribute types to_plain does not know
        return build_response(200, items, ALLOWED_METHODS)
    except StorageError as e:
        return _scan_error(log, e.message)
    except Exception as e:
        return _scan_error(log, str(e) or 'Unknown error')


def _scan_error(log: RequestLogger, message: str) -> dict:
    log.error('Error executing scan', error=message)
    return build_response(500, {'message': 'Internal server error', 'error': message}, ALLOWED_METHODS)


def handler(event: dict, context: object) -> dict:
    """API Gateway handler for GET /news."""
    return list_news(event, context, NEWS_STORE, LOGGER)
