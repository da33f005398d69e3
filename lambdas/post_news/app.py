# lambdas/post_news/app.py
from aws_lambda_powertools import Logger

from lambdas.news_common.errors import ConfigurationError, MalformedBodyError, MissingBodyError, StorageError
from lambdas.news_common.news_store import NewsStore
from lambdas.news_common.request_logger import RequestLogger, build_logger
from lambdas.news_common.request_parser import extract_request_info, parse_json_body
from lambdas.news_common.responses import build_response
from lambdas.news_common.settings import load_settings
from lambdas.news_common.validation import MISSING_FIELDS_MESSAGE, validate

ALLOWED_METHODS = 'POST, OPTIONS'

# Initialize resources once for Lambda container reuse.
try:
    SETTINGS = load_settings()
except ConfigurationError as e:
    # This will cause a Lambda init failure, which is appropriate for missing config.
    print(f"FATAL: {e}")
    raise

LOGGER = build_logger(SETTINGS)
NEWS_STORE = NewsStore.from_settings(SETTINGS, LOGGER)


def create_news_item(event: dict, context: object, store: NewsStore, logger: Logger) -> dict:
    """
    Validates the posted news item and writes it to the table.

    Only title, date and description are stored, but the 201 response echoes
    the whole payload the client sent, extra fields included.
    """
    request = extract_request_info(event, context, default_method='POST', default_path='/newsitem')
    log = RequestLogger(logger, request.request_id)
    log.request_received(request)

    def respond(status_code: int, body: dict) -> dict:
        return build_response(status_code, body, ALLOWED_METHODS)

    try:
        # --- 1. Parse the body ---
        try:
            payload = parse_json_body(event)
        except MissingBodyError as e:
            log.warning('Missing request body')
            return respond(400, {'message': e.message})
        except MalformedBodyError as e:
            log.warning('Malformed request body', error=e.message)
            return respond(400, {'message': e.message})

        log.info('Received item', item=payload)

        # --- 2. Validate ---
        result = validate(payload)
        if not result.is_valid:
            log.warning('Missing required fields', item=payload, missingFields=result.missing)
            return respond(400, {'message': MISSING_FIELDS_MESSAGE})

        # --- 3. Store ---
        store.put_item(result.item)
        log.info('Item created successfully', itemTitle=result.item.title)

        return respond(201, {'message': 'News item created successfully', 'item': payload})

    except StorageError as e:
        log.error('Error creating item', error=e.message, errorCode=e.code)
    except Exception as e:
        log.error('Error creating item', error=str(e) or 'Unknown error')

    # the backend error text is not exposed on the create path
    return respond(500, {'message': 'Internal server error'})


def handler(event: dict, context: object) -> dict:
    """API Gateway handler for POST /newsitem."""
    return create_news_item(event, context, NEWS_STORE, LOGGER)
