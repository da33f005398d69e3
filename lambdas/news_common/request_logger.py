# lambdas/news_common/request_logger.py
from typing import Any

from aws_lambda_powertools import Logger

from lambdas.news_common.request_parser import RequestInfo
from lambdas.news_common.settings import NewsSettings


def build_logger(settings: NewsSettings) -> Logger:
    """One JSON object per log line on stdout, tagged with the service name."""
    return Logger(service=settings.service_name, level=settings.log_level)


class RequestLogger:
    """
    Emits the structured events of a single request. Binding the correlation id
    to the underlying logger means the storage layer's log lines carry it too.
    """

    def __init__(self, logger: Logger, request_id: str):
        self.logger = logger
        self.request_id = request_id
        self.logger.append_keys(requestId=request_id)

    def info(self, message: str, **fields: Any):
        self.logger.info(message, extra=fields)

    def warning(self, message: str, **fields: Any):
        self.logger.warning(message, extra=fields)

    def error(self, message: str, **fields: Any):
        self.logger.error(message, extra=fields)

    def request_received(self, request: RequestInfo, include_query: bool = False):
        fields = {
            'method': request.method,
            'path': request.path,
            'sourceIp': request.source_ip,
            'userAgent': request.user_agent,
        }
        if include_query:
            fields['queryParams'] = request.query_params
        self.info('Request received', **fields)
