# lambdas/news_common/news_store.py
import base64
from decimal import Decimal
from typing import Any, List

import boto3
from aws_lambda_powertools import Logger
from boto3.dynamodb.types import Binary
from botocore.exceptions import BotoCoreError, ClientError

from lambdas.news_common.errors import StorageError
from lambdas.news_common.models import NewsItem
from lambdas.news_common.settings import NewsSettings


def to_plain(value: Any) -> Any:
    """
    Turns the Decimals the DynamoDB resource API hands back into ints and floats,
    and binary attributes into base64 text as DynamoDB JSON writes them.
    """
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, Binary):
        return base64.b64encode(value.value).decode('ascii')
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode('ascii')
    if isinstance(value, dict):
        return {k: to_plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [to_plain(v) for v in value]
    return value


class NewsStore:
    """
    The only code that reads from or writes to the news table.
    Built once per container and handed to the handlers.
    """

    def __init__(self, table, table_name: str, logger: Logger):
        self.table = table
        self.table_name = table_name
        self.logger = logger

    @classmethod
    def from_settings(cls, settings: NewsSettings, logger: Logger) -> "NewsStore":
        dynamodb = boto3.resource('dynamodb', region_name=settings.aws_region)
        return cls(dynamodb.Table(settings.table_name), settings.table_name, logger)

    def scan_all(self) -> List[dict]:
        """
        Reads the whole table, following LastEvaluatedKey until DynamoDB has
        nothing left. Order is whatever the scan yields.

        Raises:
            StorageError: If any scan page fails.
        """
        self.logger.info('Executing DynamoDB scan', extra={'tableName': self.table_name})

        items = []
        scan_kwargs = {}
        pages = 0
        try:
            while True:
                response = self.table.scan(**scan_kwargs)
                pages += 1
                items.extend(response.get('Items', []))
                last_key = response.get('LastEvaluatedKey')
                if not last_key:
                    break
                scan_kwargs['ExclusiveStartKey'] = last_key
        except (ClientError, BotoCoreError) as e:
            error = StorageError.from_boto(e)
            self.logger.error('DynamoDB scan failed', extra={
                'tableName': self.table_name,
                'error': error.message,
                'errorCode': error.code,
            })
            raise error from e

        self.logger.info('DynamoDB scan finished', extra={
            'tableName': self.table_name,
            'itemCount': len(items),
            'pages': pages,
        })
        return [to_plain(item) for item in items]

    def put_item(self, item: NewsItem):
        """
        Writes title, date and description. An existing item with the same
        (title, date) is replaced.

        Raises:
            StorageError: If the put fails.
        """
        self.logger.info('Executing DynamoDB put', extra={
            'tableName': self.table_name,
            'item': {'title': item.title, 'date': item.date},
        })

        try:
            self.table.put_item(Item=item.to_dynamodb_item())
        except (ClientError, BotoCoreError) as e:
            error = StorageError.from_boto(e)
            self.logger.error('DynamoDB put failed', extra={
                'tableName': self.table_name,
                'error': error.message,
                'errorCode': error.code,
            })
            raise error from e

        self.logger.info('DynamoDB put finished', extra={'tableName': self.table_name, 'itemCount': 1})
