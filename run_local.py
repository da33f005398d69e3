# run_local.py
import json

import boto3
from botocore.exceptions import ClientError
from dotenv import load_dotenv

from lambdas.news_common.settings import NewsSettings, load_settings


def setup_news_table(settings: NewsSettings):
    """Checks for the news table and creates it if it doesn't exist."""
    dynamodb = boto3.resource('dynamodb', region_name=settings.aws_region)
    table_name = settings.table_name
    try:
        dynamodb.meta.client.describe_table(TableName=table_name)
        print(f"DynamoDB table '{table_name}' already exists.")
    except ClientError as e:
        if e.response['Error']['Code'] != 'ResourceNotFoundException':
            raise
        print(f"DynamoDB table '{table_name}' not found. Creating it now...")
        dynamodb.create_table(
            TableName=table_name,
            KeySchema=[
                {'AttributeName': 'title', 'KeyType': 'HASH'},
                {'AttributeName': 'date', 'KeyType': 'RANGE'},
            ],
            AttributeDefinitions=[
                {'AttributeName': 'title', 'AttributeType': 'S'},
                {'AttributeName': 'date', 'AttributeType': 'S'},
            ],
            BillingMode='PAY_PER_REQUEST',
        )
        dynamodb.Table(table_name).wait_until_exists()
        print(f"Table '{table_name}' created successfully.")


def make_event(method: str, path: str, body=None, query=None) -> dict:
    return {
        "httpMethod": method,
        "path": path,
        "queryStringParameters": query,
        "body": json.dumps(body) if body is not None else None,
        "isBase64Encoded": False,
        "requestContext": {
            "requestId": f"local-{method.lower()}",
            "identity": {"sourceIp": "127.0.0.1", "userAgent": "run_local"},
        },
    }


def run_local():
    """Runs both handlers against the live table using your AWS credentials."""
    print("--- Starting LIVE Run of the news handlers ---")
    load_dotenv()

    try:
        setup_news_table(load_settings())
    except Exception as e:
        print(f"Could not complete setup. Aborting run. Error: {e}")
        return

    # Imported late: the handler modules read their settings at import time.
    from lambdas.get_news.app import handler as get_news
    from lambdas.post_news.app import handler as post_news

    created = post_news(make_event("POST", "/newsitem", body={
        "title": "AWS Launches New Service",
        "date": "2025-02-01",
        "description": "Amazon Web Services announces a revolutionary new service for cloud computing.",
    }), None)
    print(f"\nPOST /newsitem -> {created['statusCode']}")
    print(json.dumps(json.loads(created['body']), indent=2))

    listed = get_news(make_event("GET", "/news"), None)
    print(f"\nGET /news -> {listed['statusCode']}")
    print(json.dumps(json.loads(listed['body']), indent=2))


if __name__ == "__main__":
    run_local()
