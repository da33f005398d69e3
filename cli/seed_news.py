# cli/seed_news.py
import argparse
from typing import Iterable, List

from dotenv import load_dotenv

from lambdas.news_common.errors import StorageError
from lambdas.news_common.models import NewsItem
from lambdas.news_common.news_store import NewsStore
from lambdas.news_common.request_logger import build_logger
from lambdas.news_common.settings import load_settings

SAMPLE_NEWS: List[dict] = [
    {
        "title": "AWS Launches New Service",
        "date": "2025-02-01",
        "description": "Amazon Web Services announces a revolutionary new service for cloud computing.",
    },
    {
        "title": "Tech Innovation Award",
        "date": "2025-02-02",
        "description": "Leading tech companies receive recognition for innovative solutions.",
    },
    {
        "title": "Future of AI",
        "date": "2025-01-30",
        "description": "Experts discuss the future implications of artificial intelligence.",
    },
]


def seed_news(store: NewsStore, items: Iterable[dict] = SAMPLE_NEWS) -> int:
    """
    Writes each sample item to the table. A failed insert is reported and
    skipped so the rest still go in.

    Returns:
        The number of items inserted.
    """
    inserted = 0
    for raw in items:
        item = NewsItem(**raw)
        try:
            store.put_item(item)
        except StorageError as e:
            print(f"❌ Error inserting {item.title}: {e.message}")
            continue
        print(f"✅ Inserted: {item.title}")
        inserted += 1
    return inserted


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Load sample news items into the news table.")
    parser.add_argument("--table", help="Table name (defaults to TABLE_NAME from the environment/.env)")
    parser.add_argument("--region", help="AWS region (defaults to AWS_REGION, then eu-west-1)")
    args = parser.parse_args(argv)

    # Load environment variables from a .env file for local runs
    load_dotenv()

    overrides = {}
    if args.table:
        overrides["TABLE_NAME"] = args.table
    if args.region:
        overrides["AWS_REGION"] = args.region
    settings = load_settings(**overrides)

    store = NewsStore.from_settings(settings, build_logger(settings))
    inserted = seed_news(store)
    print(f"Data insertion complete. {inserted}/{len(SAMPLE_NEWS)} items written to '{settings.table_name}'.")
    return 0 if inserted == len(SAMPLE_NEWS) else 1


if __name__ == "__main__":
    raise SystemExit(main())
