# cli/news_client.py
import argparse
import json
import os
from typing import Optional

import requests
from dotenv import load_dotenv

# Load environment variables from a .env file for local testing
load_dotenv()


def _endpoint(api_endpoint: Optional[str]) -> str:
    # Base URL of the deployed API stage, e.g. https://abc.execute-api.eu-west-1.amazonaws.com/prod
    endpoint = api_endpoint or os.environ.get("NEWS_API")
    if not endpoint:
        raise ValueError("NEWS_API environment variable not set. Please create a .env file.")
    return endpoint.rstrip("/")


def fetch_news(api_endpoint: Optional[str] = None, timeout: int = 10) -> list:
    """GET /news and return the decoded list of items."""
    response = requests.get(f"{_endpoint(api_endpoint)}/news", timeout=timeout)
    response.raise_for_status()
    return response.json()


def post_news(title: str, date: str, description: str, api_endpoint: Optional[str] = None, timeout: int = 10) -> dict:
    """POST /newsitem with a JSON body and return the decoded response."""
    response = requests.post(
        f"{_endpoint(api_endpoint)}/newsitem",
        json={"title": title, "date": date, "description": description},
        headers={"Content-Type": "application/json"},
        timeout=timeout,
    )
    response.raise_for_status()
    return response.json()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Talk to a deployed news API.")
    parser.add_argument("--endpoint", help="API base URL (defaults to NEWS_API)")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("list", help="List every news item")

    post = commands.add_parser("post", help="Create a news item")
    post.add_argument("title")
    post.add_argument("date")
    post.add_argument("description")

    args = parser.parse_args(argv)

    try:
        if args.command == "list":
            result = fetch_news(args.endpoint)
        else:
            result = post_news(args.title, args.date, args.description, args.endpoint)
    except ValueError as e:
        print(f"❌ ERROR: {e}")
        return 2
    except requests.exceptions.RequestException as e:
        print("❌ Request failed.")
        print(f"Error: {e}")
        return 1

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
