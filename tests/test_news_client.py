# tests/test_news_client.py
from unittest.mock import MagicMock, patch

import pytest
import requests

from cli import news_client

ENDPOINT = "https://abc.execute-api.eu-west-1.amazonaws.com/prod/"


@patch("cli.news_client.requests.get")
def test_fetch_news(mock_get):
    mock_get.return_value.json.return_value = [{"title": "T", "date": "D", "description": "x"}]

    items = news_client.fetch_news(ENDPOINT)

    mock_get.assert_called_once_with("https://abc.execute-api.eu-west-1.amazonaws.com/prod/news", timeout=10)
    mock_get.return_value.raise_for_status.assert_called_once()
    assert items[0]["title"] == "T"


@patch("cli.news_client.requests.post")
def test_post_news(mock_post):
    mock_post.return_value.json.return_value = {"message": "News item created successfully"}

    result = news_client.post_news("T", "D", "Desc", api_endpoint=ENDPOINT)

    assert result["message"] == "News item created successfully"
    kwargs = mock_post.call_args.kwargs
    assert mock_post.call_args.args[0].endswith("/prod/newsitem")
    assert kwargs["json"] == {"title": "T", "date": "D", "description": "Desc"}


def test_missing_endpoint(monkeypatch):
    monkeypatch.delenv("NEWS_API", raising=False)

    with pytest.raises(ValueError):
        news_client.fetch_news()


@patch("cli.news_client.requests.post")
def test_main_reports_http_errors(mock_post, capsys):
    mock_post.return_value.raise_for_status.side_effect = requests.exceptions.HTTPError("400 Client Error")

    exit_code = news_client.main(["--endpoint", ENDPOINT, "post", "T", "D", "Desc"])

    assert exit_code == 1
    assert "400 Client Error" in capsys.readouterr().out


@patch("cli.news_client.requests.get")
def test_main_lists(mock_get, capsys):
    mock_get.return_value = MagicMock(**{"json.return_value": []})

    assert news_client.main(["--endpoint", ENDPOINT, "list"]) == 0
    assert capsys.readouterr().out.strip() == "[]"
