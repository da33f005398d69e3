# lambdas/news_common/models.py
"""
Data models for the news API.

NewsItem is what gets written to the table. NewsItemDraft is the loosely typed
shape of whatever a client posted; every field is optional and nothing is
coerced, so validation can inspect it without ever failing.
"""
from dataclasses import dataclass, field
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict

REQUIRED_FIELDS = ('title', 'date', 'description')


class NewsItem(BaseModel):
    """A single news entry. (title, date) is the composite key of the table."""
    model_config = ConfigDict(extra='ignore', frozen=True)

    # partition key
    title: str
    # sort key, kept as an opaque string
    date: str
    description: str

    def to_dynamodb_item(self) -> dict:
        """Only the three known attributes are ever written."""
        return {
            'title': self.title,
            'date': self.date,
            'description': self.description,
        }


class NewsItemDraft(BaseModel):
    model_config = ConfigDict(extra='ignore')

    title: Any = None
    date: Any = None
    description: Any = None


@dataclass
class ValidationResult:
    """Either a usable NewsItem or the names of the fields that were missing."""
    item: Optional[NewsItem] = None
    missing: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return self.item is not None
