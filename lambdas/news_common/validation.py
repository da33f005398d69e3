# lambdas/news_common/validation.py
from typing import Any

from lambdas.news_common.models import REQUIRED_FIELDS, NewsItem, NewsItemDraft, ValidationResult

MISSING_FIELDS_MESSAGE = "Missing required fields: title, date, and description are required"


def _is_present(value: Any) -> bool:
    # a falsy value counts as absent; non-strings cannot be used as key values
    return bool(value) and isinstance(value, str)


def validate(candidate: Any) -> ValidationResult:
    """
    Checks a parsed request body for the three required fields.

    Args:
        candidate: Whatever the request body decoded to. Anything that is not a
            JSON object is treated as having no fields at all.

    Returns:
        A ValidationResult holding the NewsItem, or the list of missing field names.
    """
    if isinstance(candidate, dict):
        draft = NewsItemDraft.model_validate(candidate)
    else:
        draft = NewsItemDraft()

    missing = [name for name in REQUIRED_FIELDS if not _is_present(getattr(draft, name))]
    if missing:
        return ValidationResult(missing=missing)

    return ValidationResult(
        item=NewsItem(title=draft.title, date=draft.date, description=draft.description)
    )
