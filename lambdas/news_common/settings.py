# lambdas/news_common/settings.py
from typing import Optional

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from lambdas.news_common.errors import ConfigurationError


class NewsSettings(BaseSettings):
    """
    Environment configuration for the news lambdas.
    Reads the process environment first and falls back to a local .env file.
    """
    model_config = SettingsConfigDict(
        env_file='.env', env_file_encoding='utf-8', extra='ignore', populate_by_name=True
    )

    # the table is provisioned outside this code base and handed in by name
    table_name: str = Field(..., alias='TABLE_NAME', min_length=1)
    aws_region: str = Field('eu-west-1', alias='AWS_REGION')
    service_name: str = Field('news-api', alias='POWERTOOLS_SERVICE_NAME')
    log_level: str = Field('INFO', alias='LOG_LEVEL')


def load_settings(env_file: Optional[str] = '.env', **overrides) -> NewsSettings:
    """
    Builds the settings object, turning pydantic's validation failure into a
    ConfigurationError that names the offending variables.

    Raises:
        ConfigurationError: If TABLE_NAME (or any other field) is missing or invalid.
    """
    try:
        return NewsSettings(_env_file=env_file, **overrides)
    except ValidationError as e:
        names = sorted({str(err['loc'][0]) for err in e.errors() if err.get('loc')})
        raise ConfigurationError(
            f"Missing or invalid configuration: {', '.join(names)}"
        ) from e
