"""Configuration settings for godocjson.

Settings are loaded from environment variables with .env file support via
pydantic-settings. Command-line flags take precedence over these values.

Environment variables:
    GODOCJSON_EXCLUDE_PATTERN: Default regex for excluding source files
    GODOCJSON_INDENT: JSON indentation width (default 2)
    GODOCJSON_LOG_LEVEL: Default log level (default WARNING)

Configuration precedence:
    1. Command-line flags
    2. Environment variables
    3. .env file in current directory
    4. Default values

Example:
    >>> from godocjson.settings import settings
    >>> print(settings.indent)
    2
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the godocjson command.

    Attributes:
        exclude_pattern: Regular expression matched against source file
                         names; matching files are left out of the output.
                         Empty means nothing is excluded.

        indent: Number of spaces used to indent the JSON output.

        log_level: Level for godocjson loggers when no logging config
                   file overrides it.
    """

    model_config = SettingsConfigDict(
        env_prefix="GODOCJSON_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    exclude_pattern: str = ""
    indent: int = Field(default=2, ge=0)
    log_level: str = "WARNING"


settings = Settings()
