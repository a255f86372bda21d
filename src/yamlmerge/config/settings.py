"""Application settings loaded from environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings


class AppSettings(BaseSettings):
    model_config = {
        "env_prefix": "YAMLMERGE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    log_level: str = "WARNING"
    sort_keys: bool = True
    indent: int = Field(default=2, ge=2, le=9)

    single_line_help: str = Field(default="", validation_alias="AV_SINGLE_LINE_HELP")
