from __future__ import annotations
from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    properties_file: Optional[str] = Field(default=None, alias="PLUGCONF_PROPERTIES_FILE")
    search_path: str = Field(default="", alias="PLUGCONF_SEARCH_PATH")
    allow_multi_file: bool = Field(default=False, alias="PLUGCONF_MULTI_FILE")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_json: bool = Field(default=False, alias="LOG_JSON")

    model_config = SettingsConfigDict(extra="ignore", populate_by_name=True)
