from typing import Any, Dict, Optional
import json
import os
from pydantic import BaseModel, Field, ValidationError, field_validator
from loguru import logger

from .exceptions import SettingsError


# --- Settings Models ---
class StoreSettings(BaseModel):
    detail_events: bool = False
    list_delimiter: Optional[str] = ","
    delimiter_parsing_disabled: bool = False

    @field_validator("list_delimiter")
    @classmethod
    def _single_character(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and len(value) != 1:
            raise ValueError("list_delimiter must be a single character")
        return value

    @property
    def splits_values(self) -> bool:
        return self.list_delimiter is not None and not self.delimiter_parsing_disabled


class LoggingSettings(BaseModel):
    debug_mode: bool = False
    log_dir: Optional[str] = None
    rotation: str = "10 MB"
    retention: str = "1 week"

    @property
    def level(self) -> str:
        return "DEBUG" if self.debug_mode else "INFO"


class Settings(BaseModel):
    store: StoreSettings = Field(default_factory=StoreSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# --- Loading ---
def load_settings(filepath: str) -> Settings:
    """
    Load settings from a JSON or TOML file.

    A missing file yields the defaults.

    Raises:
        SettingsError: If the file cannot be parsed or fails validation
    """
    if not os.path.isfile(filepath):
        logger.debug(f"No settings file at {filepath}, using defaults")
        return Settings()

    try:
        if filepath.endswith('.toml'):
            import tomllib
            with open(filepath, "rb") as f:
                raw: Dict[str, Any] = tomllib.load(f)
        else:
            with open(filepath, "r", encoding="utf-8") as f:
                raw = json.load(f)
    except (OSError, ValueError) as e:
        raise SettingsError(f"Failed to read settings from {filepath}: {e}") from e

    try:
        settings = Settings.model_validate(raw)
    except ValidationError as e:
        raise SettingsError(f"Invalid settings in {filepath}: {e}") from e

    logger.info(f"Settings loaded from {filepath}")
    return settings
