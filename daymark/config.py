"""Configuration for daymark."""

import os
from pathlib import Path
from typing import Literal

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, ValidationError

from daymark.constants import DEFAULT_CALENDAR_NAME, STORAGE_KEY


class DaymarkConfig(BaseModel):
    """Daymark configuration with Pydantic validation."""

    # Storage
    data_dir: Path = Field(default=Path("data"))
    storage_filename: str = Field(default="storage.json", min_length=1)
    storage_key: str = Field(default=STORAGE_KEY, min_length=1)

    # Logging
    log_dir: Path = Field(default=Path("logs"))
    log_filename: str = Field(default="daymark.log")

    # Calendars
    default_calendar_name: str = Field(default=DEFAULT_CALENDAR_NAME, min_length=1)

    # Display
    locale: Literal["es", "en"] = Field(default="es")

    @property
    def storage_path(self) -> Path:
        """Path of the JSON file backing the storage slots."""
        return self.data_dir / self.storage_filename

    @classmethod
    def from_env(cls) -> "DaymarkConfig":
        """Load configuration from environment variables and .env file."""
        # .env is looked up from the working directory, not this package
        load_dotenv(find_dotenv(usecwd=True))

        config_dict = {}

        # Storage
        if "DAYMARK_DATA_DIR" in os.environ:
            config_dict["data_dir"] = Path(os.environ["DAYMARK_DATA_DIR"])
        if os.environ.get("DAYMARK_STORAGE_FILE"):
            config_dict["storage_filename"] = os.environ["DAYMARK_STORAGE_FILE"]
        if os.environ.get("DAYMARK_STORAGE_KEY"):
            config_dict["storage_key"] = os.environ["DAYMARK_STORAGE_KEY"]

        # Logging
        if "LOG_DIR" in os.environ:
            config_dict["log_dir"] = Path(os.environ["LOG_DIR"])
        if "LOG_FILENAME" in os.environ:
            config_dict["log_filename"] = os.environ["LOG_FILENAME"]

        # Calendars
        if os.environ.get("DAYMARK_DEFAULT_CALENDAR", "").strip():
            config_dict["default_calendar_name"] = os.environ[
                "DAYMARK_DEFAULT_CALENDAR"
            ].strip()

        # Display
        if "DAYMARK_LOCALE" in os.environ:
            locale = os.environ["DAYMARK_LOCALE"].strip().lower()
            if locale in ("es", "en"):
                config_dict["locale"] = locale

        try:
            return cls(**config_dict)
        except ValidationError:
            return cls()
