from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any, List

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

ENV_FILE_NAME = ".env"
ENV_PREFIX = "LOCALIZER_"


class LocalizerOptions(BaseSettings):
    """Where resource files live and which cultures they cover.

    The first entry of ``SUPPORTED_CULTURES`` is the default culture; its
    files carry no culture suffix.
    """

    RESOURCES_PATH: str = ""
    RESOURCES_DIRECTORY: str = "Resources"
    RESOURCES_EXTENSION: str = "strings"
    SUPPORTED_CULTURES: Annotated[List[str], NoDecode] = ["en-US", "pt-PT"]

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=ENV_FILE_NAME,
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    @field_validator("SUPPORTED_CULTURES", mode="before")
    @classmethod
    def parse_cultures(cls, v: Any) -> List[str]:
        if v is None:
            v = []
        if isinstance(v, str):
            v = v.split(",")
        cultures = [str(x).strip() for x in v if str(x).strip()]
        if not cultures:
            raise ValueError("at least one supported culture is required")
        return cultures

    @field_validator("RESOURCES_EXTENSION", mode="before")
    @classmethod
    def strip_extension_dot(cls, v: Any) -> str:
        ext = str(v or "").strip().lstrip(".")
        if not ext:
            raise ValueError("resources extension must not be empty")
        return ext

    @property
    def default_culture(self) -> str:
        return self.SUPPORTED_CULTURES[0]

    @property
    def resources_root(self) -> Path:
        # RESOURCES_DIRECTORY is declared for configuration files but not read;
        # an empty RESOURCES_PATH resolves against the working directory
        return Path(self.RESOURCES_PATH)


def load_options(env_file: str | Path | None = ENV_FILE_NAME, **overrides: Any) -> LocalizerOptions:
    """Build options from the environment (and ``.env``) plus explicit overrides."""
    if env_file:
        load_dotenv(env_file, override=False)
    return LocalizerOptions(**overrides)
