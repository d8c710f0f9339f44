"""wolgate configuration — Pydantic BaseSettings loaded from .env."""

from __future__ import annotations

import json
import shlex
from enum import Enum
from functools import lru_cache
from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class MatchPolicy(str, Enum):
    """How a configured hostname is matched against ARP table entries."""

    FIRST = "first"  # first substring match in table order
    EXACT = "exact"  # hostname must equal the entry
    UNIQUE = "unique"  # substring match, all matches must share one MAC


class Settings(BaseSettings):
    """Application settings."""

    app_name: str = "wolgate"
    debug: bool = False
    log_level: str = "INFO"

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 8000

    # Wake target, resolved through the ARP table on POST /wake
    target_hostname: str = ""
    match_policy: MatchPolicy = MatchPolicy.UNIQUE
    arp_command: Annotated[list[str], NoDecode] = ["arp", "-a"]

    # Magic packet endpoints
    broadcast_address: str = "255.255.255.255"
    wol_port: int = 9
    source_address: str = "0.0.0.0"
    source_port: int = 0

    # Log the packet instead of sending it
    dry_run: bool = False

    model_config = SettingsConfigDict(
        env_file=(".env", "../.env"),
        env_file_encoding="utf-8",
        env_prefix="WOLGATE_",
        extra="ignore",
    )

    @property
    def destination(self) -> tuple[str, int]:
        return self.broadcast_address, self.wol_port

    @property
    def source(self) -> tuple[str, int]:
        return self.source_address, self.source_port

    @field_validator("arp_command", mode="before")
    @classmethod
    def split_arp_command(cls, value: list[str] | str) -> list[str]:
        if isinstance(value, str):
            if value.lstrip().startswith("["):
                return json.loads(value)
            return shlex.split(value)
        return value

    @field_validator("match_policy", mode="before")
    @classmethod
    def lower_match_policy(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
