# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Plugin configuration via MALICE_* environment variables and .env files."""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from windef import __build_time__


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="MALICE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
    )

    # Scan ID override; defaults to the SHA-256 of the scanned file
    scanid: str = ""

    # Scanner
    timeout: int = 60
    loadlibrary_dir: Path = Path("/loadlibrary")
    mpclient: str = "./mpclient"
    malware_dir: Path = Path("/malware")
    updated_file: Path = Path("/opt/malice/UPDATED")
    build_time: str = __build_time__
    engine_version: str = ""

    @field_validator("timeout")
    @classmethod
    def _check_timeout(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("timeout must be a positive number of seconds")
        return v

    # Document store
    db_path: str = ""  # e.g. "/malice/results.db"; empty disables the store

    # Webhook
    endpoint: str = ""
    proxy: str = ""
    webhook_timeout: float = 10.0

    # Web service
    web_host: str = "0.0.0.0"
    web_port: int = 3993
    web_timeout: int = 60

    # Logging
    log_level: str = "INFO"
    log_format: str = "text"


def get_settings() -> Settings:
    return Settings()
