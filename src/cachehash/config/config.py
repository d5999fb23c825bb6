from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, Field, field_validator

from cachehash.core.algorithms import HashAlgorithm, verify_algorithms
from cachehash.utils.logging import _coerce_level, configure_logging, get_logger


class HashConfig(BaseModel):
    """Key hashing configuration."""

    algorithm: HashAlgorithm = Field(
        HashAlgorithm.KETAMA_MD5,
        description="Hash algorithm: native, crc32, fnv1_64, ketama_md5 (legacy names accepted)",
    )
    verify_on_startup: bool = Field(
        True,
        description="Check all algorithms against reference vectors before use",
    )
    log_level: str = Field("INFO", description="Level for the cachehash logger namespace")
    log_json: bool = Field(True, description="Render logs as JSON instead of console output")

    @field_validator("algorithm", mode="before")
    @classmethod
    def _resolve_algorithm(cls, value: Any) -> Any:
        if isinstance(value, str) and not isinstance(value, HashAlgorithm):
            return HashAlgorithm.from_name(value)
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        _coerce_level(value)
        return value.strip().upper()

    @classmethod
    def from_env(cls) -> "HashConfig":
        return cls(
            algorithm=os.getenv("CACHEHASH_ALGORITHM", HashAlgorithm.KETAMA_MD5.value),
            verify_on_startup=os.getenv("CACHEHASH_VERIFY_ON_STARTUP", "true").lower()
            == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_json=os.getenv("CACHEHASH_LOG_JSON", "true").lower() == "true",
        )

    def hasher(self) -> HashAlgorithm:
        """
        Startup entry point: configure logging, self-check, return the algorithm.

        Raises:
            UnsupportedAlgorithm: the self-check failed.
        """
        configure_logging(self.log_level, json_output=self.log_json)
        get_logger(__name__).info(
            "hash_config_loaded",
            algorithm=self.algorithm.value,
            portable=self.algorithm.portable,
            verify_on_startup=self.verify_on_startup,
        )
        if self.verify_on_startup:
            verify_algorithms()
        return self.algorithm


__all__ = ["HashConfig"]
