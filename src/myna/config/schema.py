"""Typed configuration schema and loader for the myna package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, SecretStr, conint

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class SeedSettings(BaseModel):
    """Where the pseudonymization secret comes from."""

    secret_env: str
    secret: SecretStr | None = None

    model_config = ConfigDict(extra="forbid")


class PseudonymSettings(BaseModel):
    """Pseudonym derivation settings."""

    seed: SeedSettings

    model_config = ConfigDict(extra="forbid")


class LoggingSettings(BaseModel):
    """Log level for the ``myna`` logger namespace."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"]

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)  # type: ignore[valid-type]
    pseudonyms: PseudonymSettings
    logging: LoggingSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    environment variable named by ``pseudonyms.seed.secret_env``.
    """

    with (
        importlib_resources.files("myna.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    cfg = ConfigModel.model_validate(merged)

    environ = env if env is not None else os.environ
    secret_env = cfg.pseudonyms.seed.secret_env
    if secret_env in environ:
        cfg.pseudonyms.seed.secret = SecretStr(environ[secret_env])

    return cfg


def with_secret(cfg: ConfigModel, secret: str) -> ConfigModel:
    """Return a copy of ``cfg`` whose seed secret is ``secret``."""

    seed = cfg.pseudonyms.seed.model_copy(update={"secret": SecretStr(secret)})
    pseudo = cfg.pseudonyms.model_copy(update={"seed": seed})
    return cfg.model_copy(update={"pseudonyms": pseudo})


__all__ = [
    "ConfigModel",
    "SeedSettings",
    "PseudonymSettings",
    "LoggingSettings",
    "deep_merge_dicts",
    "load_config",
    "with_secret",
]
