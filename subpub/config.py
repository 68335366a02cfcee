"""Configuration from dotenv files and the process environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


class ConfigError(Exception):
    """Configuration cannot be loaded or is incomplete."""


def load(path: str | os.PathLike[str]) -> None:
    """Load a dotenv file into the environment without overriding existing values."""
    try:
        with open(path, encoding="utf-8") as stream:
            load_dotenv(stream=stream)
    except OSError as exc:
        raise ConfigError(f"cannot read config file {path}: {exc}") from exc


@dataclass(frozen=True)
class GRPCConfig:
    host: str
    port: str

    def address(self) -> str:
        host = f"[{self.host}]" if ":" in self.host else self.host
        return f"{host}:{self.port}"


def new_grpc_config() -> GRPCConfig:
    """Build a GRPCConfig from GRPC_HOST and GRPC_PORT."""
    host = os.environ.get("GRPC_HOST")
    if not host:
        raise ConfigError("grpc host not found")
    port = os.environ.get("GRPC_PORT")
    if not port:
        raise ConfigError("grpc port not found")
    return GRPCConfig(host, port)