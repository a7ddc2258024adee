"""Runtime configuration model for inxi-dash.

This module owns all environment variable and YAML config parsing.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
import os
from pathlib import Path
from typing import Mapping, cast

from core.constants import (
    DEFAULT_BIND_HOST,
    DEFAULT_BIND_PORT,
    DEFAULT_COMMAND_TIMEOUT_SECONDS,
    DEFAULT_INXI_BINARY,
    DEFAULT_INXI_MODE,
)
from core.errors import InxiDashConfigError, InxiDashDependencyError, InxiDashModeError
from core.inxi_modes import parse_inxi_mode
from core.types import InxiMode

_CONFIG_FILE_KEYS = frozenset({"host", "port", "default_mode", "inxi_binary", "timeout_seconds"})


@dataclass(frozen=True)
class DashConfig:
    """Validated runtime configuration.

    Attributes:
        bind_host: Interface address for the dashboard server.
        bind_port: TCP port for the dashboard server.
        default_mode: Detail mode used when a request names none.
        inxi_binary: Executable name or path used to invoke inxi.
        command_timeout_seconds: Upper bound for one inxi invocation.
    """

    bind_host: str
    bind_port: int
    default_mode: InxiMode
    inxi_binary: str
    command_timeout_seconds: float

    @classmethod
    def from_env(cls) -> "DashConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            InxiDashConfigError: If environment values are invalid.
        """
        return cls(
            bind_host=os.getenv("INXI_DASH_HOST", DEFAULT_BIND_HOST),
            bind_port=_parse_port(os.getenv("INXI_DASH_PORT", str(DEFAULT_BIND_PORT))),
            default_mode=_parse_default_mode(
                os.getenv("INXI_DASH_DEFAULT_MODE", DEFAULT_INXI_MODE)
            ),
            inxi_binary=os.getenv("INXI_DASH_INXI_BINARY", DEFAULT_INXI_BINARY),
            command_timeout_seconds=_parse_timeout(
                os.getenv("INXI_DASH_TIMEOUT", str(DEFAULT_COMMAND_TIMEOUT_SECONDS))
            ),
        )


def load_dash_config(config_path: str | None = None) -> DashConfig:
    """Load configuration from environment plus an optional YAML file.

    Args:
        config_path: Optional YAML file whose values override the environment.

    Returns:
        Validated runtime configuration.

    Raises:
        InxiDashConfigError: If the file or any value is invalid.
        InxiDashDependencyError: If PyYAML is unavailable.
    """
    config = DashConfig.from_env()
    if config_path is None:
        return config
    file_values = _load_yaml_mapping(config_path)
    return _apply_file_values(config, file_values)


def _load_yaml_mapping(config_path: str) -> Mapping[str, object]:
    try:
        import yaml  # type: ignore[import-untyped]
    except ImportError as error:  # pragma: no cover - dependency failure
        raise InxiDashDependencyError(
            "YAML config support requires PyYAML. Install with 'pip install pyyaml'."
        ) from error
    config_file = Path(config_path).expanduser().resolve()
    if not config_file.exists():
        raise InxiDashConfigError(
            f"Config file does not exist at {config_file}. Provide a valid YAML file path."
        )
    try:
        payload = cast(object, yaml.safe_load(config_file.read_text(encoding="utf-8")))
    except OSError as error:
        raise InxiDashConfigError(
            f"Failed to read config at {config_file}: {error}. Check file permissions and retry."
        ) from error
    except yaml.YAMLError as error:
        raise InxiDashConfigError(
            f"Failed to parse YAML config at {config_file}: {error}. Fix YAML syntax and retry."
        ) from error
    if payload is None:
        raise InxiDashConfigError(f"Config file at {config_file} is empty.")
    if not isinstance(payload, Mapping):
        raise InxiDashConfigError(
            f"Invalid config at {config_file}: expected object mapping, "
            f"got {type(payload).__name__}."
        )
    unknown_keys = sorted(str(key) for key in set(payload) - _CONFIG_FILE_KEYS)
    if unknown_keys:
        raise InxiDashConfigError(
            f"Config file contains unknown fields: {', '.join(unknown_keys)}."
        )
    return payload


def _apply_file_values(config: DashConfig, values: Mapping[str, object]) -> DashConfig:
    updates: dict[str, object] = {}
    if "host" in values:
        updates["bind_host"] = _expect_string(values["host"], "host")
    if "port" in values:
        updates["bind_port"] = _parse_port(str(values["port"]), "port")
    if "default_mode" in values:
        mode_value = _expect_string(values["default_mode"], "default_mode")
        updates["default_mode"] = _parse_default_mode(mode_value)
    if "inxi_binary" in values:
        updates["inxi_binary"] = _expect_string(values["inxi_binary"], "inxi_binary")
    if "timeout_seconds" in values:
        updates["command_timeout_seconds"] = _parse_timeout(
            str(values["timeout_seconds"]), "timeout_seconds"
        )
    return replace(config, **updates)


def _expect_string(raw_value: object, field_name: str) -> str:
    if isinstance(raw_value, str) and raw_value.strip():
        return raw_value.strip()
    raise InxiDashConfigError(f"Config field '{field_name}' must be a non-empty string.")


def _parse_port(raw_value: str, field_name: str = "INXI_DASH_PORT") -> int:
    """Parse a TCP port value.

    Args:
        raw_value: Raw string from environment or config file.
        field_name: Environment variable or config key named in errors.

    Returns:
        Port number in [1, 65535].

    Raises:
        InxiDashConfigError: If value is not a valid port.
    """
    try:
        port = int(raw_value)
    except ValueError as error:
        raise InxiDashConfigError(
            f"Invalid {field_name} value: "
            f"expected integer, got '{raw_value}'. "
            f"Set {field_name} to a numeric value."
        ) from error
    if not 0 < port < 65536:
        raise InxiDashConfigError(
            f"Invalid {field_name} value: {port} is outside the range 1-65535."
        )
    return port


def _parse_timeout(raw_value: str, field_name: str = "INXI_DASH_TIMEOUT") -> float:
    try:
        timeout = float(raw_value)
    except ValueError as error:
        raise InxiDashConfigError(
            f"Invalid {field_name} value: "
            f"expected number of seconds, got '{raw_value}'."
        ) from error
    if timeout <= 0:
        raise InxiDashConfigError(f"Invalid {field_name} value: must be positive.")
    return timeout


def _parse_default_mode(raw_value: str) -> InxiMode:
    try:
        return parse_inxi_mode(raw_value)
    except InxiDashModeError as error:
        raise InxiDashConfigError(f"Invalid default mode: {error}") from error
