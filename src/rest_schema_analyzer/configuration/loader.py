"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    DEFAULT_API_DESCRIPTION,
    DEFAULT_API_TITLE,
    DEFAULT_API_VERSION,
    DEFAULT_BASE_PATH,
    AnalyzerSettings,
    ApiSettings,
)

_DEFAULTS = AnalyzerSettings()


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str | None = None) -> AnalyzerSettings:
    """Load and validate the analyzer configuration; no path means built-in defaults."""
    if config_path is None:
        return AnalyzerSettings()

    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    return AnalyzerSettings(
        path=path,
        depth_budget=_require_non_negative_int(
            parsed.get("depth_budget", _DEFAULTS.depth_budget), "depth_budget"
        ),
        core_domain_types=_string_sequence(
            parsed.get("core_domain_types"), "core_domain_types", _DEFAULTS.core_domain_types
        ),
        common_base_types=_string_sequence(
            parsed.get("common_base_types"), "common_base_types", _DEFAULTS.common_base_types
        ),
        known_collection_fields=_string_mapping(
            parsed.get("known_collection_fields"),
            "known_collection_fields",
            _DEFAULTS.known_collection_fields,
        ),
        well_known_fields=_string_mapping(
            parsed.get("well_known_fields"), "well_known_fields", _DEFAULTS.well_known_fields
        ),
        representation_literals=frozenset(
            _string_sequence(
                parsed.get("representation_literals"),
                "representation_literals",
                tuple(sorted(_DEFAULTS.representation_literals)),
            )
        ),
        api=_parse_api_section(parsed.get("api")),
    )


def _parse_api_section(value: Any) -> ApiSettings:
    if value is None:
        return ApiSettings()
    section = _require_mapping(value, "api")
    base_path = _require_non_empty_string(
        section.get("base_path", DEFAULT_BASE_PATH), "api.base_path"
    )
    if not base_path.startswith("/"):
        raise ConfigurationError("api.base_path must start with '/'.")
    return ApiSettings(
        title=_require_non_empty_string(section.get("title", DEFAULT_API_TITLE), "api.title"),
        version=_require_non_empty_string(
            str(section.get("version", DEFAULT_API_VERSION)), "api.version"
        ),
        description=_require_non_empty_string(
            section.get("description", DEFAULT_API_DESCRIPTION), "api.description"
        ),
        base_path=base_path.rstrip("/") or "/",
    )


def _string_sequence(value: Any, field_name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    if value is None:
        return default
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise ConfigurationError(f"{field_name} must be a list of strings.")
    normalized: list[str] = []
    for item in value:
        stripped = _require_non_empty_string(item, f"{field_name} entries")
        if stripped not in normalized:
            normalized.append(stripped)
    return tuple(normalized)


def _string_mapping(
    value: Any, field_name: str, default: Mapping[str, str]
) -> Mapping[str, str]:
    if value is None:
        return dict(default)
    section = _require_mapping(value, field_name)
    normalized: dict[str, str] = {}
    for key, type_name in section.items():
        name = _require_non_empty_string(key, f"{field_name} keys")
        normalized[name] = _require_non_empty_string(type_name, f"{field_name}.{name}")
    return normalized


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _require_non_negative_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value < 0:
        raise ConfigurationError(f"{field_name} must not be negative.")
    return value
