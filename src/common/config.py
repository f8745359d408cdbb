"""Helpers for loading runtime configuration profiles."""
from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .errors import BackendError, ErrorCode
from .models import GlobalSettings, ProfileSettings, RuntimeConfig

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "defaults.json"
DEFAULT_PROFILE = "default"
ALLOWED_ERROR_POLICIES = {"fail-fast", "strict", "replace"}


@dataclass(slots=True)
class ConfigDocument:
    source: Path
    version: int
    global_settings: GlobalSettings
    profiles: Dict[str, ProfileSettings]


def load_runtime_config(
    profile: str = DEFAULT_PROFILE,
    *,
    config_path: Optional[Path] = None,
    overrides: Optional[Dict[str, Dict[str, Any]]] = None,
) -> RuntimeConfig:
    """Load configuration JSON, validate it, and resolve a specific profile."""

    document = load_config_document(
        profile_name=profile,
        config_path=config_path,
        overrides=overrides,
    )
    return RuntimeConfig(global_settings=document.global_settings, profile=document.profiles[profile])


def load_config_document(
    *,
    profile_name: Optional[str] = None,
    config_path: Optional[Path] = None,
    overrides: Optional[Dict[str, Dict[str, Any]]] = None,
) -> ConfigDocument:
    cfg_path = config_path or DEFAULT_CONFIG_PATH
    raw = _read_config_json(cfg_path)

    version = _require_positive_int(raw.get("version"), "version", cfg_path)
    global_section = raw.get("global")
    if not isinstance(global_section, Mapping):
        raise BackendError(ErrorCode.CONFIG_ERROR, f"'global' section missing in {cfg_path}")

    overrides = overrides or {}
    global_data = {**global_section, **(overrides.get("global") or {})}
    global_settings = _build_global_settings(global_data, cfg_path)

    profiles_section = raw.get("profiles")
    if not isinstance(profiles_section, Mapping) or not profiles_section:
        raise BackendError(ErrorCode.CONFIG_ERROR, f"'profiles' section missing in {cfg_path}")

    profile_overrides = overrides.get("profile") or {}
    profiles: Dict[str, ProfileSettings] = {}
    for name, profile_data in profiles_section.items():
        if not isinstance(profile_data, Mapping):
            raise BackendError(
                ErrorCode.CONFIG_ERROR,
                f"Profile '{name}' must be an object in {cfg_path}",
            )
        merged = dict(profile_data)
        if profile_name and name == profile_name and profile_overrides:
            merged = {**merged, **profile_overrides}
        profiles[name] = _build_profile_settings(name, merged, cfg_path)

    if profile_name and profile_name not in profiles:
        raise BackendError(
            ErrorCode.CONFIG_ERROR,
            f"Profile '{profile_name}' not found in {cfg_path}",
        )

    return ConfigDocument(
        source=cfg_path,
        version=version,
        global_settings=global_settings,
        profiles=profiles,
    )


def default_runtime_config() -> RuntimeConfig:
    """Built-in settings used when no configuration document is involved."""

    return RuntimeConfig(
        global_settings=GlobalSettings(),
        profile=ProfileSettings(description="built-in defaults"),
    )


def error_mode_from_policy(policy: str) -> str:
    """Translate human-friendly error policy into Python's encoding error handler."""

    return "strict" if policy.lower() in {"fail-fast", "strict"} else "replace"


# ---------------------------------------------------------------------------
# Internal helpers


def _read_config_json(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as handle:
            return json.load(handle)
    except FileNotFoundError as exc:  # pragma: no cover - depends on filesystem
        raise BackendError(ErrorCode.CONFIG_ERROR, f"Config file '{path}' not found") from exc
    except json.JSONDecodeError as exc:
        raise BackendError(ErrorCode.CONFIG_ERROR, f"Config file '{path}' is not valid JSON: {exc}") from exc


def _build_global_settings(data: Mapping[str, Any], source: Path) -> GlobalSettings:
    defaults = GlobalSettings()
    encoding = _require_string(data.get("encoding", defaults.encoding), "global.encoding", source)
    error_policy = _normalize_error_policy(data.get("error_policy", defaults.error_policy), source)
    delimiter = data.get("delimiter", defaults.delimiter)
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise BackendError(
            ErrorCode.CONFIG_ERROR,
            f"global.delimiter must be a single character in {source}",
        )
    return GlobalSettings(encoding=encoding, error_policy=error_policy, delimiter=delimiter)


def _build_profile_settings(name: str, data: Mapping[str, Any], source: Path) -> ProfileSettings:
    prefix = f"profiles.{name}"
    if "description" not in data:
        raise BackendError(
            ErrorCode.CONFIG_ERROR,
            f"Profile '{name}' missing fields ['description'] in {source}",
        )
    defaults = ProfileSettings(description="")

    description = _require_string(data.get("description"), f"{prefix}.description", source)
    sample_rows = _require_positive_int(
        data.get("sample_rows", defaults.sample_rows), f"{prefix}.sample_rows", source
    )
    decimal_precision = _require_positive_int(
        data.get("decimal_precision", defaults.decimal_precision), f"{prefix}.decimal_precision", source
    )
    unknown_group_label = _require_string(
        data.get("unknown_group_label", defaults.unknown_group_label),
        f"{prefix}.unknown_group_label",
        source,
    )
    return ProfileSettings(
        description=description,
        sample_rows=sample_rows,
        decimal_precision=decimal_precision,
        unknown_group_label=unknown_group_label,
    )


def _normalize_error_policy(value: Any, source: Path) -> str:
    policy = _require_string(value, "global.error_policy", source).lower()
    if policy not in ALLOWED_ERROR_POLICIES:
        allowed = ", ".join(sorted(ALLOWED_ERROR_POLICIES))
        raise BackendError(
            ErrorCode.CONFIG_ERROR,
            f"Unsupported error_policy '{value}' in {source}. Allowed: {allowed}",
        )
    return "fail-fast" if policy in {"fail-fast", "strict"} else "replace"


def _require_string(value: Any, field: str, source: Path) -> str:
    if not isinstance(value, str):
        raise BackendError(ErrorCode.CONFIG_ERROR, f"{field} must be a string in {source}")
    text = value.strip()
    if not text:
        raise BackendError(ErrorCode.CONFIG_ERROR, f"{field} must be non-empty in {source}")
    return text


def _require_positive_int(value: Any, field: str, source: Path) -> int:
    if isinstance(value, bool):
        raise BackendError(ErrorCode.CONFIG_ERROR, f"{field} must be an integer in {source}")
    try:
        num = int(value)
    except (TypeError, ValueError) as exc:
        raise BackendError(
            ErrorCode.CONFIG_ERROR,
            f"{field} must be an integer in {source}",
        ) from exc
    if num <= 0:
        raise BackendError(
            ErrorCode.CONFIG_ERROR,
            f"{field} must be greater than zero in {source}",
        )
    return num
