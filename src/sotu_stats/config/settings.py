"""Application configuration helpers for sotu_stats."""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
import types
from typing import Any, Dict, Optional, Tuple, Type, TypeVar, Union, get_args, get_origin, get_type_hints

from ..clients.presidency import DEFAULT_BASE_URL, DEFAULT_CATALOG_PATH


_DEFAULT_CONFIG_LOCATIONS = (
    Path("sotu_stats.json"),
    Path.home() / ".config" / "sotu_stats" / "config.json",
)


@dataclass(slots=True)
class ArchiveConfig:
    """Configuration for the American Presidency Project archive."""

    base_url: str = DEFAULT_BASE_URL
    catalog_path: str = DEFAULT_CATALOG_PATH
    catalog_link_selector: str = "td a[href*='/documents/']"
    title_selector: str = ".diet-title a"
    date_selector: str = ".date-display-single"
    body_selector: str = ".field-docs-content p"
    timeout: float = 30.0
    max_retries: int = 3
    request_delay: float = 0.0
    excluded_ids: Tuple[str, ...] = ()
    user_agent: str = "sotu-stats/0.1"


@dataclass(slots=True)
class AnalysisConfig:
    """Configuration for the text statistics."""

    rules_path: Optional[str] = None
    laughter_marker: str = "Laughter"
    applause_marker: str = "Applause"
    max_workers: int = 1


@dataclass(slots=True)
class ReportConfig:
    """Configuration for tables and charts."""

    output_dir: str = "charts"
    year_threshold: int = 1960
    party_path: Optional[str] = None


@dataclass(slots=True)
class AppConfig:
    """High level application configuration."""

    archive: ArchiveConfig
    analysis: AnalysisConfig
    report: ReportConfig


def _load_from_env(prefix: str) -> Dict[str, Any]:
    """Load configuration entries for ``prefix`` from the environment."""

    data: Dict[str, Any] = {}
    for key, value in os.environ.items():
        if key.startswith(prefix):
            normalized_key = key.removeprefix(prefix)
            data[normalized_key.lower()] = value
    return data


def _merge_dict(target: Dict[str, Any], updates: Dict[str, Any]) -> Dict[str, Any]:
    merged = target.copy()
    merged.update({k: v for k, v in updates.items() if v is not None})
    return merged


def _load_config_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf8") as fh:
        return json.load(fh)


T = TypeVar("T")


def _coerce_value(value: Any, annotation: Any) -> Any:
    """Best-effort conversion of ``value`` to match ``annotation``."""

    if value is None:
        return None

    origin = get_origin(annotation)
    if origin in (Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]  # noqa: E721 - allow Optional
        if not args:
            return None
        last_error: Exception | None = None
        for candidate in args:
            try:
                return _coerce_value(value, candidate)
            except (TypeError, ValueError) as exc:
                last_error = exc
        raise ValueError(f"Cannot convert {value!r} to {annotation}") from last_error

    target_type = origin or annotation

    if target_type in {Any, object}:
        return value

    if target_type is tuple:
        # environment variables carry lists as comma separated text
        if isinstance(value, str):
            items = [item.strip() for item in value.split(",")]
        elif isinstance(value, (list, tuple)):
            items = list(value)
        else:
            raise ValueError(f"Cannot convert {value!r} to tuple")
        item_type = next((arg for arg in get_args(annotation) if arg is not Ellipsis), Any)
        return tuple(_coerce_value(item, item_type) for item in items if item != "")

    if target_type is int:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        if isinstance(value, (float, str)):
            return int(float(value))
        raise ValueError(f"Cannot convert {value!r} to int")

    if target_type is float:
        if isinstance(value, (int, float)):
            return float(value)
        if isinstance(value, str):
            return float(value)
        raise ValueError(f"Cannot convert {value!r} to float")

    if target_type is str:
        if isinstance(value, str):
            return value
        return str(value)

    return value


def _dataclass_from_dict(cls: Type[T], data: Dict[str, Any]) -> T:
    """Create dataclass ``cls`` while coercing ``data`` to the proper types."""

    kwargs: Dict[str, Any] = {}
    type_hints = get_type_hints(cls)
    for field in fields(cls):
        if field.name not in data:
            continue
        try:
            annotation = type_hints.get(field.name, field.type)
            kwargs[field.name] = _coerce_value(data[field.name], annotation)
        except (TypeError, ValueError) as exc:
            raise ValueError(
                f"Invalid value for {cls.__name__}.{field.name}: {data[field.name]!r}"
            ) from exc
    return cls(**kwargs)


def resolve_config_path(explicit_path: Optional[Path] = None) -> Path:
    """Return the effective configuration file path.

    If ``explicit_path`` is provided it is returned verbatim. Otherwise the
    function checks the default locations in order. The first existing file is
    used; if none are present the function falls back to the last default path
    (``~/.config/sotu_stats/config.json``).
    """

    if explicit_path:
        return explicit_path

    for candidate in _DEFAULT_CONFIG_LOCATIONS:
        if candidate.exists():
            return candidate

    return _DEFAULT_CONFIG_LOCATIONS[-1]


def load_config(explicit_path: Optional[Path] = None) -> AppConfig:
    """Create the application configuration.

    The function combines default values, optional configuration files and
    environment variables (``SOTU_*``) into a single :class:`AppConfig`
    instance. Environment variable names use the format
    ``SOTU_SECTION_FIELD`` (e.g. ``SOTU_ARCHIVE_MAX_RETRIES`` or
    ``SOTU_ARCHIVE_EXCLUDED_IDS=/documents/a,/documents/b``).
    """

    base = {
        "archive": asdict(ArchiveConfig()),
        "analysis": asdict(AnalysisConfig()),
        "report": asdict(ReportConfig()),
    }

    file_data: Dict[str, Any] = {}
    if explicit_path:
        file_data = _load_config_file(explicit_path)
    else:
        for candidate in _DEFAULT_CONFIG_LOCATIONS:
            file_data = _load_config_file(candidate)
            if file_data:
                break

    merged = _merge_dict(base, file_data)

    archive_data = _merge_dict(merged.get("archive", {}), _load_from_env("SOTU_ARCHIVE_"))
    analysis_data = _merge_dict(merged.get("analysis", {}), _load_from_env("SOTU_ANALYSIS_"))
    report_data = _merge_dict(merged.get("report", {}), _load_from_env("SOTU_REPORT_"))

    return AppConfig(
        archive=_dataclass_from_dict(ArchiveConfig, archive_data),
        analysis=_dataclass_from_dict(AnalysisConfig, analysis_data),
        report=_dataclass_from_dict(ReportConfig, report_data),
    )


def save_config(config: AppConfig, path: Optional[Path] = None) -> Path:
    """Persist ``config`` as JSON and return the target path."""

    target = resolve_config_path(path)
    target.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "archive": asdict(config.archive),
        "analysis": asdict(config.analysis),
        "report": asdict(config.report),
    }
    data["archive"]["excluded_ids"] = list(config.archive.excluded_ids)
    with target.open("w", encoding="utf8") as fh:
        json.dump(data, fh, ensure_ascii=False, indent=2, sort_keys=True)
        fh.write("\n")
    return target


__all__ = [
    "AnalysisConfig",
    "AppConfig",
    "ArchiveConfig",
    "ReportConfig",
    "load_config",
    "resolve_config_path",
    "save_config",
]
