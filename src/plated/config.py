from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import os
import tomllib
from typing import Any, Optional

from .errors import ConfigError

DEFAULT_SITE_TITLE = "Plated Memories"
DEFAULT_DOCUMENT = "recipes.json"
DEFAULT_FETCH_TIMEOUT = 10.0
DEFAULT_HEADER_ICON = "🍽"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class AssetsConfig:
    avatar_template: str = "assets/sources/{name}.jpeg"
    image_placeholder: str = "https://placehold.co/400x300/ccc/fff?text=Image+Error"
    avatar_placeholder: str = "https://placehold.co/128x128/ccc/fff?text=?"


@dataclass(frozen=True)
class TuiConfig:
    header_icon: str = DEFAULT_HEADER_ICON


@dataclass(frozen=True)
class EffectiveConfig:
    document: str
    site_title: str
    fetch_timeout: float
    log_level: str
    default_project: Optional[str]
    assets: AssetsConfig
    tui: TuiConfig
    project_dir: str


def _config_root() -> Path:
    return Path(os.path.expanduser("~/.config/plated"))


def load_global_config() -> dict[str, Any]:
    path = _config_root() / "config.toml"
    if not path.exists():
        return {}
    return _load_toml(path)


def load_profile(profile: str) -> Optional[str]:
    path = _config_root() / "projects.d" / f"{profile}.toml"
    if not path.exists():
        return None
    data = _load_toml(path)
    project = data.get("project")
    if not project:
        raise ConfigError(f"Profile {profile!r} missing 'project' key")
    return str(project)


def load_project_config(project_dir: str) -> dict[str, Any]:
    path = Path(project_dir) / "plated.toml"
    if not path.exists():
        return {}
    return _load_toml(path)


def _load_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as fh:
            return tomllib.load(fh)
    except OSError as exc:
        raise ConfigError(f"Failed to read config: {path}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in config: {path}") from exc


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def merge_config(cli: dict[str, Any], project: dict[str, Any], global_cfg: dict[str, Any]) -> dict[str, Any]:
    merged = _deep_merge(global_cfg, project)
    return _deep_merge(merged, cli)


def resolve_config(cli_args: dict[str, Any]) -> EffectiveConfig:
    global_cfg = load_global_config()
    profile = cli_args.get("profile")
    project_dir = cli_args.get("project")
    if not project_dir and profile:
        project_dir = load_profile(profile)
    if not project_dir:
        project_dir = global_cfg.get("default_project") or os.getcwd()

    project_cfg = load_project_config(project_dir)

    cli_cfg = _cli_to_dict(cli_args)
    merged = merge_config(cli_cfg, project_cfg, global_cfg)

    document = str(merged.get("document") or DEFAULT_DOCUMENT).strip()
    if not document:
        raise ConfigError("document must not be empty")

    assets_cfg = merged.get("assets", {})
    if not isinstance(assets_cfg, dict):
        raise ConfigError("[assets] must be a table")
    avatar_template = str(assets_cfg.get("avatar_template", AssetsConfig.avatar_template))
    if "{name}" not in avatar_template:
        raise ConfigError("assets.avatar_template must contain a {name} placeholder")
    try:
        avatar_template.format(name="avatar")
    except (KeyError, IndexError, ValueError) as exc:
        raise ConfigError(f"Invalid assets.avatar_template: {avatar_template!r}") from exc

    return EffectiveConfig(
        document=document,
        site_title=str(merged.get("site_title") or DEFAULT_SITE_TITLE),
        fetch_timeout=_parse_timeout(merged.get("fetch_timeout", DEFAULT_FETCH_TIMEOUT)),
        log_level=_normalize_log_level(merged.get("log_level", "WARNING")),
        default_project=merged.get("default_project"),
        assets=AssetsConfig(
            avatar_template=avatar_template,
            image_placeholder=str(assets_cfg.get("image_placeholder", AssetsConfig.image_placeholder)),
            avatar_placeholder=str(assets_cfg.get("avatar_placeholder", AssetsConfig.avatar_placeholder)),
        ),
        tui=TuiConfig(header_icon=str(merged.get("tui_header_icon", DEFAULT_HEADER_ICON))),
        project_dir=str(project_dir),
    )


def _cli_to_dict(cli_args: dict[str, Any]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key in ("document", "site_title", "fetch_timeout", "log_level", "default_project", "tui_header_icon"):
        if cli_args.get(key) is not None:
            out[key] = cli_args[key]

    assets: dict[str, Any] = {}
    for key in ("avatar_template", "image_placeholder", "avatar_placeholder"):
        if cli_args.get(key) is not None:
            assets[key] = cli_args[key]
    if assets:
        out["assets"] = assets

    return out


def config_to_toml(cfg: EffectiveConfig) -> str:
    lines = [
        f"document = {cfg.document!r}",
        f"site_title = {cfg.site_title!r}",
        f"fetch_timeout = {cfg.fetch_timeout!r}",
        f"log_level = {cfg.log_level!r}",
    ]
    if cfg.default_project:
        lines.append(f"default_project = {cfg.default_project!r}")
    lines.append(f"tui_header_icon = {cfg.tui.header_icon!r}")
    lines.append("")
    lines.append("[assets]")
    lines.append(f"avatar_template = {cfg.assets.avatar_template!r}")
    lines.append(f"image_placeholder = {cfg.assets.image_placeholder!r}")
    lines.append(f"avatar_placeholder = {cfg.assets.avatar_placeholder!r}")
    return "\n".join(lines) + "\n"


def _parse_timeout(value: Any) -> float:
    if isinstance(value, bool):
        raise ConfigError(f"fetch_timeout must be a number, got {value!r}")
    try:
        timeout = float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"fetch_timeout must be a number, got {value!r}") from exc
    if timeout <= 0:
        raise ConfigError("fetch_timeout must be positive")
    return timeout


def _normalize_log_level(value: Any) -> str:
    text = str(value or "").strip().upper()
    if text in LOG_LEVELS:
        return text
    return "WARNING"
