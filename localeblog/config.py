from __future__ import annotations

import json
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from .errors import ConfigError
from .utils import parse_bool

CONFIG_NAMES = (".site.toml", ".site.yaml", ".site.yml", ".site.json")
DEFAULT_AUTHOR = "Anonymous"
DEFAULT_OUTPUT = "dist"


@dataclass(frozen=True)
class SiteConfig:
    author: str = DEFAULT_AUTHOR
    output: str = DEFAULT_OUTPUT
    git: str = "git"
    highlight: bool = True
    pygments_style: str = "default"

    @classmethod
    def from_mapping(cls, data: dict) -> "SiteConfig":
        def cfg_str(key: str, default: str) -> str:
            value = data.get(key)
            if value is None:
                return default
            value = str(value).strip()
            return value or default

        highlight = data.get("highlight")
        return cls(
            author=cfg_str("author", DEFAULT_AUTHOR),
            output=cfg_str("output", DEFAULT_OUTPUT),
            git=cfg_str("git", "git"),
            highlight=True if highlight is None else parse_bool(highlight),
            pygments_style=cfg_str("pygments_style", "default"),
        )


def find_config(source_root: Path) -> Optional[Path]:
    for name in CONFIG_NAMES:
        path = source_root / name
        if path.is_file():
            return path
    return None


def load_config(path: Path) -> dict:
    if not path.exists():
        return {}
    suffix = path.suffix.lower()
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    if suffix == ".toml":
        try:
            return tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML in config file {path}: {exc}") from exc
    if suffix in {".yml", ".yaml"}:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in config file {path}: {exc}") from exc
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"YAML config must be a mapping: {path}")
        return data
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in config file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"JSON config must be a mapping: {path}")
    return data


def load_site_config(source_root: Path) -> SiteConfig:
    path = find_config(source_root)
    if path is None:
        return SiteConfig()
    return SiteConfig.from_mapping(load_config(path))
