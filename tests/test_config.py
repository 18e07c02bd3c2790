"""Tests for the optional hidden site config."""

from __future__ import annotations

from pathlib import Path

import pytest

from localeblog.config import SiteConfig, find_config, load_config, load_site_config
from localeblog.errors import ConfigError


def test_defaults_without_config(tmp_path: Path) -> None:
    assert find_config(tmp_path) is None
    assert load_site_config(tmp_path) == SiteConfig()
    assert SiteConfig().output == "dist"


def test_toml_config(tmp_path: Path) -> None:
    (tmp_path / ".site.toml").write_text(
        'author = "Grace Hopper"\ngit = "/opt/git/bin/git"\npygments_style = "monokai"\n',
        encoding="utf-8",
    )

    config = load_site_config(tmp_path)

    assert config.author == "Grace Hopper"
    assert config.git == "/opt/git/bin/git"
    assert config.pygments_style == "monokai"
    assert config.highlight is True


def test_yaml_config(tmp_path: Path) -> None:
    (tmp_path / ".site.yaml").write_text("author: Linus\nhighlight: 'no'\noutput: site\n", encoding="utf-8")

    config = load_site_config(tmp_path)

    assert config == SiteConfig(author="Linus", output="site", highlight=False)


def test_empty_yaml_config(tmp_path: Path) -> None:
    (tmp_path / ".site.yml").write_text("", encoding="utf-8")

    assert load_site_config(tmp_path) == SiteConfig()


def test_json_config(tmp_path: Path) -> None:
    (tmp_path / ".site.json").write_text('{"author": "  ", "highlight": 0}', encoding="utf-8")

    config = load_site_config(tmp_path)

    assert config.author == "Anonymous"
    assert config.highlight is False


def test_toml_takes_precedence(tmp_path: Path) -> None:
    (tmp_path / ".site.json").write_text('{"author": "json"}', encoding="utf-8")
    (tmp_path / ".site.toml").write_text('author = "toml"\n', encoding="utf-8")

    assert find_config(tmp_path) == tmp_path / ".site.toml"
    assert load_site_config(tmp_path).author == "toml"


@pytest.mark.parametrize(
    ("name", "text"),
    [
        (".site.toml", "author = \n"),
        (".site.yaml", "author: [unclosed\n"),
        (".site.yaml", "- just\n- a list\n"),
        (".site.json", "{not json"),
        (".site.json", "[1, 2]"),
    ],
)
def test_invalid_config_raises(tmp_path: Path, name: str, text: str) -> None:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(path)


def test_undecodable_config_raises(tmp_path: Path) -> None:
    path = tmp_path / ".site.toml"
    path.write_bytes(b"author = \"\xff\xfe\"\n")

    with pytest.raises(ConfigError):
        load_site_config(tmp_path)
