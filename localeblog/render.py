from __future__ import annotations

import re
from dataclasses import dataclass, field
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path

import markdown
from pygments.formatters import HtmlFormatter
from pygments.util import ClassNotFound

from .errors import AssetCopyError, FilesystemError, RenderError
from .wikilink import WikiLinkExtension

PACKAGE = "localeblog"
PLACEHOLDER_RE = re.compile(r"\{\{(\w+)\}\}")


@dataclass(frozen=True)
class RendererConfig:
    """Extension set for the markdown renderer, fixed for the whole build."""

    extensions: tuple = ()
    extension_configs: dict = field(default_factory=dict)

    @classmethod
    def default(cls, *, highlight: bool = True) -> "RendererConfig":
        extensions = ["tables", "pymdownx.tilde", "smarty", WikiLinkExtension(), "toc", "fenced_code"]
        configs = {
            "pymdownx.tilde": {"subscript": False},
        }
        if highlight:
            extensions.append("codehilite")
            configs["codehilite"] = {"guess_lang": False, "css_class": "codehilite"}
        return cls(extensions=tuple(extensions), extension_configs=configs)


class MarkdownRenderer:
    def __init__(self, config: RendererConfig | None = None) -> None:
        self.config = config or RendererConfig.default()

    def render(self, source: bytes) -> str:
        try:
            text = source.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise RenderError(f"markdown source is not valid UTF-8: {exc}") from exc
        # A fresh parser per document keeps heading ids independent between posts.
        md = markdown.Markdown(
            extensions=list(self.config.extensions),
            extension_configs=self.config.extension_configs,
        )
        try:
            return md.convert(text)
        except Exception as exc:
            raise RenderError(f"cannot render markdown: {exc}") from exc


@dataclass(frozen=True)
class Templates:
    post: str
    index: str

    @classmethod
    def load(cls, directory: Path | None = None) -> "Templates":
        base = directory if directory is not None else resources.files(PACKAGE) / "templates"
        try:
            return cls(
                post=read_template(base / "post.html"),
                index=read_template(base / "index.html"),
            )
        except OSError as exc:
            raise FilesystemError(f"cannot load templates: {exc}") from exc


def render_template(template: str, **context: str) -> str:
    # One pass, so inserted values are never scanned for placeholders again.
    def repl(match: re.Match) -> str:
        return context.get(match.group(1), match.group(0))

    return PLACEHOLDER_RE.sub(repl, template)


def read_template(path: Path | Traversable) -> str:
    return path.read_text(encoding="utf-8")


def write_text(path: Path, text: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise FilesystemError(f"cannot write {path}: {exc}") from exc


def copy_assets(output_dir: Path, assets: Path | Traversable | None = None) -> list[Path]:
    """Copy the bundled static files into ``output_dir`` byte for byte."""
    source = assets if assets is not None else resources.files(PACKAGE) / "assets"
    copied: list[Path] = []
    try:
        _copy_tree(source, output_dir, copied)
    except OSError as exc:
        raise AssetCopyError(f"cannot copy bundled assets: {exc}") from exc
    return copied


def _copy_tree(source: Path | Traversable, dest: Path, copied: list[Path]) -> None:
    dest.mkdir(parents=True, exist_ok=True)
    for item in sorted(source.iterdir(), key=lambda p: p.name):
        target = dest / item.name
        if item.is_dir():
            _copy_tree(item, target, copied)
        else:
            target.write_bytes(item.read_bytes())
            copied.append(target)


def write_pygments_css(output_dir: Path, style: str) -> Path:
    try:
        css = HtmlFormatter(style=style).get_style_defs(".codehilite")
    except ClassNotFound as exc:
        raise AssetCopyError(f"unknown pygments style {style!r}") from exc
    path = output_dir / "public" / "pygments.css"
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(css, encoding="utf-8")
    except OSError as exc:
        raise AssetCopyError(f"cannot write {path}: {exc}") from exc
    return path
