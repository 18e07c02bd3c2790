from __future__ import annotations

import html
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import quote

from .content import classify
from .errors import FilesystemError
from .history import RevisionHistory
from .models import LocaleIndex, Post
from .render import MarkdownRenderer, Templates, render_template, write_text


@dataclass(frozen=True)
class Site:
    """Everything the page builders share for one build."""

    source_root: Path
    author: str
    templates: Templates
    renderer: MarkdownRenderer
    history: RevisionHistory


def post_url(title: str) -> str:
    return f"{quote(title)}.html"


def build_title_list(titles: list[str]) -> str:
    items = [
        f'<li><a href="{post_url(title)}">{html.escape(title)}</a></li>'
        for title in titles
    ]
    return "\n".join(items) if items else "<li>No posts yet.</li>"


def build_index(index: LocaleIndex, output_dir: Path, site: Site) -> Path:
    html_doc = render_template(
        site.templates.index,
        author=html.escape(site.author),
        locale=html.escape(index.locale),
        lang=html.escape(index.language),
        titles=build_title_list(index.titles),
    )
    path = output_dir / index.locale / "index.html"
    write_text(path, html_doc)
    return path


def build_post(source: str, output_dir: Path, site: Site) -> Path:
    """Render one ``title/locale.md`` source into ``<locale>/<title>.html``."""
    source_path = site.source_root / source
    try:
        data = source_path.read_bytes()
    except OSError as exc:
        raise FilesystemError(f"cannot read {source_path}: {exc}") from exc

    meta = classify(source)
    created = site.history.creation_date(source)
    content = site.renderer.render(data)
    post = Post(
        author=site.author,
        created=created,
        title=meta.title,
        content=content,
        locale=meta.locale,
    )

    html_doc = render_template(
        site.templates.post,
        author=html.escape(post.author),
        title=html.escape(post.title),
        date=html.escape(post.created_human),
        datetime=post.created_datetime,
        lang=html.escape(post.language),
        locale=html.escape(post.locale),
        index_url="index.html",
        content=post.content,
    )
    path = output_dir / post.locale / f"{post.title}.html"
    write_text(path, html_doc)
    return path
