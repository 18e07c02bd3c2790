from __future__ import annotations

import argparse
import sys
import time
import traceback
from pathlib import Path
from typing import Callable, Iterator, Optional

from .config import SiteConfig, load_site_config
from .content import classify
from .errors import BuildError, FilesystemError
from .history import RevisionHistory
from .models import LocaleIndex
from .pages import Site, build_index, build_post
from .render import MarkdownRenderer, RendererConfig, Templates, copy_assets, write_pygments_css


def _walk(directory: Path) -> Iterator[Path]:
    for entry in sorted(directory.iterdir(), key=lambda p: p.name):
        if entry.is_symlink():
            continue
        if entry.is_dir():
            yield from _walk(entry)
        elif entry.is_file():
            yield entry


def is_excluded(rel: str, output_rel: Optional[str]) -> bool:
    if rel.startswith("."):
        return True
    if output_rel and (rel == output_rel or rel.startswith(output_rel + "/")):
        return True
    return False


def discover_sources(source_root: Path, output_dir: Path) -> list[str]:
    """List post sources under ``source_root`` in lexical walk order.

    Paths whose first segment is hidden and anything inside ``output_dir``
    are left out.
    """
    try:
        output_rel: Optional[str] = output_dir.resolve().relative_to(source_root.resolve()).as_posix()
    except ValueError:
        output_rel = None
    sources = []
    try:
        for path in _walk(source_root):
            rel = path.relative_to(source_root).as_posix()
            if is_excluded(rel, output_rel):
                continue
            sources.append(rel)
    except OSError as exc:
        raise FilesystemError(f"cannot walk {source_root}: {exc}") from exc
    return sources


def collect_indexes(sources: list[str]) -> dict[str, LocaleIndex]:
    indexes: dict[str, LocaleIndex] = {}
    for source in sources:
        meta = classify(source)
        index = indexes.get(meta.locale)
        if index is None:
            index = indexes[meta.locale] = LocaleIndex(meta.locale)
        index.titles.append(meta.title)
    return indexes


def build_site(
    source_root: Path,
    config: Optional[SiteConfig] = None,
    *,
    runner: Callable[..., str] | None = None,
) -> Path:
    source_root = Path(source_root)
    if not source_root.is_dir():
        raise FilesystemError(f"Source directory not found: {source_root}")
    if config is None:
        config = load_site_config(source_root)
    output_dir = source_root / config.output

    site = Site(
        source_root=source_root,
        author=config.author,
        templates=Templates.load(),
        renderer=MarkdownRenderer(RendererConfig.default(highlight=config.highlight)),
        history=RevisionHistory(source_root, git=config.git, runner=runner),
    )

    sources = discover_sources(source_root, output_dir)

    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FilesystemError(f"cannot create {output_dir}: {exc}") from exc
    copy_assets(output_dir)
    if config.highlight:
        write_pygments_css(output_dir, config.pygments_style)

    indexes = collect_indexes(sources)
    for index in indexes.values():
        path = build_index(index, output_dir, site)
        print(f"Generated index: {path}")

    for source in sources:
        path = build_post(source, output_dir, site)
        print(f"Generated post: {path}")

    return output_dir


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Build locale-tagged markdown posts into static HTML.")
    parser.add_argument("source", help="Git working tree containing <title>/<locale>.md posts.")
    args = parser.parse_args(argv)
    start = time.perf_counter()
    try:
        output_dir = build_site(Path(args.source))
    except BuildError as exc:
        print(f"Build failed: {exc}", file=sys.stderr)
        traceback.print_exc()
        sys.exit(1)
    elapsed = time.perf_counter() - start
    print(f"Build completed in {elapsed:.2f}s.")
    print(f"Site generated in: {output_dir}")
