from __future__ import annotations

from .errors import MalformedPathError, NotMarkdownError
from .models import PostMetadata

MARKDOWN_SUFFIX = ".md"


def classify(path: str) -> PostMetadata:
    """Parse ``title-with-dashes/locale.md`` into a title and a locale tag."""
    normalized = path.replace("\\", "/")
    parts = normalized.split("/", 1)
    if len(parts) < 2:
        raise MalformedPathError(f"expected <title>/<locale>.md, got {path!r}")
    directory, filename = parts
    if "/" in filename:
        raise MalformedPathError(f"nested post path {path!r}")

    title = directory.replace("-", " ")
    if not filename.endswith(MARKDOWN_SUFFIX):
        raise NotMarkdownError(f"not a markdown file: {path!r}")
    locale = filename[: -len(MARKDOWN_SUFFIX)]
    if not title or not locale:
        raise MalformedPathError(f"empty title or locale in {path!r}")
    return PostMetadata(title=title, locale=locale)
