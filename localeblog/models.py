"""Records that flow through a build."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field

from .utils import human_date, iso_date, language_code


@dataclass(frozen=True)
class PostMetadata:
    """Title and locale parsed from a ``dir/locale.md`` source path."""

    title: str
    locale: str

    @property
    def language(self) -> str:
        return language_code(self.locale)


@dataclass(frozen=True)
class Post:
    author: str
    created: dt.datetime
    title: str
    content: str
    locale: str

    @property
    def language(self) -> str:
        return language_code(self.locale)

    @property
    def created_human(self) -> str:
        return human_date(self.created, self.locale)

    @property
    def created_datetime(self) -> str:
        return iso_date(self.created)


@dataclass
class LocaleIndex:
    """Post titles for one locale, kept in discovery order."""

    locale: str
    titles: list[str] = field(default_factory=list)

    @property
    def language(self) -> str:
        return language_code(self.locale)


__all__ = ["LocaleIndex", "Post", "PostMetadata"]
