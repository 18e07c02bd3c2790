from __future__ import annotations


class BuildError(Exception):
    """Base class for every failure that aborts a build."""


class MalformedPathError(BuildError):
    pass


class NotMarkdownError(BuildError):
    pass


class HistoryLookupError(BuildError):
    pass


class TimestampParseError(BuildError):
    pass


class RenderError(BuildError):
    pass


class FilesystemError(BuildError):
    pass


class AssetCopyError(BuildError):
    pass


class ConfigError(BuildError):
    pass


class LocaleFormatError(BuildError):
    pass
