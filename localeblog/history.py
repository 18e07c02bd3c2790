"""Creation dates derived from git history."""

from __future__ import annotations

import datetime as dt
import subprocess
from pathlib import Path
from typing import Callable, Iterable

from .errors import HistoryLookupError, TimestampParseError


class RevisionHistory:
    """Looks up when a file was first added to a git working tree."""

    def __init__(
        self,
        root: Path,
        *,
        git: str = "git",
        runner: Callable[..., str] | None = None,
    ) -> None:
        self.root = Path(root)
        self.git = git
        self._runner = runner or self._default_runner

    def creation_date(self, path: str) -> dt.datetime:
        """Return the commit time of the earliest commit that added ``path``."""
        args = [self.git, "log", "--no-renames", "--diff-filter=A", "--format=%ct", "--", path]
        try:
            output = self._run(args, cwd=self.root, capture_output=True)
        except subprocess.CalledProcessError as exc:
            detail = (exc.stderr or "").strip() or f"exit status {exc.returncode}"
            raise HistoryLookupError(f"git log failed for {path}: {detail}") from exc
        except OSError as exc:
            raise HistoryLookupError(f"cannot run {self.git}: {exc}") from exc

        lines = [line.strip() for line in output.strip().splitlines() if line.strip()]
        if not lines:
            raise HistoryLookupError(f"no commit adds {path}; is it tracked?")
        # git log lists newest first; the last addition is the original one.
        earliest = lines[-1]
        try:
            return dt.datetime.fromtimestamp(int(earliest), tz=dt.timezone.utc)
        except (ValueError, OverflowError, OSError) as exc:
            raise TimestampParseError(f"unexpected git log output for {path}: {earliest!r}") from exc

    def _run(
        self,
        args: Iterable[str],
        *,
        cwd: Path,
        capture_output: bool = False,
    ) -> str:
        return self._runner(args, cwd=cwd, capture_output=capture_output)

    @staticmethod
    def _default_runner(
        args: Iterable[str],
        *,
        cwd: Path,
        capture_output: bool = False,
    ) -> str:
        completed = subprocess.run(
            list(args),
            cwd=str(cwd),
            check=True,
            text=True,
            capture_output=capture_output,
        )
        return completed.stdout if capture_output else ""


__all__ = ["RevisionHistory"]
