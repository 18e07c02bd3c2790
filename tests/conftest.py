from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.post_tree import FakeGit, PostTree


@pytest.fixture
def post_tree(tmp_path: Path) -> PostTree:
    """Provide an empty source tree rooted at the pytest tmp_path."""
    return PostTree(tmp_path)


@pytest.fixture
def fake_git() -> FakeGit:
    return FakeGit()
