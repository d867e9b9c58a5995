from pathlib import PurePosixPath
from typing import List

import git

from portreview.contracts.base import Contract, ContractResult, Pass, Fail, tracked_paths

PLACEHOLDER_FILE_MARKER = ".gitkeep"

REQUIRED_ASSETS: List[PurePosixPath] = [
    PurePosixPath("assets/mocha.webp"),
    PurePosixPath("assets/latte.webp"),
    PurePosixPath("assets/macchiato.webp"),
    PurePosixPath("assets/frappe.webp"),
]


class NoGitKeepContract(Contract):
    """Fails on the first tracked path that still contains a .gitkeep placeholder."""

    name = "No .gitkeep files"

    def test(self, repo: git.Repo) -> ContractResult:
        for path in tracked_paths(repo):
            if PLACEHOLDER_FILE_MARKER in path:
                return Fail(f"path at {path}")
        return Pass()


class AssetsContract(Contract):
    """Every preview image must be tracked in the index."""

    name = "Assets are correct"

    def __init__(self, required: List[PurePosixPath] = REQUIRED_ASSETS):
        self.required = list(required)

    def test(self, repo: git.Repo) -> ContractResult:
        tracked = set(tracked_paths(repo))
        for asset in self.required:
            if asset.as_posix() not in tracked:
                return Fail(f"path '{asset}' is not valid")
        return Pass()
