import abc
from dataclasses import dataclass
from pathlib import Path
from typing import List, TypeAlias

import git

from portreview.repository import ReviewError


@dataclass(frozen=True)
class Pass:
    pass


@dataclass(frozen=True)
class Warn:
    message: str


@dataclass(frozen=True)
class Fail:
    message: str


ContractResult: TypeAlias = Pass | Warn | Fail


class Contract(abc.ABC):
    """
    A named, read-only compliance check against a checked-out repository.

    Implementations hold no state and must not modify the repository, its
    index or its working tree.
    """

    name: str

    @abc.abstractmethod
    def test(self, repo: git.Repo) -> ContractResult:
        raise NotImplementedError()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


def working_tree(repo: git.Repo) -> Path:
    if repo.working_tree_dir is None:
        raise ReviewError("Contracts require a non-bare repository")
    return Path(repo.working_tree_dir)


def tracked_paths(repo: git.Repo) -> List[str]:
    """
    Paths recorded in the index, as listed by git itself. Every index format
    git writes is readable this way, including version 4.
    """
    output = repo.git.ls_files("-z")
    return [path for path in output.split("\0") if path]
