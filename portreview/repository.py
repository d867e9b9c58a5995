from __future__ import annotations
from typing import Dict
from dataclasses import dataclass
from pathlib import Path
import logging
import tempfile

import git
from git.exc import CommandError, InvalidGitRepositoryError, NoSuchPathError


class ReviewError(Exception):
    pass


@dataclass(frozen=True)
class ReviewTarget:
    url: str
    location: Path

    @classmethod
    def from_url(cls, url: str) -> ReviewTarget:
        """
        The local directory is the last "/"-delimited segment of the URL,
        taken literally (no ".git" stripping).
        """
        name = url.split('/')[-1]
        if not name:
            raise ReviewError(f"Cannot derive a directory name from {url!r}")
        return cls(url=url, location=Path(name))


def isolated_git_env(home: Path) -> Dict[str, str]:
    """
    Environment overrides for git subprocesses so that the invoker's personal
    config and stored credentials are not picked up.
    """
    return {
        "HOME": str(home),
        "USERPROFILE": str(home),
        "XDG_CONFIG_HOME": str(home / ".config"),
        "GIT_CONFIG_NOSYSTEM": "1",
        "GIT_TERMINAL_PROMPT": "0",
    }


def open_repository(location: Path) -> git.Repo:
    if not location.is_dir():
        raise ReviewError(f"Path {location} is not a valid directory.")
    try:
        repo = git.Repo(location)
    except (InvalidGitRepositoryError, NoSuchPathError) as e:
        raise ReviewError(f"Path {location} is not a valid git repository.") from e

    if repo.working_tree_dir is None:
        repo.close()
        raise ReviewError(f"Cannot review the bare repository at {location}.")
    return repo


def clone_repository(url: str, location: Path) -> git.Repo:
    # The overrides are handed to the git subprocess only; os.environ is untouched.
    with tempfile.TemporaryDirectory(prefix="portreview-home-") as home:
        env = isolated_git_env(Path(home))
        # CommandError also covers a missing git executable
        try:
            return git.Repo.clone_from(url, location, env=env)
        except CommandError as e:
            raise ReviewError(f"Failed to clone {url}: {e.stderr.strip() or e}") from e


def acquire(target: ReviewTarget, skip_clone: bool = False) -> git.Repo:
    if skip_clone:
        logging.info(f"Opening existing repository at {target.location}")
        return open_repository(target.location)

    logging.info(f"Cloning {target.url} to {target.location}")
    return clone_repository(target.url, target.location)
