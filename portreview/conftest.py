from pathlib import Path
from typing import Callable, Dict, Iterator

import git
import pytest

CLEAN_README = """\
<h3 align="center">Catppuccin for Foo</h3>

## Previews

<img src="assets/mocha.webp"/>

## 💝 Thanks to

- [Jane Doe](https://github.com/janedoe)
"""

CLEAN_LICENSE = """\
MIT License

Copyright (c) 2021 Catppuccin

Permission is hereby granted, free of charge, to any person obtaining a copy
"""

ASSETS = ["assets/mocha.webp", "assets/latte.webp", "assets/macchiato.webp", "assets/frappe.webp"]


def clean_port_files() -> Dict[str, str | bytes]:
    files: Dict[str, str | bytes] = {
        "README.md": CLEAN_README,
        "LICENSE": CLEAN_LICENSE,
        "foo.conf": "color = mocha\n",
    }
    for asset in ASSETS:
        files[asset] = b"RIFF\x00\x00\x00\x00WEBP"
    return files


def write_files(root: Path, files: Dict[str, str | bytes]) -> None:
    for name, content in files.items():
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding='utf-8')


@pytest.fixture
def make_repo(tmp_path: Path) -> Iterator[Callable[..., git.Repo]]:
    """
    Creates a committed git repository under tmp_path.

    `files` entries replace those of the clean port layout; a value of None
    drops the file. `untracked` files are written but not staged.
    """
    repos = []

    def make(name: str = "myport", files: Dict[str, str | bytes | None] | None = None,
             untracked: Dict[str, str | bytes] | None = None) -> git.Repo:
        root = tmp_path / name
        repo = git.Repo.init(root)
        with repo.config_writer() as cw:
            cw.set_value("user", "name", "Test User")
            cw.set_value("user", "email", "test@example.com")
            cw.set_value("commit", "gpgsign", "false")

        layout = clean_port_files()
        for key, value in (files or {}).items():
            if value is None:
                layout.pop(key, None)
            else:
                layout[key] = value

        write_files(root, layout)
        repo.index.add(list(layout.keys()))
        repo.index.write()
        repo.index.commit("Initial commit")

        if untracked:
            write_files(root, untracked)

        repos.append(repo)
        return repo

    yield make

    for repo in repos:
        repo.close()
