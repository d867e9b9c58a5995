from typing import List

import git

from portreview.contracts.base import Contract, ContractResult, Pass, Warn, Fail, working_tree

README_PLACEHOLDERS: List[str] = [
    "https://github.com/catppuccin/template/stargazers",
    "https://github.com/catppuccin/template/issues",
    "https://github.com/catppuccin/template/contributors",
    "https://raw.githubusercontent.com/catppuccin/catppuccin/main/assets/previews/latte.webp",
    "https://raw.githubusercontent.com/catppuccin/catppuccin/main/assets/previews/frappe.webp",
    "https://raw.githubusercontent.com/catppuccin/catppuccin/main/assets/previews/macchiato.webp",
    "https://raw.githubusercontent.com/catppuccin/catppuccin/main/assets/previews/mocha.webp",
    "- [Human](https://github.com/catppuccin)",
]

LICENSE_COPYRIGHT = "Copyright (c) 2021 Catppuccin"


def read_text(repo: git.Repo, name: str) -> str | Fail:
    """
    Reads a file from the working tree as UTF-8. A missing or undecodable
    file comes back as a Fail so the calling contract can report it.
    """
    path = working_tree(repo) / name
    try:
        return path.read_text(encoding='utf-8')
    except FileNotFoundError:
        return Fail(f"{name} is missing")
    except UnicodeDecodeError as e:
        return Fail(f"{name} is not valid UTF-8 text: {e}")
    except OSError as e:
        return Fail(f"{name} could not be read: {e}")


class ReadmeContract(Contract):
    name = "README is correct"

    def __init__(self, placeholders: List[str] = README_PLACEHOLDERS):
        self.placeholders = list(placeholders)

    def test(self, repo: git.Repo) -> ContractResult:
        readme = read_text(repo, "README.md")
        if isinstance(readme, Fail):
            return readme

        for s in self.placeholders:
            if s in readme:
                return Fail(f"README contains '{s}'")
        return Pass()


class LicenseContract(Contract):
    name = "LICENSE is correct"

    def test(self, repo: git.Repo) -> ContractResult:
        content = read_text(repo, "LICENSE")
        if isinstance(content, Fail):
            return content

        if LICENSE_COPYRIGHT not in content:
            return Warn(f"LICENSE header is wrong, expected {LICENSE_COPYRIGHT}")
        return Pass()
