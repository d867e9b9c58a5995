from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple
import logging

import git

from portreview.base import Scope
from portreview.contracts import DEFAULT_CONTRACTS, Contract, ContractResult, Pass, Warn, Fail
from portreview.messages import error, info, success, warning
from portreview.repository import ReviewTarget, acquire


@dataclass
class ReviewSummary:
    results: List[Tuple[str, ContractResult]] = field(default_factory=list)

    def record(self, name: str, result: ContractResult) -> None:
        self.results.append((name, result))

    def _count(self, kind: type) -> int:
        return sum(1 for _, result in self.results if isinstance(result, kind))

    @property
    def passed(self) -> int:
        return self._count(Pass)

    @property
    def warned(self) -> int:
        return self._count(Warn)

    @property
    def failed(self) -> int:
        return self._count(Fail)

    @property
    def ok(self) -> bool:
        # Warnings do not block
        return self.failed == 0


def report(name: str, result: ContractResult) -> None:
    match result:
        case Fail(msg):
            error(f"Contract '{name}' failed:", msg)
        case Warn(msg):
            warning(f"Contract '{name}' warned: {msg}")
        case Pass():
            success(f"Contract '{name}' passed")


def run_contracts(repo: git.Repo, contracts: Sequence[Contract] = DEFAULT_CONTRACTS) -> ReviewSummary:
    """
    Runs every contract in order against the same repository and reports each
    outcome. A failing contract does not stop the ones after it.
    """
    summary = ReviewSummary()
    for contract in contracts:
        logging.info(f"Testing contract '{contract.name}'")
        result = contract.test(repo)
        report(contract.name, result)
        summary.record(contract.name, result)
    return summary


def review_main(url: str, skip_clone: bool = False, contracts: Sequence[Contract] = DEFAULT_CONTRACTS) -> int:
    target = ReviewTarget.from_url(url)

    with Scope() as scope:
        scope.on_failure(lambda e: logging.debug(f"Review of {url} aborted: {e!r}"))

        repo = acquire(target, skip_clone=skip_clone)
        scope.defer(lambda: repo.close())

        summary = run_contracts(repo, contracts)

    info(f"{summary.passed} passed, {summary.warned} warned, {summary.failed} failed")
    return 0 if summary.ok else 1
