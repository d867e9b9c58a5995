from portreview.contracts.base import Contract, ContractResult, Pass, Warn, Fail
from portreview.contracts.files import NoGitKeepContract, AssetsContract
from portreview.contracts.text import ReadmeContract, LicenseContract

# Run order. Assets are checked before the license.
DEFAULT_CONTRACTS: list[Contract] = [
    NoGitKeepContract(),
    ReadmeContract(),
    AssetsContract(),
    LicenseContract(),
]

__all__ = [
    "Contract", "ContractResult", "Pass", "Warn", "Fail",
    "NoGitKeepContract", "ReadmeContract", "AssetsContract", "LicenseContract",
    "DEFAULT_CONTRACTS",
]
