from typing import Any, Dict, List, Mapping, Optional
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
import logging
import os

import yaml

PORTS_PATH = Path(__file__).parent / "ports.yml"

LOG_LEVEL_ENV = "PORTREVIEW_LOG"
DEFAULT_LOG_LEVEL = logging.INFO

_LOG_LEVELS: Dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


class ConfigError(Exception):
    pass

################################################################################
# Ports catalog
################################################################################

class Platform(Enum):
    LINUX = 'linux'
    WINDOWS = 'windows'
    IOS = 'ios'
    ANDROID = 'android'
    MACOS = 'macos'
    AGNOSTIC = 'agnostic'


@dataclass(frozen=True)
class Collaborator:
    url: str
    username: str


@dataclass(frozen=True)
class PortRepository:
    name: str
    url: str
    current_maintainers: List[Collaborator]
    past_maintainers: List[Collaborator] = field(default_factory=list)


@dataclass(frozen=True)
class Category:
    key: str
    name: str
    description: str
    emoji: str


@dataclass(frozen=True)
class Port:
    name: str
    key: str
    color: str
    repository: PortRepository
    categories: List[Category]
    platform: List[Platform]


@dataclass(frozen=True)
class Ports:
    ports: List[Port]
    collaborators: List[Collaborator]

    def by_key(self, key: str) -> Optional[Port]:
        for port in self.ports:
            if port.key == key:
                return port
        return None

################################################################################
# Parsing
################################################################################

def _require(data: Any, key: str, where: str) -> Any:
    if not isinstance(data, Mapping):
        raise ConfigError(f"Expected a mapping at {where}, got {type(data).__name__}")
    if key not in data:
        raise ConfigError(f"Missing key '{key}' at {where}")
    return data[key]


def _require_list(data: Any, key: str, where: str, default: List | None = None) -> List:
    if default is not None and isinstance(data, Mapping) and key not in data:
        return default
    value = _require(data, key, where)
    if not isinstance(value, list):
        raise ConfigError(f"Expected a list for '{key}' at {where}")
    return value


def _require_str(data: Any, key: str, where: str) -> str:
    value = _require(data, key, where)
    if not isinstance(value, str):
        raise ConfigError(f"Expected a string for '{key}' at {where}")
    return value


def _parse_collaborator(data: Any, where: str) -> Collaborator:
    return Collaborator(
        url=_require_str(data, 'url', where),
        username=_require_str(data, 'username', where),
    )


def _parse_port(data: Any, where: str) -> Port:
    repo_where = f"{where}.repository"
    repo_data = _require(data, 'repository', where)
    repository = PortRepository(
        name=_require_str(repo_data, 'name', repo_where),
        url=_require_str(repo_data, 'url', repo_where),
        current_maintainers=[
            _parse_collaborator(c, f"{repo_where}.current-maintainers[{i}]")
            for i, c in enumerate(_require_list(repo_data, 'current-maintainers', repo_where))
        ],
        past_maintainers=[
            _parse_collaborator(c, f"{repo_where}.past-maintainers[{i}]")
            for i, c in enumerate(_require_list(repo_data, 'past-maintainers', repo_where, default=[]))
        ],
    )

    categories = []
    for i, c in enumerate(_require_list(data, 'categories', where)):
        cat_where = f"{where}.categories[{i}]"
        categories.append(Category(
            key=_require_str(c, 'key', cat_where),
            name=_require_str(c, 'name', cat_where),
            description=_require_str(c, 'description', cat_where),
            emoji=_require_str(c, 'emoji', cat_where),
        ))

    platforms = []
    for value in _require_list(data, 'platform', where):
        try:
            platforms.append(Platform(value))
        except ValueError:
            raise ConfigError(f"Unknown platform '{value}' at {where}.platform") from None

    return Port(
        name=_require_str(data, 'name', where),
        key=_require_str(data, 'key', where),
        color=_require_str(data, 'color', where),
        repository=repository,
        categories=categories,
        platform=platforms,
    )


def parse_ports(text: str) -> Ports:
    """
    Parses a ports catalog document.

    Raises ConfigError when the YAML is malformed or does not match the
    expected shape.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid ports catalog: {e}") from e

    return Ports(
        ports=[_parse_port(p, f"ports[{i}]") for i, p in enumerate(_require_list(data, 'ports', 'root'))],
        collaborators=[
            _parse_collaborator(c, f"collaborators[{i}]")
            for i, c in enumerate(_require_list(data, 'collaborators', 'root'))
        ],
    )


def load_ports(path: Path = PORTS_PATH) -> Ports:
    try:
        text = path.read_text(encoding='utf-8')
    except OSError as e:
        raise ConfigError(f"Cannot read ports catalog {path}: {e}") from e
    ports = parse_ports(text)
    logging.debug(f"Loaded {len(ports.ports)} ports and {len(ports.collaborators)} collaborators from {path}")
    return ports


def log_level_from_env(environ: Mapping[str, str] | None = None) -> int:
    if environ is None:
        environ = os.environ
    value = environ.get(LOG_LEVEL_ENV, '').strip().lower()
    return _LOG_LEVELS.get(value, DEFAULT_LOG_LEVEL)
