"""Value types shared by the invalidation client and its handlers."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple

from shared.config import Config


class InvalidationStatus(Enum):
    """Local view of a CDN invalidation's progress."""

    WAITING = "waiting"
    OK = "ok"


@dataclass(frozen=True)
class CDNConfig:
    distribution_id: str
    base_path: str = "/"

    @classmethod
    def from_env(cls) -> "CDNConfig":
        """Build from environment-backed Config (call Config.validate() first)."""
        return cls(distribution_id=Config.CDN_DISTRIBUTION_ID, base_path=Config.CDN_BASE_PATH)


@dataclass(frozen=True)
class InvalidationRequest:
    paths: Tuple[str, ...]

    def __post_init__(self):
        if not self.paths:
            raise ValueError("An invalidation request needs at least one path")

    @classmethod
    def of(cls, paths: Iterable[str]) -> "InvalidationRequest":
        return cls(paths=tuple(paths))


@dataclass(frozen=True)
class InvalidationResult:
    invalidation_id: str
    status: InvalidationStatus


@dataclass(frozen=True)
class ProviderInvalidation:
    """Raw invalidation as reported by the provider."""

    id: str
    status: str
