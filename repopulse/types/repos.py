"""Repository search data models."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class RepositoryOwner:
    """Owner of a repository."""

    login: str
    avatar_url: str


@dataclass(frozen=True)
class RepositorySummary:
    """One entry in the trending repositories list."""

    id: int
    name: str
    full_name: str  # "owner/name", the statistics lookup key
    description: str | None
    url: str
    stars: int
    forks: int
    language: str | None
    owner: RepositoryOwner
    created_at: datetime | None
    updated_at: datetime | None

    @property
    def owner_login(self) -> str:
        return self.full_name.split("/", 1)[0]

    @property
    def repo_name(self) -> str:
        _, _, name = self.full_name.partition("/")
        return name or self.name
