#!/usr/bin/env python3
"""Value objects passed between the listers, the reconciler and the migrator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from config import Visibility
from utils import normalize_repo_name, sanitize_topics


@dataclass(frozen=True)
class SourceProject:
    """Snapshot of a GitLab project taken once per run."""
    name: str
    description: str
    visibility: str
    default_branch: str
    tags: List[str]
    clone_url: str

    @property
    def is_private(self) -> bool:
        return self.visibility == Visibility.PRIVATE.value


@dataclass(frozen=True)
class DestinationRepository:
    """Snapshot of a GitHub repository."""
    name: str
    full_name: str
    push_url: str


@dataclass(frozen=True)
class CreateRepositoryRequest:
    """Fields sent when creating a destination repository."""
    name: str
    description: str
    private: bool
    default_branch: str
    topics: List[str]

    @classmethod
    def from_project(cls, project: SourceProject) -> "CreateRepositoryRequest":
        return cls(
            name=normalize_repo_name(project.name),
            description=project.description or "",
            private=project.is_private,
            default_branch=project.default_branch or "",
            topics=sanitize_topics(project.tags),
        )


@dataclass
class Reconciliation:
    """Source projects split into migration candidates and skipped names."""
    candidates: List[SourceProject] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)


@dataclass
class MigrationReport:
    """Outcome of one migration run, by project name."""
    migrated: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
