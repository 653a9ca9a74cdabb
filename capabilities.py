#!/usr/bin/env python3
"""Interfaces the migration depends on, so tests can swap in fakes."""

from __future__ import annotations

from pathlib import Path
from typing import List, Protocol

from models import CreateRepositoryRequest, DestinationRepository, SourceProject


class ProjectSource(Protocol):
    def connect(self) -> None: ...

    def list_projects(self, group: str = "") -> List[SourceProject]: ...


class RepoDestination(Protocol):
    def connect(self) -> None: ...

    def list_repositories(self) -> List[DestinationRepository]: ...

    def create_repository(
        self, request: CreateRepositoryRequest
    ) -> DestinationRepository: ...

    def set_default_branch(
        self, repository: DestinationRepository, branch: str
    ) -> None: ...


class MirrorTool(Protocol):
    def clone_mirror(self, source_url: str, path: Path) -> None: ...

    def push_mirror(self, destination_url: str, path: Path) -> None: ...
