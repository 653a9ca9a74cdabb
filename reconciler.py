#!/usr/bin/env python3
"""Decide which GitLab projects still need a GitHub repository."""

from __future__ import annotations

from typing import Iterable, List

from models import DestinationRepository, Reconciliation, SourceProject
from utils import names_match


def reconcile(
    projects: Iterable[SourceProject],
    repositories: Iterable[DestinationRepository],
) -> Reconciliation:
    """Split projects into migration candidates and already-present names.

    A project is skipped when any destination repository name equals the
    project name with spaces replaced by hyphens, ignoring case. Order of
    the source listing is preserved in both lists.
    """
    repo_names: List[str] = [repo.name for repo in repositories]
    result = Reconciliation()

    for project in projects:
        if any(names_match(project.name, repo_name) for repo_name in repo_names):
            result.skipped.append(project.name)
        else:
            result.candidates.append(project)

    return result
