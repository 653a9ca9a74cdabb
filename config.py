#!/usr/bin/env python3
"""Configuration dataclasses for gitlab-mirror-migrate."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

DEFAULT_GITLAB_URL = "https://gitlab.com"
DEFAULT_GITHUB_API_URL = "https://api.github.com"
DEFAULT_PAGE_SIZE = 100
MAX_PAGE_SIZE = 100
CLONE_ROOT_DIRNAME = "Repositories"


class CloneMethod(Enum):
    """Enumeration for git clone/push methods."""
    HTTPS = "https"
    SSH = "ssh"


class Visibility(Enum):
    """Enumeration for GitLab project visibility levels."""
    PRIVATE = "private"
    PUBLIC = "public"
    INTERNAL = "internal"


@dataclass
class GitLabConfig:
    """GitLab-specific configuration. An empty group means the token's own projects."""
    url: str
    token: str
    group: str = ""


@dataclass
class GitHubConfig:
    """GitHub-specific configuration. An empty org means the token's own account."""
    api_url: str
    token: str
    org: str = ""
    page_size: int = DEFAULT_PAGE_SIZE


@dataclass
class GitOperationConfig:
    """Git operation configuration."""
    clone_method: CloneMethod = CloneMethod.SSH
    push_method: CloneMethod = CloneMethod.SSH


@dataclass
class Config:
    """Main configuration for a GitLab-to-GitHub migration."""
    gitlab: GitLabConfig
    github: GitHubConfig
    git: GitOperationConfig
