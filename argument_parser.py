#!/usr/bin/env python3
"""Command line argument parsing and configuration building."""

from __future__ import annotations

import argparse
import os
import sys
from typing import List, Optional, Tuple

from config import (DEFAULT_GITHUB_API_URL, DEFAULT_GITLAB_URL,
                    DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, CloneMethod, Config,
                    GitHubConfig, GitLabConfig, GitOperationConfig)
from logging_utils import Logger
from security import SecurityValidator

# Exit codes
EXIT_AUTH_ERROR = 40
EXIT_MISSING_ARGUMENTS = 2


def _create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        description=(
            "Mirror every GitLab project that has no GitHub repository yet "
            "into GitHub, with all branches and tags"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --gl-group acme --gh-org acme
  %(prog)s --gl-token glpat-... --gh-token ghp_...
  %(prog)s --gl-url https://gitlab.company.com --gl-group platform \\
           --gh-org company --clone-method https --push-method https
        """,
    )
    return parser


def _add_gitlab_arguments(parser: argparse.ArgumentParser) -> None:
    """Add GitLab-related arguments to parser."""
    parser.add_argument(
        "--gl-url",
        dest="gl_url",
        default=DEFAULT_GITLAB_URL,
        help=f"Base URL of the GitLab instance (default: {DEFAULT_GITLAB_URL})",
    )
    parser.add_argument(
        "--gl-token",
        dest="gl_token",
        help="GitLab API token (or set GITLAB_TOKEN env var)",
    )
    parser.add_argument(
        "--gl-group",
        dest="gl_group",
        help="GitLab group to migrate, left blank for your own projects "
        "(or set GITLAB_GROUP env var)",
    )


def _add_github_arguments(parser: argparse.ArgumentParser) -> None:
    """Add GitHub-related arguments to parser."""
    parser.add_argument(
        "--gh-api",
        dest="gh_api_url",
        default=DEFAULT_GITHUB_API_URL,
        help=f"Base URL of the GitHub API (default: {DEFAULT_GITHUB_API_URL})",
    )
    parser.add_argument(
        "--gh-token",
        dest="gh_token",
        help="GitHub API token (or set GITHUB_TOKEN env var)",
    )
    parser.add_argument(
        "--gh-org",
        dest="gh_org",
        help="GitHub organization to create repositories in, left blank for "
        "your own account (or set GITHUB_ORG env var)",
    )
    parser.add_argument(
        "--page-size",
        dest="page_size",
        type=int,
        default=DEFAULT_PAGE_SIZE,
        help=f"Repositories per GitHub listing page (default: {DEFAULT_PAGE_SIZE})",
    )


def _add_git_arguments(parser: argparse.ArgumentParser) -> None:
    """Add git transport arguments to parser."""
    parser.add_argument(
        "--clone-method",
        dest="clone_method",
        choices=[method.value for method in CloneMethod],
        default=CloneMethod.SSH.value,
        help="URL used to clone from GitLab: ssh or https (default: ssh)",
    )
    parser.add_argument(
        "--push-method",
        dest="push_method",
        choices=[method.value for method in CloneMethod],
        default=CloneMethod.SSH.value,
        help="URL used to push to GitHub: ssh or https (default: ssh)",
    )


def _validate_parsed_arguments(args) -> Tuple[str, str, str, str]:
    """Validate URLs and names, exiting with a usage error on bad input."""
    try:
        validated_gl_url = SecurityValidator.validate_url(
            args.gl_url, ["https", "http"]
        )
        validated_gh_api_url = SecurityValidator.validate_url(
            args.gh_api_url, ["https", "http"]
        )
        validated_gl_group = SecurityValidator.validate_group_path(
            args.gl_group or os.getenv("GITLAB_GROUP", "")
        )
        validated_gh_org = SecurityValidator.validate_org_name(
            args.gh_org or os.getenv("GITHUB_ORG", "")
        )

        if args.page_size < 1 or args.page_size > MAX_PAGE_SIZE:
            raise ValueError(f"page size must be between 1 and {MAX_PAGE_SIZE}")

        return (
            validated_gl_url,
            validated_gh_api_url,
            validated_gl_group,
            validated_gh_org,
        )

    except ValueError as e:
        Logger.error(f"configuration validation error: {e}")
        sys.exit(EXIT_MISSING_ARGUMENTS)


def _get_tokens(args) -> Tuple[str, str]:
    """Get authentication tokens from flags or the environment."""
    gl_token = args.gl_token or os.getenv("GITLAB_TOKEN")
    gh_token = args.gh_token or os.getenv("GITHUB_TOKEN")
    if not gl_token:
        Logger.error(
            "error: gitlab token not provided (use --gl-token or GITLAB_TOKEN)"
        )
        sys.exit(EXIT_AUTH_ERROR)
    if not gh_token:
        Logger.error(
            "error: github token not provided (use --gh-token or GITHUB_TOKEN)"
        )
        sys.exit(EXIT_AUTH_ERROR)
    return gl_token, gh_token


def parse_arguments(argv: Optional[List[str]] = None) -> Config:
    """Parse command line arguments and return configuration object."""
    parser = _create_argument_parser()
    _add_gitlab_arguments(parser)
    _add_github_arguments(parser)
    _add_git_arguments(parser)

    args = parser.parse_args(argv)

    gl_url, gh_api_url, gl_group, gh_org = _validate_parsed_arguments(args)
    gl_token, gh_token = _get_tokens(args)

    return Config(
        gitlab=GitLabConfig(url=gl_url, token=gl_token, group=gl_group),
        github=GitHubConfig(
            api_url=gh_api_url,
            token=gh_token,
            org=gh_org,
            page_size=args.page_size,
        ),
        git=GitOperationConfig(
            clone_method=CloneMethod(args.clone_method),
            push_method=CloneMethod(args.push_method),
        ),
    )
