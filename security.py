#!/usr/bin/env python3
"""Input validation and log redaction for gitlab-mirror-migrate."""

import re
from typing import List, Optional


class SecurityValidator:
    """Security validation utilities for input sanitization and validation."""

    # Maximum lengths accepted from the command line
    MAX_URL_LENGTH = 2048
    MAX_ORG_NAME_LENGTH = 100
    MAX_GROUP_PATH_LENGTH = 255
    MAX_DIRNAME_LENGTH = 255

    SAFE_ORG_NAME_PATTERN = re.compile(r"^[A-Za-z0-9._-]+$")
    SAFE_GROUP_PATH_PATTERN = re.compile(r"^[A-Za-z0-9._/-]+$")

    # (pattern, replacement) pairs applied to every log line
    REDACTIONS = [
        (r"(https?://)[^:/@\s]+:[^@\s]+@", r"\1[REDACTED]@"),
        (r"(token[=:]\s*)[^\s]+", r"\1[REDACTED]"),
        (r"(password[=:]\s*)[^\s]+", r"\1[REDACTED]"),
        (r"glpat-[A-Za-z0-9_-]+", "[GITLAB_TOKEN_REDACTED]"),
        (r"gh[pousr]_[A-Za-z0-9_]+", "[GITHUB_TOKEN_REDACTED]"),
        (r"github_pat_[A-Za-z0-9_]+", "[GITHUB_TOKEN_REDACTED]"),
    ]

    @staticmethod
    def _has_control_chars(value: str) -> bool:
        return "\x00" in value or any(ord(c) < 32 for c in value)

    @classmethod
    def validate_url(cls, url: str, allowed_schemes: Optional[List[str]] = None) -> str:
        """Validate an API base URL and return it without a trailing slash."""
        if not url or not isinstance(url, str):
            raise ValueError("URL must be a non-empty string")

        if len(url) > cls.MAX_URL_LENGTH:
            raise ValueError(f"URL exceeds maximum length of {cls.MAX_URL_LENGTH}")

        if cls._has_control_chars(url):
            raise ValueError("URL contains null bytes or control characters")

        if "://" not in url:
            raise ValueError("URL must include a scheme (e.g. https://)")

        scheme = url.split("://", 1)[0].lower()
        if allowed_schemes and scheme not in allowed_schemes:
            raise ValueError(
                f"URL scheme '{scheme}' not in allowed schemes: {allowed_schemes}"
            )

        return url.rstrip("/")

    @classmethod
    def validate_org_name(cls, name: str) -> str:
        """Validate a GitHub organization login. Empty means the user account."""
        if not name:
            return ""

        if len(name) > cls.MAX_ORG_NAME_LENGTH:
            raise ValueError(
                f"Organization exceeds maximum length of {cls.MAX_ORG_NAME_LENGTH}"
            )

        if not cls.SAFE_ORG_NAME_PATTERN.match(name):
            raise ValueError("Organization contains invalid characters")

        return name

    @classmethod
    def validate_group_path(cls, group: str) -> str:
        """Validate a GitLab group path or numeric id. Empty means the user's projects."""
        if not group:
            return ""

        if len(group) > cls.MAX_GROUP_PATH_LENGTH:
            raise ValueError(
                f"Group exceeds maximum length of {cls.MAX_GROUP_PATH_LENGTH}"
            )

        if cls._has_control_chars(group):
            raise ValueError("Group contains null bytes or control characters")

        if ".." in group:
            raise ValueError("Group contains path traversal sequences")

        if not cls.SAFE_GROUP_PATH_PATTERN.match(group):
            raise ValueError("Group contains invalid characters")

        return group.strip("/")

    @classmethod
    def validate_dirname(cls, name: str) -> str:
        """Validate a project name used as a single directory component."""
        if not name or not isinstance(name, str):
            raise ValueError("Directory name must be a non-empty string")

        if len(name) > cls.MAX_DIRNAME_LENGTH:
            raise ValueError(
                f"Directory name exceeds maximum length of {cls.MAX_DIRNAME_LENGTH}"
            )

        if cls._has_control_chars(name):
            raise ValueError("Directory name contains null bytes or control characters")

        if name in (".", "..") or "/" in name or "\\" in name:
            raise ValueError("Directory name contains invalid path characters")

        return name

    @classmethod
    def sanitize_for_logging(cls, message: str) -> str:
        """Sanitize message for safe logging by removing potential credentials."""
        if not message:
            return message

        sanitized = str(message)
        for pattern, replacement in cls.REDACTIONS:
            sanitized = re.sub(pattern, replacement, sanitized, flags=re.IGNORECASE)

        return sanitized
