#!/usr/bin/env python3
"""Naming helpers for gitlab-mirror-migrate."""

import re
from typing import Iterable, List

# GitHub topics: lowercase letters, digits and hyphens, at most 50 characters
MAX_TOPIC_LENGTH = 50
# GitHub accepts at most 20 topics per repository
MAX_TOPICS = 20


def normalize_repo_name(name: str) -> str:
    """Map a GitLab project name to the GitHub repository name it becomes.

    GitHub turns spaces into hyphens when a repository is created, so
    'Payments API' ends up as 'Payments-API'.
    """
    return name.replace(" ", "-")


def names_match(project_name: str, repo_name: str) -> bool:
    """Case-insensitive comparison of a GitLab project and a GitHub repo name."""
    return normalize_repo_name(project_name).casefold() == repo_name.casefold()


def sanitize_topic(tag: str) -> str:
    topic = re.sub(r"[^a-z0-9-]+", "-", tag.strip().lower())
    topic = re.sub(r"-+", "-", topic).strip("-")
    return topic[:MAX_TOPIC_LENGTH]


def sanitize_topics(tags: Iterable[str]) -> List[str]:
    """Turn GitLab tags into GitHub topics, dropping empties and duplicates.

    Only the first MAX_TOPICS distinct topics are kept.
    """
    topics: List[str] = []
    for tag in tags:
        topic = sanitize_topic(tag)
        if topic and topic not in topics:
            topics.append(topic)
        if len(topics) == MAX_TOPICS:
            break
    return topics
