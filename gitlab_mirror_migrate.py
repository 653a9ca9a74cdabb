#!/usr/bin/env python3
"""
gitlab-mirror-migrate - Copy the GitLab projects that GitHub does not have yet.

Lists the projects of a GitLab group (or of the token's user), lists the
repositories of a GitHub organization (or of the token's user), and for every
project without a same-named repository creates one and mirrors all branches
and tags into it with git clone --mirror and git push --mirror.

Licensed under the MIT License.
"""

from __future__ import annotations

import sys
from typing import NoReturn

from argument_parser import parse_arguments
from sync_orchestrator import SyncOrchestrator


def main() -> NoReturn:
    cfg = parse_arguments()
    orchestrator = SyncOrchestrator(cfg)
    sys.exit(orchestrator.run())


if __name__ == "__main__":
    main()
