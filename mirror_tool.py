#!/usr/bin/env python3
"""Run git to mirror a repository from one remote to another."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import List, Optional

from errors import ProcessError
from logging_utils import Logger
from security import SecurityValidator


class GitMirrorTool:
    """Mirror clone and mirror push through the git binary.

    Commands run without a timeout; a stalled remote stalls the run.
    """

    def __init__(self, git_binary: str = "git") -> None:
        self.git_binary = git_binary

    def clone_mirror(self, source_url: str, path: Path) -> None:
        Logger.debug(f"git clone --mirror {source_url} {path}")
        self._run(["clone", "--mirror", source_url, str(path)], action="clone")

    def push_mirror(self, destination_url: str, path: Path) -> None:
        Logger.debug(f"git push --mirror {destination_url} (in {path})")
        self._run(["push", "--mirror", destination_url], action="push", cwd=path)

    def _run(self, args: List[str], action: str, cwd: Optional[Path] = None) -> None:
        try:
            subprocess.run(
                [self.git_binary, *args],
                cwd=str(cwd) if cwd is not None else None,
                check=True,
                capture_output=True,
                text=True,
            )
        except subprocess.CalledProcessError as e:
            # stderr is kept for the log only, never interpreted
            safe_stderr = SecurityValidator.sanitize_for_logging((e.stderr or "").strip())
            raise ProcessError(
                f"git {action} exited with status {e.returncode}",
                returncode=e.returncode,
                stderr=safe_stderr,
            ) from e
        except OSError as e:
            raise ProcessError(f"git {action} could not be started: {e}") from e
