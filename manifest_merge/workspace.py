from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from .manifest import Project


class ManifestMergeError(Exception):
    """Base exception for manifest loading and per-project git operations."""


class FileError(ManifestMergeError):
    """The manifest (or working directory) could not be read."""


class ParseError(ManifestMergeError):
    """The manifest is not well-formed XML."""


class NotFoundError(ManifestMergeError):
    """A project's repository path does not exist."""


class ProcessError(ManifestMergeError):
    def __init__(
        self,
        command: Sequence[str],
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr
        if returncode is None:
            message = f"{' '.join(self.command)} could not be started: {stderr}"
        else:
            message = f"{' '.join(self.command)} exited with status {returncode}"
            if stderr:
                message += f": {stderr}"
        super().__init__(message)


def current_workdir() -> Path:
    try:
        return Path(os.getcwd())
    except OSError as exc:
        raise FileError(f"cannot determine current working directory: {exc}") from exc


def project_path(workdir: Path, project: Project) -> Path:
    """Join the manifest path under ``workdir``, even when it starts with a slash."""
    return workdir / project.path.lstrip("/")


def resolve_project_path(workdir: Path, project: Project) -> Path:
    repo_path = project_path(workdir, project)
    if not repo_path.exists():
        raise NotFoundError(f"repository not found in path: {repo_path}")
    logging.debug("Resolved %s -> %s", project.name, repo_path)
    return repo_path
