from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List

from .gitutils import CommandRunner, SubprocessRunner, git_push
from .manifest import Manifest, Project
from .workspace import ManifestMergeError, NotFoundError, project_path, resolve_project_path


@dataclass
class PushResult:
    project: str
    path: str
    destination: str
    status: str
    message: str = ""


def resolve_push_destination(manifest: Manifest, project: Project) -> str:
    """Return ``<fetch><path> <revision>`` for the project's remote.

    An unknown remote yields an empty string rather than an error; the push
    itself is then left to fail.
    """
    remote = manifest.find_remote(project.remote)
    if remote is None or not remote.fetch:
        return ""
    return f"{remote.fetch}{project.path} {remote.revision}"


def push_projects(
    manifest: Manifest,
    workdir: Path,
    *,
    runner: CommandRunner | None = None,
) -> List[PushResult]:
    runner = runner or SubprocessRunner()
    logging.info("Pushing %d project(s)", len(manifest.projects))

    results: List[PushResult] = []
    for project in manifest.projects:
        repo_path = project_path(workdir, project)
        destination = ""
        try:
            repo_path = resolve_project_path(workdir, project)
            destination = resolve_push_destination(manifest, project)
            if not destination:
                logging.warning(
                    "Project %s has no fetch URL for remote %r; pushing to an empty destination",
                    project.name,
                    project.remote,
                )
            logging.info("Pushing %s to %s", project.name, destination or "<empty>")
            git_push(runner, repo_path, destination)
        except NotFoundError as exc:
            logging.error("Error pushing %s: %s", project.name, exc)
            results.append(
                PushResult(project.name, str(repo_path), destination, "missing", str(exc))
            )
        except ManifestMergeError as exc:
            logging.error("Error pushing %s: %s", project.name, exc)
            results.append(
                PushResult(project.name, str(repo_path), destination, "failed", str(exc))
            )
        else:
            results.append(PushResult(project.name, str(repo_path), destination, "pushed"))
    return results
