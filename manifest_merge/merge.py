from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List

from .config import DriverConfig
from .gitutils import CommandRunner, SubprocessRunner, git_checkout, git_pull
from .manifest import Manifest, Project
from .workspace import ManifestMergeError, NotFoundError, project_path, resolve_project_path


@dataclass
class MergeResult:
    project: str
    path: str
    status: str
    message: str = ""


def merge_projects(
    manifest: Manifest,
    ref: str,
    workdir: Path,
    *,
    runner: CommandRunner | None = None,
    config: DriverConfig | None = None,
) -> List[MergeResult]:
    """Check out ``ref`` and pull it from upstream for every project in the merge group.

    Projects are processed one at a time in manifest order. A failure is
    logged and recorded for that project only; nothing is rolled back, so a
    failed pull leaves the checkout in place.
    """
    runner = runner or SubprocessRunner()
    config = config or DriverConfig()
    projects = manifest.projects_in_group(config.merge_group)
    logging.info(
        "Merging %s into %d project(s) in group %s", ref, len(projects), config.merge_group
    )

    results: List[MergeResult] = []
    for project in projects:
        repo_path = project_path(workdir, project)
        try:
            _merge_single(project, ref, workdir, runner=runner, config=config)
        except NotFoundError as exc:
            logging.error("Error merging %s: %s", project.name, exc)
            results.append(MergeResult(project.name, str(repo_path), "missing", str(exc)))
        except ManifestMergeError as exc:
            logging.error("Error merging %s: %s", project.name, exc)
            results.append(MergeResult(project.name, str(repo_path), "failed", str(exc)))
        else:
            results.append(MergeResult(project.name, str(repo_path), "merged"))
    return results


def _merge_single(
    project: Project,
    ref: str,
    workdir: Path,
    *,
    runner: CommandRunner,
    config: DriverConfig,
) -> None:
    repo_path = resolve_project_path(workdir, project)
    logging.info("Checking out %s in %s", ref, project.name)
    git_checkout(runner, repo_path, ref)
    url = config.upstream_url(project.path)
    logging.info("Pulling %s %s into %s", url, ref, project.name)
    git_pull(runner, repo_path, url, ref)
