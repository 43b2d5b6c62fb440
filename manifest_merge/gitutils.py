from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, Sequence

from .workspace import ProcessError


@dataclass
class CommandResult:
    args: list[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""


class CommandRunner(Protocol):
    def run(self, args: Sequence[str]) -> CommandResult:
        """Run ``args`` to completion; raise ProcessError on failure."""
        ...


class SubprocessRunner:
    """Runs commands as blocking child processes, without a timeout."""

    def run(self, args: Sequence[str]) -> CommandResult:
        command = list(args)
        logging.debug("Running %s", " ".join(command))
        try:
            result = subprocess.run(
                command,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                check=False,
            )
        except OSError as exc:
            raise ProcessError(command, stderr=str(exc)) from exc
        if result.returncode != 0:
            raise ProcessError(command, result.returncode, result.stderr.strip())
        return CommandResult(
            args=command,
            returncode=result.returncode,
            stdout=result.stdout,
            stderr=result.stderr,
        )


def git_command(repo: Path, args: Sequence[str]) -> list[str]:
    return ["git", "-C", str(repo)] + list(args)


def git_checkout(runner: CommandRunner, repo: Path, ref: str) -> CommandResult:
    return runner.run(git_command(repo, ["checkout", ref]))


def git_pull(runner: CommandRunner, repo: Path, url: str, ref: str) -> CommandResult:
    return runner.run(git_command(repo, ["pull", url, ref]))


def git_push(runner: CommandRunner, repo: Path, destination: str) -> CommandResult:
    return runner.run(git_command(repo, ["push", destination]))
