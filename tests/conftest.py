from __future__ import annotations

from pathlib import Path
from typing import Sequence

import pytest

from manifest_merge.gitutils import CommandResult
from manifest_merge.workspace import ProcessError


class RecordingRunner:
    """Records every command instead of spawning it.

    Commands whose arguments contain all the words of an entry in ``fail_on``
    raise ProcessError with exit status 1.
    """

    def __init__(self, fail_on: Sequence[Sequence[str]] = ()) -> None:
        self.calls: list[list[str]] = []
        self.fail_on = [list(words) for words in fail_on]

    def run(self, args: Sequence[str]) -> CommandResult:
        command = list(args)
        self.calls.append(command)
        for words in self.fail_on:
            if all(word in command for word in words):
                raise ProcessError(command, 1, "simulated failure")
        return CommandResult(args=command, returncode=0)

    def subcommands(self) -> list[str]:
        return [call[3] for call in self.calls]


@pytest.fixture
def runner() -> RecordingRunner:
    return RecordingRunner()


MANIFEST_XML = """<?xml version="1.0" encoding="UTF-8"?>
<manifest>
  <remote name="aosp" fetch="https://host/" revision="android-14"/>
  <remote name="other" fetch="https://other/" revision="main"/>
  <default revision="master" remote="aosp"/>
  <project path="frameworks/base" name="platform/frameworks/base" remote="aosp" groups="aosp-platform"/>
  <project path="device/vendor" name="device/vendor" remote="other"/>
  <project path="packages/apps/Settings" name="platform/packages/apps/Settings" remote="aosp" groups="aosp-platform"/>
</manifest>
"""


def write_manifest(path: Path, text: str = MANIFEST_XML) -> Path:
    path.write_text(text)
    return path


def make_project_dirs(root: Path, *paths: str) -> None:
    for relative in paths:
        (root / relative).mkdir(parents=True, exist_ok=True)
