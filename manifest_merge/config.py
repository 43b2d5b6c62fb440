from __future__ import annotations

from dataclasses import dataclass

MANIFEST_FILE = "manifest.xml"
DEFAULT_MERGE_GROUP = "aosp-platform"
DEFAULT_UPSTREAM = "https://android.googlesource.com"
DEFAULT_REF = "master"


@dataclass(frozen=True)
class DriverConfig:
    manifest_file: str = MANIFEST_FILE
    merge_group: str = DEFAULT_MERGE_GROUP
    upstream: str = DEFAULT_UPSTREAM

    def upstream_url(self, project_path: str) -> str:
        return f"{self.upstream}{project_path}"
