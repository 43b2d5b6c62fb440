from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path
from typing import Sequence

from .merge import MergeResult
from .push import PushResult
from .workspace import FileError


def _count_line(results: Sequence[MergeResult] | Sequence[PushResult]) -> str:
    counts = Counter(result.status for result in results)
    return ", ".join(f"{status}: {counts[status]}" for status in sorted(counts))


def _section(title: str, results: Sequence[MergeResult] | Sequence[PushResult]) -> list[str]:
    lines = [title, "=" * len(title)]
    if results:
        lines.append(_count_line(results))
    for result in results:
        detail = f"- {result.project}: {result.status}"
        if result.message:
            detail += f" ({result.message})"
        lines.append(detail)
    return lines


def summarize_cli(
    merges: Sequence[MergeResult] | None = None,
    pushes: Sequence[PushResult] | None = None,
) -> str:
    lines: list[str] = []
    if merges is not None:
        lines.extend(_section("Merge Results", merges))
    if pushes is not None:
        if lines:
            lines.append("")
        lines.extend(_section("Push Results", pushes))
    return "\n".join(lines)


def write_markdown_report(
    output_path: Path,
    merges: Sequence[MergeResult] | None = None,
    pushes: Sequence[PushResult] | None = None,
) -> None:
    lines = ["# Manifest Merge Report", ""]

    if merges is not None:
        lines.append("## Merge Results")
        lines.append("")
        for result in merges:
            lines.append(f"- **{result.project}**: {result.status}")
            lines.append(f"  - Path: `{result.path}`")
            if result.message:
                lines.append(f"  - Notes: {result.message}")
        lines.append("")

    if pushes is not None:
        lines.append("## Push Results")
        lines.append("")
        for result in pushes:
            lines.append(f"- **{result.project}**: {result.status}")
            lines.append(f"  - Path: `{result.path}`")
            if result.destination:
                lines.append(f"  - Destination: `{result.destination}`")
            if result.message:
                lines.append(f"  - Notes: {result.message}")
        lines.append("")

    try:
        output_path.write_text("\n".join(lines).rstrip() + "\n")
    except OSError as exc:
        raise FileError(f"cannot write report {output_path}: {exc}") from exc
    logging.info("Wrote report to %s", output_path)
