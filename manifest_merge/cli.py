from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Sequence

from .config import (
    DEFAULT_MERGE_GROUP,
    DEFAULT_REF,
    DEFAULT_UPSTREAM,
    MANIFEST_FILE,
    DriverConfig,
)
from .gitutils import CommandRunner, SubprocessRunner
from .manifest import load_manifest
from .merge import MergeResult, merge_projects
from .push import PushResult, push_projects
from .reporting import summarize_cli, write_markdown_report
from .workspace import FileError, ManifestMergeError, current_workdir


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="manifest-merge",
        description=(
            f"Merge and push the repositories listed in ./{MANIFEST_FILE}."
        ),
    )
    parser.add_argument(
        "--merge-all",
        dest="merge_all",
        action="store_true",
        help="Merge all repositories defined in the manifest.",
    )
    parser.add_argument(
        "-p",
        dest="push",
        action="store_true",
        help="Push repositories after merge.",
    )
    parser.add_argument(
        "-b",
        dest="ref",
        default=DEFAULT_REF,
        help="Branch or tag to merge from (default: %(default)s).",
    )
    parser.add_argument(
        "--group",
        default=DEFAULT_MERGE_GROUP,
        help="Only merge projects whose groups attribute equals this value (default: %(default)s).",
    )
    parser.add_argument(
        "--upstream",
        default=DEFAULT_UPSTREAM,
        help="Host to pull from; the project path is appended (default: %(default)s).",
    )
    parser.add_argument(
        "--report",
        type=Path,
        help="Write a Markdown report of the merge/push results to this path.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def run(args: argparse.Namespace, runner: CommandRunner | None = None) -> int:
    configure_logging(args.verbose)
    logging.debug("Arguments: %s", args)

    config = DriverConfig(merge_group=args.group, upstream=args.upstream)
    workdir = current_workdir()
    manifest = load_manifest(workdir / config.manifest_file)
    runner = runner or SubprocessRunner()

    merges: List[MergeResult] | None = None
    pushes: List[PushResult] | None = None
    if args.merge_all:
        merges = merge_projects(manifest, args.ref, workdir, runner=runner, config=config)
    if args.push:
        pushes = push_projects(manifest, workdir, runner=runner)

    if merges is None and pushes is None:
        logging.info("Nothing to do; pass --merge-all and/or -p.")
        return 0

    logging.info("\n%s", summarize_cli(merges, pushes))
    if args.report:
        try:
            write_markdown_report(args.report, merges, pushes)
        except FileError as exc:
            logging.error("%s", exc)
    return 0


def main(argv: Sequence[str] | None = None, runner: CommandRunner | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return run(args, runner=runner)
    except ManifestMergeError as exc:
        logging.error("%s", exc)
        return 1
    except KeyboardInterrupt:
        logging.error("Interrupted")
        return 130


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
