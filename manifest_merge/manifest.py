from __future__ import annotations

import logging
import xml.dom.minidom
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple
from xml.parsers.expat import ExpatError

from .workspace import FileError, ParseError


@dataclass(frozen=True)
class Remote:
    name: str
    fetch: str
    revision: str = ""


@dataclass(frozen=True)
class Project:
    path: str
    name: str
    remote: str
    groups: str = ""


@dataclass(frozen=True)
class Manifest:
    remotes: Tuple[Remote, ...] = ()
    projects: Tuple[Project, ...] = ()

    def find_remote(self, name: str) -> Optional[Remote]:
        for remote in self.remotes:
            if remote.name == name:
                return remote
        return None

    def projects_in_group(self, group: str) -> List[Project]:
        return [project for project in self.projects if project.groups == group]


def load_manifest(path: Path) -> Manifest:
    """Read a repo-style manifest into a :class:`Manifest`.

    Only ``<remote>`` and ``<project>`` children of the root ``<manifest>``
    element are read; anything else in the document is ignored.
    """
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise FileError(f"cannot read manifest {path}: {exc}") from exc

    try:
        document = xml.dom.minidom.parseString(data)
    except ExpatError as exc:
        raise ParseError(f"error parsing manifest {path}: {exc}") from exc

    root = document.documentElement
    if root is None or root.nodeName != "manifest":
        found = root.nodeName if root is not None else "nothing"
        raise ParseError(f"{path}: expected <manifest> root element, found <{found}>")

    remotes: List[Remote] = []
    projects: List[Project] = []
    for node in root.childNodes:
        if node.nodeType != node.ELEMENT_NODE:
            continue
        if node.nodeName == "remote":
            remotes.append(
                Remote(
                    name=node.getAttribute("name"),
                    fetch=node.getAttribute("fetch"),
                    revision=node.getAttribute("revision"),
                )
            )
        elif node.nodeName == "project":
            projects.append(
                Project(
                    path=node.getAttribute("path"),
                    name=node.getAttribute("name"),
                    remote=node.getAttribute("remote"),
                    groups=node.getAttribute("groups"),
                )
            )
        else:
            logging.debug("Ignoring <%s> element in %s", node.nodeName, path)

    logging.info(
        "Loaded manifest %s: %d remote(s), %d project(s)", path, len(remotes), len(projects)
    )
    return Manifest(remotes=tuple(remotes), projects=tuple(projects))
