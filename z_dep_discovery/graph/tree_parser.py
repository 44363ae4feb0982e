"""Parse indented dependency-tree dumps into import edges.

Build tools print their resolved graph as ASCII art, e.g. ``mvn dependency:tree``:

    [INFO] --- maven-dependency-plugin:3.6.0:tree (default-cli) @ app ---
    [INFO] com.example:app:jar:1.0
    [INFO] +- junit:junit:jar:4.13.2:test
    [INFO] |  \\- org.hamcrest:hamcrest-core:jar:1.3:test
    [INFO] \\- commons-io:commons-io:jar:2.11.0:compile
    [INFO] ------------------------------------------------------------------------

The connector prefix length encodes depth. A line at depth d is a child of
the most recent line at depth d-1, so a stack truncated to d rebuilds the
parent chain.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

import structlog

from z_dep_discovery.core.logging import get_logger
from z_dep_discovery.exceptions import ParseInconsistencyError
from z_dep_discovery.models.dependency import ImportEdge, ImportPath, Locator


@dataclass(frozen=True)
class TreeFormat:
    """Tool-specific constants of a tree dump."""

    name: str
    section_start: re.Pattern[str]
    section_end: frozenset[str]
    line_pattern: re.Pattern[str]  # groups: (indentation, coordinate)
    coordinate_pattern: re.Pattern[str]
    indent_width: int
    to_locator: Callable[[re.Match[str]], Locator]


def _maven_locator(m: re.Match[str]) -> Locator:
    group_id, artifact_id, _packaging, version = m.groups()
    return Locator(fetcher="mvn", package=f"{group_id}:{artifact_id}", revision=version)


MAVEN_TREE_FORMAT = TreeFormat(
    name="maven",
    section_start=re.compile(r"^\[INFO\] --- .*? ---$"),
    section_end=frozenset({"[INFO]", "[INFO] ", "[INFO] " + "-" * 72}),
    line_pattern=re.compile(r"^\[INFO\] ([ `+\\|-]*)([^ `+\\|-].+)$"),
    # group:artifact:packaging:version[:scope]; packaging may be empty
    coordinate_pattern=re.compile(r"([^:]+):([^:]+):([^:]*):([^:]+)"),
    indent_width=3,
    to_locator=_maven_locator,
)


def extract_sections(output: str, fmt: TreeFormat) -> list[list[str]]:
    """Split raw output into tree sections; lines outside sections are dropped."""
    sections: list[list[str]] = []
    current: list[str] | None = None
    for raw in output.split("\n"):
        line = raw.rstrip("\r")
        if fmt.section_start.match(line):
            if current is not None:
                raise ParseInconsistencyError(line, "Section started inside another section")
            current = []
            continue
        if line in fmt.section_end:
            if current is not None:
                sections.append(current)
            current = None
            continue
        if current is not None:
            current.append(line)
    if current is not None:
        sections.append(current)
    return sections


class TreeParser:
    """Turn a tree dump into ordered (locator, ancestor path) edges."""

    def __init__(
        self,
        fmt: TreeFormat = MAVEN_TREE_FORMAT,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self.fmt = fmt
        self._log = logger or get_logger("tree")

    def parse(self, output: str) -> list[ImportEdge]:
        edges: list[ImportEdge] = []
        sections = extract_sections(output, self.fmt)
        for lines in sections:
            edges.extend(self.parse_section(lines))
        self._log.debug(
            "tree.parsed", format=self.fmt.name, sections=len(sections), edges=len(edges)
        )
        return edges

    def parse_section(self, lines: list[str]) -> list[ImportEdge]:
        """Parse the lines of one section. Indentation restarts at zero."""
        edges: list[ImportEdge] = []
        stack: list[Locator] = []
        for line in lines:
            depth, locator = self.parse_line(line)
            if depth > len(stack):
                raise ParseInconsistencyError(
                    line, f"Depth {depth} skips a level (parent depth {len(stack) - 1})"
                )
            del stack[depth:]
            edges.append(ImportEdge(locator=locator, via=ImportPath(stack)))
            stack.append(locator)
        return edges

    def parse_line(self, line: str) -> tuple[int, Locator]:
        """Return (depth, locator) for one in-section line."""
        m = self.fmt.line_pattern.match(line)
        if m is None:
            raise ParseInconsistencyError(line, "Unrecognized tree line")
        indent, coordinate = m.group(1), m.group(2)

        if len(indent) % self.fmt.indent_width != 0:
            raise ParseInconsistencyError(
                line,
                f"Indentation of {len(indent)} is not a multiple of {self.fmt.indent_width}",
            )

        cm = self.fmt.coordinate_pattern.search(coordinate)
        if cm is None:
            raise ParseInconsistencyError(line, "Malformed coordinate")
        return len(indent) // self.fmt.indent_width, self.fmt.to_locator(cm)


def parse_maven_tree(output: str) -> list[ImportEdge]:
    """Parse ``mvn dependency:tree`` output."""
    return TreeParser(MAVEN_TREE_FORMAT).parse(output)
