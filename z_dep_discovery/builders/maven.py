"""Apache Maven integration — build, dependency:tree analysis, pom.xml discovery."""

from __future__ import annotations

import os
from pathlib import Path

import structlog

from z_dep_discovery.builders.base import Builder
from z_dep_discovery.config import Settings
from z_dep_discovery.core.logging import get_logger
from z_dep_discovery.core.process import CommandResult, run_logged
from z_dep_discovery.discovery.files import is_file, or_predicates
from z_dep_discovery.discovery.manifests import ManifestLocator
from z_dep_discovery.exceptions import (
    AnalysisError,
    BinaryNotFoundError,
    BuildError,
    CommandExecutionError,
    NotInitializedError,
)
from z_dep_discovery.graph.aggregator import compute_import_paths
from z_dep_discovery.graph.tree_parser import MAVEN_TREE_FORMAT, TreeParser
from z_dep_discovery.models.dependency import Dependency
from z_dep_discovery.models.manifest import ManifestRecord
from z_dep_discovery.models.tool import ToolContext
from z_dep_discovery.resolve.binary import BinaryResolver, version_probe

POM_FILE = "pom.xml"

# Printed by Maven when a module's artifacts are not installed yet.
NOT_BUILT_MARKER = "Could not find artifact"

CLEAN_ARGS = ["clean"]
INSTALL_ARGS = ["install", "-DskipTests", "-Drat.skip=true"]
TREE_ARGS = ["dependency:tree", "-B"]
LIST_ARGS = ["dependency:list", "-B"]


class MavenBuilder(Builder):
    """Builder for Apache Maven (pom.xml) projects."""

    def __init__(
        self,
        settings: Settings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
        resolver: BinaryResolver | None = None,
    ) -> None:
        self.settings = settings or Settings.from_env()
        self._log = logger or get_logger("maven")
        self._resolver = resolver or BinaryResolver(logger=self._log)
        self._locator = ManifestLocator(POM_FILE, self.type_tag, logger=self._log)
        self._parser = TreeParser(MAVEN_TREE_FORMAT, logger=self._log)
        self.java: ToolContext | None = None
        self.mvn: ToolContext | None = None

    @property
    def type_tag(self) -> str:
        return "mvn"

    # ── binaries ─────────────────────────────────────────────────────────

    def initialize(self) -> None:
        """Resolve java (optional) and mvn (required)."""
        self._log.debug("maven.initialize")
        timeout = self.settings.command_timeout

        try:
            self.java = self._resolver.which(
                [self.settings.java_binary, "java"],
                version_probe(["-version"], timeout=timeout),
            )
        except BinaryNotFoundError as e:
            self._log.warning(
                "maven.java_not_found",
                hint="try setting $JAVA_BINARY",
                error=str(e),
            )
            self.java = None

        try:
            self.mvn = self._resolver.which(
                [self.settings.maven_binary, "mvn"],
                version_probe(["--version"], timeout=timeout),
            )
        except BinaryNotFoundError as e:
            raise BinaryNotFoundError(e.candidates, hint="try setting $MAVEN_BINARY") from e

        self._log.debug(
            "maven.initialized",
            java=self.java.cmd if self.java else None,
            mvn=self.mvn.cmd,
            mvn_version=self.mvn.version.splitlines()[0],
        )

    # ── build / analyze ──────────────────────────────────────────────────

    def build(self, module_dir: str | Path, force: bool = False) -> None:
        self._log.debug("maven.build", module_dir=str(module_dir), force=force)
        if force:
            try:
                self._mvn(module_dir, CLEAN_ARGS)
            except CommandExecutionError as e:
                raise BuildError(f"Could not remove Maven cache: {e}") from e

        try:
            self._mvn(module_dir, INSTALL_ARGS)
        except CommandExecutionError as e:
            raise BuildError(f"Could not run Maven build: {e}") from e
        self._log.debug("maven.build_done", module_dir=str(module_dir))

    def analyze(self, module_dir: str | Path, allow_unresolved: bool = False) -> list[Dependency]:
        """Parse ``mvn dependency:tree`` for *module_dir*.

        Raises ParseInconsistencyError when the tree output cannot be trusted.
        """
        self._log.debug(
            "maven.analyze", module_dir=str(module_dir), allow_unresolved=allow_unresolved
        )
        try:
            result = self._mvn(module_dir, TREE_ARGS)
        except CommandExecutionError as e:
            raise AnalysisError(f"Could not get dependency tree from Maven: {e}") from e

        edges = self._parser.parse(result.stdout)
        deps = compute_import_paths(edges)
        self._log.debug("maven.analyze_done", module_dir=str(module_dir), dependencies=len(deps))
        return deps

    def is_built(self, module_dir: str | Path, allow_unresolved: bool = False) -> bool:
        """Check whether ``mvn dependency:list`` produces output.

        A missing-artifact failure means "not built" and is not an error.
        """
        self._log.debug("maven.is_built", module_dir=str(module_dir))
        try:
            result = self._mvn(module_dir, LIST_ARGS)
        except CommandExecutionError as e:
            if NOT_BUILT_MARKER in e.stdout or NOT_BUILT_MARKER in e.stderr:
                self._log.debug("maven.not_built", module_dir=str(module_dir))
                return False
            raise
        built = result.stdout != ""
        self._log.debug("maven.is_built_done", module_dir=str(module_dir), built=built)
        return built

    # ── modules ──────────────────────────────────────────────────────────

    def is_module(self, target: str | Path) -> bool:
        target = str(target)
        is_pom = or_predicates(
            lambda p: os.path.basename(p) == POM_FILE and is_file(p),
            lambda p: is_file(p, POM_FILE),
        )
        return is_pom(target)

    def discover_modules(self, root_dir: str | Path) -> list[ManifestRecord]:
        return self._locator.discover(root_dir)

    def find_project_root(self, path: str | Path) -> str | None:
        """Nearest directory at or above *path* that holds a pom.xml."""
        return self._locator.find_root(path)

    # ── helpers ──────────────────────────────────────────────────────────

    def _mvn(self, module_dir: str | Path, args: list[str]) -> CommandResult:
        if self.mvn is None:
            raise NotInitializedError("MavenBuilder.initialize() must be called first")
        return run_logged(
            [self.mvn.cmd, *args],
            cwd=module_dir,
            timeout=self.settings.command_timeout,
            logger=self._log,
        )
