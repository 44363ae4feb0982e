"""Tests for MavenBuilder — mvn is mocked, no JDK/Maven needed."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from z_dep_discovery.builders.maven import MavenBuilder
from z_dep_discovery.builders.registry import create_default_registry
from z_dep_discovery.config import Settings
from z_dep_discovery.core.process import CommandResult
from z_dep_discovery.exceptions import (
    AnalysisError,
    BinaryNotFoundError,
    BuildError,
    CommandExecutionError,
    NotInitializedError,
    ParseInconsistencyError,
)
from z_dep_discovery.models.tool import ToolContext

RUN = "z_dep_discovery.builders.maven.run_logged"
PROBE_RUN = "z_dep_discovery.resolve.binary.run_logged"


def _ok(stdout: str = "", stderr: str = "") -> CommandResult:
    return CommandResult(stdout=stdout, stderr=stderr, returncode=0)


def _fail(cmd, stdout: str = "", stderr: str = "") -> CommandExecutionError:
    return CommandExecutionError(cmd, "/proj", 1, stdout=stdout, stderr=stderr)


@pytest.fixture
def builder():
    b = MavenBuilder(Settings())
    b.mvn = ToolContext(cmd="mvn", version="Apache Maven 3.9.4")
    return b


class TestInitialize:
    def test_env_override_tried_first(self):
        seen: list[str] = []

        def fake_run(cmd, timeout=None):
            seen.append(cmd[0])
            if cmd[0] == "/opt/maven/bin/mvn":
                return _ok(stdout="Apache Maven 3.9.4\n")
            return _ok(stderr='openjdk version "17"\n')

        builder = MavenBuilder(Settings(maven_binary="/opt/maven/bin/mvn"))
        with patch(PROBE_RUN, side_effect=fake_run):
            builder.initialize()

        assert builder.mvn == ToolContext("/opt/maven/bin/mvn", "Apache Maven 3.9.4")
        assert builder.java == ToolContext("java", 'openjdk version "17"')
        assert "mvn" not in seen

    def test_missing_java_is_not_fatal(self):
        def fake_run(cmd, timeout=None):
            if cmd[0] == "java":
                raise _fail(cmd)
            return _ok(stdout="Apache Maven 3.9.4\n")

        builder = MavenBuilder(Settings())
        with patch(PROBE_RUN, side_effect=fake_run):
            builder.initialize()
        assert builder.java is None
        assert builder.mvn is not None and builder.mvn.cmd == "mvn"

    def test_missing_maven_is_fatal(self):
        def fake_run(cmd, timeout=None):
            if cmd[0] == "mvn":
                raise _fail(cmd)
            return _ok(stderr="java 21\n")

        builder = MavenBuilder(Settings())
        with patch(PROBE_RUN, side_effect=fake_run):
            with pytest.raises(BinaryNotFoundError, match="MAVEN_BINARY"):
                builder.initialize()

    def test_timeout_is_passed_to_probes(self):
        timeouts: list[float | None] = []

        def fake_run(cmd, timeout=None):
            timeouts.append(timeout)
            return _ok(stdout="v\n")

        with patch(PROBE_RUN, side_effect=fake_run):
            MavenBuilder(Settings(command_timeout=30.0)).initialize()
        assert timeouts == [30.0, 30.0]


class TestBuild:
    def test_build_runs_install(self, builder):
        with patch(RUN, return_value=_ok()) as run:
            builder.build("/proj")
        assert run.call_count == 1
        assert run.call_args.args[0] == ["mvn", "install", "-DskipTests", "-Drat.skip=true"]
        assert run.call_args.kwargs["cwd"] == "/proj"

    def test_force_cleans_first(self, builder):
        with patch(RUN, return_value=_ok()) as run:
            builder.build("/proj", force=True)
        assert [c.args[0][1] for c in run.call_args_list] == ["clean", "install"]

    def test_clean_failure(self, builder):
        with patch(RUN, side_effect=_fail(["mvn", "clean"])):
            with pytest.raises(BuildError, match="Maven cache"):
                builder.build("/proj", force=True)

    def test_install_failure_is_wrapped(self, builder):
        with patch(RUN, side_effect=_fail(["mvn", "install"], stderr="compilation error")):
            with pytest.raises(BuildError) as exc_info:
                builder.build("/proj")
        assert isinstance(exc_info.value.__cause__, CommandExecutionError)
        assert "compilation error" in str(exc_info.value)

    def test_requires_initialize(self):
        with pytest.raises(NotInitializedError):
            MavenBuilder(Settings()).build("/proj")


class TestAnalyze:
    def test_analyze_parses_and_aggregates(self, builder, multi_module_tree):
        with patch(RUN, return_value=_ok(stdout=multi_module_tree)) as run:
            deps = builder.analyze("/proj")
        assert run.call_args.args[0] == ["mvn", "dependency:tree", "-B"]

        by_pkg = {d.package: d for d in deps}
        assert len(by_pkg) == len(deps) == 4
        assert len(by_pkg["org.slf4j:slf4j-api"].via) == 3
        assert all(d.fetcher == "mvn" for d in deps)

    def test_command_failure(self, builder):
        with patch(RUN, side_effect=_fail(["mvn", "dependency:tree"])):
            with pytest.raises(AnalysisError):
                builder.analyze("/proj")

    def test_bad_tree_is_loud(self, builder):
        bad = (
            "[INFO] --- maven-dependency-plugin:3.6.0:tree (default-cli) @ app ---\n"
            "[INFO] g:a:jar:1\n"
            "[INFO] +-- g:b:jar:1\n"
        )
        with patch(RUN, return_value=_ok(stdout=bad)):
            with pytest.raises(ParseInconsistencyError):
                builder.analyze("/proj")


class TestIsBuilt:
    def test_missing_artifact_means_not_built(self, builder):
        out = "[ERROR] Failed to execute goal: Could not find artifact com.example:core:jar:1.0"
        with patch(RUN, side_effect=_fail(["mvn", "dependency:list"], stdout=out)):
            assert builder.is_built("/proj") is False

    def test_other_failures_propagate(self, builder):
        with patch(RUN, side_effect=_fail(["mvn", "dependency:list"], stdout="[ERROR] boom")):
            with pytest.raises(CommandExecutionError):
                builder.is_built("/proj")

    def test_output_means_built(self, builder):
        with patch(RUN, return_value=_ok(stdout="[INFO] The following files have been resolved:")):
            assert builder.is_built("/proj") is True

    def test_empty_output_means_not_built(self, builder):
        with patch(RUN, return_value=_ok(stdout="")):
            assert builder.is_built("/proj") is False


class TestModules:
    def test_is_module(self, tmp_path: Path, write_pom, builder):
        pom = write_pom(tmp_path / "m")
        assert builder.is_module(tmp_path / "m")
        assert builder.is_module(pom)
        assert not builder.is_module(tmp_path)

    def test_discover_modules_delegates(self, tmp_path: Path, write_pom, builder):
        write_pom(tmp_path / "a", artifact_id="a")
        write_pom(tmp_path / "b", artifact_id="b")
        assert [r.name for r in builder.discover_modules(tmp_path)] == ["a", "b"]

    def test_find_project_root(self, tmp_path: Path, write_pom, builder):
        write_pom(tmp_path)
        (tmp_path / "src").mkdir()
        assert builder.find_project_root(tmp_path / "src") == str(tmp_path)


class TestRegistry:
    def test_maven_registered(self):
        registry = create_default_registry()
        assert isinstance(registry.create("mvn"), MavenBuilder)
        assert registry.get("gradle") is None

    def test_unknown_type(self):
        with pytest.raises(KeyError):
            create_default_registry().create("gradle")

    def test_find_for_directory(self, tmp_path: Path, write_pom):
        registry = create_default_registry()
        assert registry.find_for_directory(tmp_path) == []
        write_pom(tmp_path)
        assert [d.type_tag for d in registry.find_for_directory(tmp_path)] == ["mvn"]

    def test_list_all_exposes_display_names(self):
        assert [d.display_name for d in create_default_registry().list_all()] == ["Apache Maven"]
