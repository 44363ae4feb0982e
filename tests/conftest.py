"""Shared pytest fixtures for z-dep-discovery tests."""

import pytest

# Single-module `mvn dependency:tree -B` output.
SINGLE_MODULE_TREE = """\
[INFO] Scanning for projects...
[INFO]
[INFO] -----------------------< com.example:app >------------------------
[INFO] Building app 1.0
[INFO] --------------------------------[ jar ]---------------------------------
[INFO]
[INFO] --- maven-dependency-plugin:3.6.0:tree (default-cli) @ app ---
[INFO] com.example:app:jar:1.0
[INFO] +- junit:junit:jar:4.13.2:test
[INFO] |  \\- org.hamcrest:hamcrest-core:jar:1.3:test
[INFO] +- com.google.guava:guava:jar:32.1.2-jre:compile
[INFO] |  +- com.google.guava:failureaccess:jar:1.0.1:compile
[INFO] |  \\- org.checkerframework:checker-qual:jar:3.33.0:compile
[INFO] \\- commons-io:commons-io:jar:2.11.0:compile
[INFO] ------------------------------------------------------------------------
[INFO] BUILD SUCCESS
[INFO] ------------------------------------------------------------------------
"""

# Two modules that both pull in the same library through different parents.
MULTI_MODULE_TREE = """\
[INFO] Reactor Build Order:
[INFO]
[INFO] --- maven-dependency-plugin:3.6.0:tree (default-cli) @ core ---
[INFO] com.example:core:jar:1.0
[INFO] \\- org.slf4j:slf4j-api:jar:2.0.9:compile
[INFO]
[INFO] ------------------------< com.example:web >-------------------------
[INFO] Building web 1.0
[INFO]
[INFO] --- maven-dependency-plugin:3.6.0:tree (default-cli) @ web ---
[INFO] com.example:web:jar:1.0
[INFO] +- com.example:core:jar:1.0:compile
[INFO] |  \\- org.slf4j:slf4j-api:jar:2.0.9:compile
[INFO] \\- ch.qos.logback:logback-classic:jar:1.4.11:compile
[INFO]    \\- org.slf4j:slf4j-api:jar:2.0.9:compile
[INFO] ------------------------------------------------------------------------
[INFO] BUILD SUCCESS
"""


@pytest.fixture
def single_module_tree():
    return SINGLE_MODULE_TREE


@pytest.fixture
def multi_module_tree():
    return MULTI_MODULE_TREE


@pytest.fixture
def write_pom():
    """Write a minimal pom.xml into a directory and return its path."""

    def _write(directory, artifact_id=None, name=None, namespaced=True):
        directory.mkdir(parents=True, exist_ok=True)
        xmlns = ' xmlns="http://maven.apache.org/POM/4.0.0"' if namespaced else ""
        fields = ""
        if artifact_id:
            fields += f"  <artifactId>{artifact_id}</artifactId>\n"
        if name:
            fields += f"  <name>{name}</name>\n"
        pom = directory / "pom.xml"
        pom.write_text(
            f"<?xml version=\"1.0\"?>\n<project{xmlns}>\n"
            f"  <modelVersion>4.0.0</modelVersion>\n{fields}</project>\n"
        )
        return pom

    return _write
