"""Shared pytest fixtures for Maven Version Checker tests.

Sample projects are written into ``tmp_path``; no network access is needed.
"""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest
import structlog

POM_HEADER = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<project xmlns="http://maven.apache.org/POM/4.0.0"\n'
    '         xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"\n'
    '         xsi:schemaLocation="http://maven.apache.org/POM/4.0.0 '
    'https://maven.apache.org/xsd/maven-4.0.0.xsd">\n'
    "  <modelVersion>4.0.0</modelVersion>\n"
)
POM_FOOTER = "</project>\n"


def write_pom(directory: Path, body: str) -> Path:
    """Write ``directory/pom.xml`` with *body* between the project tags."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / "pom.xml"
    path.write_text(POM_HEADER + textwrap.dedent(body) + POM_FOOTER, encoding="utf-8")
    return path


# Single module: 1 parent, 4 versioned dependencies, 2 versioned plugins.
SINGLE_MODULE_BODY = """\
<parent>
  <groupId>org.springframework.boot</groupId>
  <artifactId>spring-boot-starter-parent</artifactId>
  <version>2.7.18</version>
  <relativePath/>
</parent>
<groupId>com.example</groupId>
<artifactId>demo</artifactId>
<version>0.0.1-SNAPSHOT</version>
<properties>
  <java.version>17</java.version>
  <mongodb.version>4.11.5</mongodb.version>
  <spring-cloud.version>2021.0.9</spring-cloud.version>
  <compiler-plugin.version>3.13.0</compiler-plugin.version>
</properties>
<dependencyManagement>
  <dependencies>
    <dependency>
      <groupId>org.springframework.cloud</groupId>
      <artifactId>spring-cloud-dependencies</artifactId>
      <version>${spring-cloud.version}</version>
      <type>pom</type>
      <scope>import</scope>
    </dependency>
  </dependencies>
</dependencyManagement>
<dependencies>
  <dependency>
    <groupId>org.springframework.boot</groupId>
    <artifactId>spring-boot-starter-web</artifactId>
  </dependency>
  <dependency>
    <groupId>org.mongodb</groupId>
    <artifactId>mongodb-driver-sync</artifactId>
    <version>${mongodb.version}</version>
  </dependency>
  <dependency>
    <groupId>org.mongodb</groupId>
    <artifactId>bson</artifactId>
    <version>${mongodb.version}</version>
  </dependency>
  <dependency>
    <groupId>co.elastic.logging</groupId>
    <artifactId>logback-ecs-encoder</artifactId>
    <version>1.6.0</version>
  </dependency>
</dependencies>
<build>
  <plugins>
    <plugin>
      <artifactId>maven-compiler-plugin</artifactId>
      <version>${compiler-plugin.version}</version>
    </plugin>
    <plugin>
      <groupId>org.jacoco</groupId>
      <artifactId>jacoco-maven-plugin</artifactId>
      <version>0.8.9</version>
    </plugin>
    <plugin>
      <groupId>org.springframework.boot</groupId>
      <artifactId>spring-boot-maven-plugin</artifactId>
    </plugin>
  </plugins>
</build>
"""

# Aggregator root: 1 parent, 1 dependency, 1 managed plugin; three modules.
MULTI_ROOT_BODY = """\
<parent>
  <groupId>org.springframework.boot</groupId>
  <artifactId>spring-boot-starter-parent</artifactId>
  <version>2.7.18</version>
</parent>
<groupId>com.example</groupId>
<artifactId>foobar</artifactId>
<version>1.0.0</version>
<packaging>pom</packaging>
<modules>
  <module>foobar-a</module>
  <module>foobar-b</module>
  <module>foobar-empty</module>
</modules>
<properties>
  <commons-csv.version>1.9.0</commons-csv.version>
  <h2.version>2.3.232</h2.version>
</properties>
<dependencies>
  <dependency>
    <groupId>org.mongodb</groupId>
    <artifactId>bson</artifactId>
    <version>4.11.5</version>
  </dependency>
</dependencies>
<build>
  <pluginManagement>
    <plugins>
      <plugin>
        <groupId>org.jacoco</groupId>
        <artifactId>jacoco-maven-plugin</artifactId>
        <version>0.8.9</version>
      </plugin>
    </plugins>
  </pluginManagement>
</build>
"""

# Uses an inherited property.
MODULE_A_BODY = """\
<parent>
  <groupId>com.example</groupId>
  <artifactId>foobar</artifactId>
  <version>1.0.0</version>
</parent>
<artifactId>foobar-a</artifactId>
<dependencies>
  <dependency>
    <groupId>org.apache.commons</groupId>
    <artifactId>commons-csv</artifactId>
    <version>${commons-csv.version}</version>
  </dependency>
</dependencies>
"""

# Overrides an inherited property and references the parent version.
MODULE_B_BODY = """\
<parent>
  <groupId>com.example</groupId>
  <artifactId>foobar</artifactId>
  <version>${project.parent.version}</version>
</parent>
<artifactId>foobar-b</artifactId>
<properties>
  <h2.version>2.2.224</h2.version>
</properties>
<dependencies>
  <dependency>
    <groupId>com.h2database</groupId>
    <artifactId>h2</artifactId>
    <version>${h2.version}</version>
  </dependency>
  <dependency>
    <groupId>com.example</groupId>
    <artifactId>foobar-a</artifactId>
    <version>${project.parent.version}</version>
  </dependency>
</dependencies>
<build>
  <plugins>
    <plugin>
      <groupId>org.jsonschema2pojo</groupId>
      <artifactId>jsonschema2pojo-maven-plugin</artifactId>
      <version>1.1.2</version>
    </plugin>
  </plugins>
</build>
"""

MODULE_EMPTY_BODY = """\
<parent>
  <groupId>com.example</groupId>
  <artifactId>foobar</artifactId>
  <version>1.0.0</version>
</parent>
<artifactId>foobar-empty</artifactId>
"""


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def _reset_structlog():
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


@pytest.fixture
def single_module_pom(tmp_path) -> Path:
    return write_pom(tmp_path / "single", SINGLE_MODULE_BODY)


@pytest.fixture
def multi_module_pom(tmp_path) -> Path:
    root = tmp_path / "multi"
    write_pom(root / "foobar-a", MODULE_A_BODY)
    write_pom(root / "foobar-b", MODULE_B_BODY)
    write_pom(root / "foobar-empty", MODULE_EMPTY_BODY)
    return write_pom(root, MULTI_ROOT_BODY)


@pytest.fixture
def github_env(tmp_path) -> dict[str, str]:
    """Environment of a runner step: empty file-command files exist."""
    output_file = tmp_path / "github_output"
    summary_file = tmp_path / "github_step_summary"
    output_file.touch()
    summary_file.touch()
    return {
        "GITHUB_OUTPUT": str(output_file),
        "GITHUB_STEP_SUMMARY": str(summary_file),
    }
