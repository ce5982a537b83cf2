"""Parsed view of a single Maven pom.xml file."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from collections.abc import Mapping
from pathlib import Path

from maven_version_checker.engines.version_checker.models import Artifact, ArtifactKind
from maven_version_checker.exceptions import DocumentError

# Version literal that means "same as the parent"; meaningless on <parent> itself.
PARENT_VERSION_PLACEHOLDER = "${project.parent.version}"
DEFAULT_PLUGIN_GROUP = "org.apache.maven.plugins"

_PLACEHOLDER_ANCHORS = re.compile(r"^\$\{|\}$")


def _text(element: ET.Element | None) -> str | None:
    if element is None:
        return None
    return element.text.strip() if element.text and element.text.strip() else None


def _local_name(tag: str) -> str:
    return tag.split("}")[-1] if "}" in tag else tag


class PomDocument:
    """A loaded POM plus the properties it inherits from its aggregator.

    Views (properties, modules, artifacts) are derived from the XML tree on
    every access; the tree itself never changes after loading.
    """

    def __init__(
        self,
        location: str | Path,
        parent_properties: Mapping[str, str] | None = None,
    ) -> None:
        self.location = Path(location)
        self._parent_properties = dict(parent_properties) if parent_properties else None
        try:
            self._root = ET.parse(self.location).getroot()
        except ET.ParseError as exc:
            raise DocumentError(str(self.location), str(exc)) from exc
        except OSError as exc:
            raise DocumentError(str(self.location), exc.strerror or str(exc)) from exc
        # Namespace prefix taken from the root, e.g. "{http://maven.apache.org/POM/4.0.0}"
        tag = self._root.tag
        self._ns = tag[: tag.index("}") + 1] if tag.startswith("{") else ""

    @property
    def parent_dir(self) -> Path:
        return self.location.parent

    # ── views ──────────────────────────────────────────────────────────────

    def properties(self) -> dict[str, str]:
        """Own ``<properties>`` overlaid on the inherited ones (own wins)."""
        own: dict[str, str] = {}
        for props_el in self._root.iter(f"{self._ns}properties"):
            for child in props_el:
                own.setdefault(_local_name(child.tag), (child.text or "").strip())

        if self._parent_properties is None:
            return own
        merged = dict(self._parent_properties)
        merged.update(own)
        return merged

    def module_lookup(self) -> dict[str, Path]:
        """Map each declared ``<module>`` to its pom.xml, in declaration order."""
        modules: dict[str, Path] = {}
        for modules_el in self._root.iter(f"{self._ns}modules"):
            for module_el in modules_el.findall(f"{self._ns}module"):
                name = _text(module_el)
                if name:
                    modules[name] = self.parent_dir / name / "pom.xml"
        return modules

    def parent_artifact(self) -> Artifact | None:
        artifacts = self._parse_artifacts(ArtifactKind.PARENT)
        return artifacts[0] if artifacts else None

    def dependencies(self) -> list[Artifact]:
        return self._parse_artifacts(ArtifactKind.DEPENDENCY)

    def plugins(self) -> list[Artifact]:
        return self._parse_artifacts(ArtifactKind.PLUGIN)

    def resolve_property(self, reference: str) -> str:
        """Replace a ``${name}`` reference with its property value.

        Single-level lookup; an unknown name yields the reference unchanged.
        """
        if "$" not in reference:
            return reference
        name = _PLACEHOLDER_ANCHORS.sub("", reference)
        return self.properties().get(name, reference)

    # ── internal ───────────────────────────────────────────────────────────

    def _parse_artifacts(self, kind: ArtifactKind) -> list[Artifact]:
        ns = self._ns
        artifacts: list[Artifact] = []
        for el in self._root.iter(f"{ns}{kind.tag}"):
            version = _text(el.find(f"{ns}version"))
            if version is None:
                continue
            if kind is ArtifactKind.PARENT and version == PARENT_VERSION_PLACEHOLDER:
                continue

            group_id = _text(el.find(f"{ns}groupId"))
            artifact_id = _text(el.find(f"{ns}artifactId"))
            if group_id is None and kind is ArtifactKind.PLUGIN:
                group_id = DEFAULT_PLUGIN_GROUP
            if group_id is None or artifact_id is None:
                raise DocumentError(
                    str(self.location),
                    f"<{kind.tag}> with version {version} is missing groupId or artifactId",
                )

            artifacts.append(
                Artifact(
                    group_id=group_id,
                    artifact_id=artifact_id,
                    version=self.resolve_property(version),
                )
            )
        return artifacts
