"""Parsing and formatting of track target paths.

A target path has the form ``"<node>.<property>[<axis>]"``. The node part is
empty for property-local paths such as ``".rotation[y]"`` and the axis part
is optional (``".scale"``, ``"RootNode.rotation"``).
"""

from __future__ import annotations

from dataclasses import dataclass
import re

_PATH_RE = re.compile(
    r"^(?P<node>[^.\[\]]*)\.(?P<prop>[A-Za-z_][A-Za-z0-9_]*)(?:\[(?P<axis>[xyzw])\])?$"
)
_NODE_NAME_RE = re.compile(r"^[^.\[\]]+$")


def is_valid_node_name(name: str) -> bool:
    """Whether ``name`` can appear as the node part of a target path."""
    return bool(_NODE_NAME_RE.match(name))


@dataclass(frozen=True)
class TrackPath:
    """Structured form of a track target path."""

    property: str
    node: str | None = None
    axis: str | None = None

    @classmethod
    def parse(cls, path: str) -> TrackPath:
        """Parse a target path string.

        Args:
            path: Path such as ".position[x]" or "RootNode.rotation"

        Returns:
            Parsed TrackPath

        Raises:
            ValueError: If the path does not follow the addressing convention
        """
        match = _PATH_RE.match(path)
        if match is None:
            raise ValueError(f"Invalid track path: {path!r}")
        return cls(
            property=match.group("prop"),
            node=match.group("node") or None,
            axis=match.group("axis"),
        )

    @property
    def is_local(self) -> bool:
        return self.node is None

    def with_node(self, node: str) -> TrackPath:
        return TrackPath(property=self.property, node=node, axis=self.axis)

    def format(self) -> str:
        suffix = f"[{self.axis}]" if self.axis else ""
        return f"{self.node or ''}.{self.property}{suffix}"

    def __str__(self) -> str:
        return self.format()
