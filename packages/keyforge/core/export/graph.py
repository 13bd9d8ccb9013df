"""Export scene graph and animation target resolution."""

from __future__ import annotations

from collections.abc import Iterator
import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from keyforge.core.animation import is_valid_node_name
from keyforge.core.export.errors import NoAnimationTargetError

logger = logging.getLogger(__name__)


class SceneNode(BaseModel):
    """Named node of the exported scene graph."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    children: tuple[SceneNode, ...] = ()

    @field_validator("name")
    @classmethod
    def _check_name(cls, v: str) -> str:
        if not is_valid_node_name(v):
            raise ValueError(f"Invalid node name {v!r}: must be non-empty without '.', '[' or ']'")
        return v

    def walk(self) -> Iterator[SceneNode]:
        """Depth-first, pre-order traversal starting at this node."""
        yield self
        for child in self.children:
            yield from child.walk()

    def node_names(self) -> list[str]:
        return [node.name for node in self.walk()]

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


class ExportTarget(BaseModel):
    """Concrete scene graph a clip is exported against.

    Attributes:
        root: Root of the exported subtree
        target_name: Node that receives the animation; derived from the
            graph shape when None
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    root: SceneNode
    target_name: str | None = Field(default=None, description="Explicit animation target node")

    def has_node(self, name: str) -> bool:
        return any(node.name == name for node in self.root.walk())


def resolve_animation_target(target: ExportTarget, target_name: str | None = None) -> str:
    """Pick the node that property-local tracks bind to.

    Rules, in order:

    1. An explicit name (``target_name`` or ``target.target_name``) must
       match exactly one node in the graph.
    2. A root with exactly one child targets that child.
    3. A root with no children targets the root itself.
    4. Anything else is ambiguous.

    Args:
        target: Export scene graph
        target_name: Overrides ``target.target_name`` when given

    Returns:
        Name of the target node

    Raises:
        NoAnimationTargetError: If no single node can be identified
    """
    explicit = target_name or target.target_name
    root = target.root

    if explicit is not None:
        matches = [node for node in root.walk() if node.name == explicit]
        if len(matches) != 1:
            raise NoAnimationTargetError(
                f"Target node {explicit!r} matches {len(matches)} nodes, expected exactly 1"
            )
        resolved = explicit
    elif len(root.children) == 1:
        resolved = root.children[0].name
    elif not root.children:
        resolved = root.name
    else:
        raise NoAnimationTargetError(
            f"Root {root.name!r} has {len(root.children)} children; "
            "name the animation target explicitly"
        )

    logger.debug(f"Animation target resolved to {resolved!r}")
    return resolved
