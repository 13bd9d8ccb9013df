"""Export error hierarchy.

Every failure aborts the export of that clip; no partial output is produced.
"""

from __future__ import annotations


class ExportError(Exception):
    """Base class for errors raised while resolving a clip for export."""


class NoAnimationTargetError(ExportError):
    """The scene graph does not identify a node to bind tracks to."""


class IrreconcilableTimeBaseError(ExportError):
    """Axis tracks of one property cannot be put on a shared time base."""


class ConflictingTracksError(ExportError):
    """Tracks of one property cannot be merged into a single channel."""
