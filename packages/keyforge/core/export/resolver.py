"""Export-time track resolution.

Binds property-local tracks to a scene-graph node and merges per-axis
rotation, position and scale tracks into the single multi-component channels
the interchange format requires.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math

import numpy as np

from keyforge.core.animation import (
    AXES,
    AnimationClip,
    MergePolicy,
    PropertyKind,
    Track,
    TrackPath,
    ValueType,
)
from keyforge.core.config.models import ResolverConfig, TimeBasePolicy
from keyforge.core.export.errors import (
    ConflictingTracksError,
    IrreconcilableTimeBaseError,
    NoAnimationTargetError,
)
from keyforge.core.export.graph import ExportTarget, resolve_animation_target
from keyforge.core.export.quaternion import enforce_sign_continuity, euler_to_quaternion
from keyforge.core.utils.logging import log_performance

logger = logging.getLogger(__name__)


@dataclass
class _AxisSamples:
    times: np.ndarray
    values: np.ndarray
    source: str


@dataclass
class _MergeGroup:
    """Tracks bound to one ``(node, channel)`` pair, in input order."""

    node: str
    channel: str
    tracks: list[Track] = field(default_factory=list)


# Largest summed per-axis Euler change between neighbouring samples; must stay
# below π or slerp between the converted quaternions loses the turn.
MAX_EULER_STEP = math.pi / 2


def _subdivide_euler(
    times: np.ndarray, columns: list[np.ndarray], max_step: float = MAX_EULER_STEP
) -> tuple[np.ndarray, list[np.ndarray]]:
    """Insert evenly spaced samples into segments that turn too far.

    Each segment is split into the fewest equal pieces whose summed absolute
    axis change is at most ``max_step``. Angles are interpolated linearly and
    existing samples are kept exactly.
    """
    if times.shape[0] < 2:
        return times, columns
    deltas = np.abs(np.diff(np.vstack(columns), axis=1)).sum(axis=0)
    pieces = np.maximum(1, np.ceil(deltas / max_step)).astype(int)
    if np.all(pieces == 1):
        return times, columns

    seg = np.repeat(np.arange(pieces.shape[0]), pieces)
    frac = np.concatenate([np.arange(k) / k for k in pieces])

    def expand(a: np.ndarray) -> np.ndarray:
        return np.append(a[seg] + (a[seg + 1] - a[seg]) * frac, a[-1])

    logger.debug(f"Subdivided Euler samples {times.shape[0]} -> {seg.shape[0] + 1}")
    return expand(times), [expand(c) for c in columns]


def _unify_time_base(
    axes: dict[str, _AxisSamples], policy: TimeBasePolicy, label: str
) -> tuple[np.ndarray, dict[str, np.ndarray]]:
    """Put every axis on one shared time array.

    Identical time arrays are used unchanged. Otherwise ``UNION`` resamples
    each axis linearly onto the sorted union of all times (holding end values
    outside an axis's own range) and ``REFERENCE`` adopts the first present
    axis's times when every axis has the same sample count.

    Raises:
        IrreconcilableTimeBaseError: Under ``REFERENCE`` with mismatched
            sample counts
    """
    present = [axes[axis] for axis in AXES if axis in axes]
    reference = present[0].times
    if all(np.array_equal(s.times, reference) for s in present[1:]):
        return reference, {axis: samples.values for axis, samples in axes.items()}

    if policy is TimeBasePolicy.REFERENCE:
        counts = {axis: samples.times.shape[0] for axis, samples in axes.items()}
        if len(set(counts.values())) != 1:
            raise IrreconcilableTimeBaseError(
                f"{label}: axis sample counts differ {counts} under the reference policy"
            )
        return reference, {axis: samples.values for axis, samples in axes.items()}

    union = present[0].times
    for samples in present[1:]:
        union = np.union1d(union, samples.times)
    logger.debug(f"{label}: resampled {len(present)} axes onto {union.shape[0]} union times")
    return union, {
        axis: np.interp(union, samples.times, samples.values) for axis, samples in axes.items()
    }


class ExportTrackResolver:
    """Rewrites a clip into format-legal, node-bound tracks.

    The input clip and scene are never modified; resolving an already
    resolved clip against the same scene returns an equal clip.

    Args:
        config: Time-base policy, Euler order and optional target override
    """

    def __init__(self, config: ResolverConfig | None = None) -> None:
        self.config = config or ResolverConfig()

    @log_performance
    def resolve(self, clip: AnimationClip, target: ExportTarget) -> AnimationClip:
        """Resolve ``clip`` against ``target``.

        Raises:
            NoAnimationTargetError: If local tracks exist but no target node
                can be identified, or a track names a node absent from the
                graph
            IrreconcilableTimeBaseError: If axis time bases cannot be unified
            ConflictingTracksError: If quaternion and Euler rotations share a
                node, or a group cannot otherwise be merged
        """
        default_node: str | None = None
        groups: dict[tuple[str, str], _MergeGroup] = {}
        # Output order: first appearance of each merge group or pass-through track.
        order: list[tuple[str, str] | Track] = []
        for track in clip.tracks:
            path = track.target
            if path.node is None:
                if default_node is None:
                    default_node = resolve_animation_target(target, self.config.target_name)
                node = default_node
            elif target.has_node(path.node):
                node = path.node
            else:
                raise NoAnimationTargetError(
                    f"Track {track.path!r} names node {path.node!r} which is not in the scene"
                )

            channel = track.kind.channel or path.property
            if track.kind.merge_group is None:
                order.append(
                    track.replace(path=TrackPath(channel, node=node, axis=path.axis).format())
                )
                continue

            key = (node, channel)
            if key not in groups:
                groups[key] = _MergeGroup(node=node, channel=channel)
                order.append(key)
            groups[key].tracks.append(track)

        resolved: list[Track] = []
        for entry in order:
            if isinstance(entry, Track):
                resolved.append(entry)
            else:
                resolved.append(self._merge(groups[entry]))

        logger.debug(
            f"Resolved clip {clip.name!r}: {len(clip.tracks)} tracks -> {len(resolved)} tracks"
        )
        return AnimationClip(name=clip.name, duration=clip.duration, tracks=tuple(resolved))

    def _merge(self, group: _MergeGroup) -> Track:
        path = TrackPath(group.channel, node=group.node).format()
        quaternions = [t for t in group.tracks if t.kind is PropertyKind.ROTATION_QUATERNION]
        if quaternions:
            if len(quaternions) != len(group.tracks):
                raise ConflictingTracksError(
                    f"{path}: quaternion and Euler rotation tracks cannot be merged"
                )
            if len(quaternions) > 1:
                raise ConflictingTracksError(f"{path}: {len(quaternions)} quaternion tracks")
            return quaternions[0].replace(path=path)

        kind = group.tracks[0].kind
        axes = self._collect_axes(group, path)
        times, values = _unify_time_base(axes, self.config.time_base_policy, path)
        n = times.shape[0]
        columns = [values.get(axis, np.full(n, kind.axis_default)) for axis in AXES]

        if kind.merge_policy is MergePolicy.EULER_TO_QUATERNION:
            times, columns = _subdivide_euler(times, columns)
            quats = enforce_sign_continuity(
                euler_to_quaternion(*columns, order=self.config.euler_order)
            )
            return Track(
                path=path,
                kind=PropertyKind.ROTATION_QUATERNION,
                value_type=ValueType.QUATERNION,
                times=times.tolist(),
                values=quats.ravel().tolist(),
            )
        return Track.vector(path, kind, times.tolist(), np.column_stack(columns).tolist())

    def _collect_axes(self, group: _MergeGroup, path: str) -> dict[str, _AxisSamples]:
        """Decompose every track of the group into per-axis samples.

        Later tracks replace earlier ones for the same axis.
        """
        axes: dict[str, _AxisSamples] = {}
        for track in group.tracks:
            times = np.asarray(track.times, dtype=np.float64)
            rows = track.value_rows()
            axis = track.target.axis
            if axis == "w":
                raise ConflictingTracksError(f"{track.path!r}: axis 'w' is not valid for {path}")

            if axis is not None:
                decomposed = {axis: rows[:, 0]}
            elif track.value_type is ValueType.VECTOR3:
                decomposed = {a: rows[:, i] for i, a in enumerate(AXES)}
            else:
                # Scalar track without an axis applies uniformly.
                decomposed = {a: rows[:, 0] for a in AXES}

            for name, column in decomposed.items():
                previous = axes.get(name)
                if previous is not None:
                    logger.warning(
                        f"{path}: axis {name} from {track.path!r} overrides {previous.source!r}"
                    )
                axes[name] = _AxisSamples(times=times, values=column, source=track.path)
        return axes
