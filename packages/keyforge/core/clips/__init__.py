"""Clip assembly from presets."""

from keyforge.core.clips.assembler import apply_easing, build_clip, generate_clip

__all__ = ["apply_easing", "build_clip", "generate_clip"]
