"""Builtin preset tables.

Importing this package registers every builtin preset with the global
catalog.
"""

from keyforge.core.presets.builtins import (  # noqa: F401
    character,
    combined,
    easing,
    emote,
    physics,
    rotation,
    scale,
    translation,
)
