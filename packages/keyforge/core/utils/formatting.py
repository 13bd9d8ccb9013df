import re

_UNSAFE_FILENAME_CHARS = re.compile(r"[^a-zA-Z0-9_-]")


def sanitize_filename(name: str, replacement_char: str = "_") -> str:
    """Replace every character outside ``[A-Za-z0-9_-]`` with ``replacement_char``.

    Unlike slug helpers this keeps a one-to-one character mapping, so
    ``"Y-axis rotation"`` becomes ``"Y-axis_rotation"``.
    """
    return _UNSAFE_FILENAME_CHARS.sub(replacement_char, name)
