from __future__ import annotations

import re
import typing as t

from .errors import FormatError

PathSegment = t.Union[str, int]
"""A field name in an object (``str``) or a position in a list (``int``)."""

ROOT_SEGMENT = "variables"
"""Every upload path starts with this segment, which refers to the variables object
itself and is not part of the returned path.
"""

_index_re = re.compile(r"[0-9]+")


def resolve_path(path: str) -> list[PathSegment]:
    """Parse a dot separated upload map path such as ``variables.files.0`` into
    segments relative to the variables object.

    A segment made only of decimal digits is always an index, even if the container
    it addresses is an object with numeric keys.

    :param path: The path string from the upload map.
    :raises FormatError: If the path does not start with ``variables``, does not
        address anything under it, or has an index too large to convert.
    """
    parts = path.split(".")

    if parts[0] != ROOT_SEGMENT:
        raise FormatError("could not set variable") from ValueError(
            f"path '{path}' must start with '{ROOT_SEGMENT}'"
        )

    try:
        segments: list[PathSegment] = [
            int(part) if _index_re.fullmatch(part) else part for part in parts[1:]
        ]
    except ValueError as e:
        raise FormatError("could not set variable") from e

    if not segments:
        raise FormatError("could not set variable") from ValueError(
            f"path '{path}' does not address a variable"
        )

    return segments
