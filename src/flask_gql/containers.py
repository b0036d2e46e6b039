from __future__ import annotations

import typing as t

from .errors import NavigationError
from .paths import PathSegment
from .paths import ROOT_SEGMENT


def _describe(value: t.Any) -> str:
    if isinstance(value, dict):
        return "an object"

    if isinstance(value, list):
        return "a list"

    if value is None:
        return "null"

    return f"a {type(value).__name__} value"


def _step(container: t.Any, segment: PathSegment, path: list[PathSegment]) -> t.Any:
    """Check that ``segment`` can address ``container``, and return the container."""
    if isinstance(segment, int):
        if not isinstance(container, list):
            raise NavigationError("could not set variable") from TypeError(
                f"expected a list at index {segment} of {_format(path)}, found"
                f" {_describe(container)}"
            )

        if segment >= len(container):
            raise NavigationError("could not set variable") from IndexError(
                f"index {segment} of {_format(path)} is out of range for a list of"
                f" length {len(container)}"
            )
    elif not isinstance(container, dict):
        raise NavigationError("could not set variable") from TypeError(
            f"expected an object at '{segment}' of {_format(path)}, found"
            f" {_describe(container)}"
        )

    return container


def _format(path: list[PathSegment]) -> str:
    return "'" + ".".join([ROOT_SEGMENT, *(str(s) for s in path)]) + "'"


def place_value(
    value: t.Any, root: dict[str, t.Any], path: list[PathSegment]
) -> None:
    """Write ``value`` into the variables object at the position addressed by
    ``path``, overwriting what is there, usually a ``null`` placeholder.

    Intermediate objects and lists must already exist in the submitted variables,
    they are not created. Placing the same value at the same path again leaves the
    variables unchanged.

    :param value: The form value or file to place.
    :param root: The variables object from the operations payload.
    :param path: Segments returned by :func:`.resolve_path`.
    :raises NavigationError: If an intermediate value is missing or has the wrong
        shape for the next segment, or a list index is out of range.
    """
    cursor: t.Any = root

    for segment in path[:-1]:
        cursor = _step(cursor, segment, path)

        if isinstance(segment, str) and segment not in cursor:
            raise NavigationError("could not set variable") from LookupError(
                f"'{segment}' of {_format(path)} is not in the variables"
            )

        cursor = cursor[segment]

    last = path[-1]
    _step(cursor, last, path)
    cursor[last] = value
