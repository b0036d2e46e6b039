"""Assemble a request sent with the GraphQL multipart request convention,
https://github.com/jaydenseric/graphql-multipart-request-spec.

The client sends an ``operations`` field with the usual JSON request body, using
``null`` placeholders for each upload, a ``map`` field associating each other form
field with the variable paths it fills, and the form fields themselves.
"""
from __future__ import annotations

import dataclasses
import json
import typing as t

from .containers import place_value
from .errors import FormatError
from .errors import UploadError
from .logging import logger
from .params import RequestParams
from .paths import resolve_path


class MultipartForm:
    """Access to the submitted form values and files. With Flask, pass
    ``request.form`` and ``request.files``.

    :param values: Maps field names to plain text values.
    :param files: Maps field names to uploaded files.
    """

    def __init__(
        self, values: t.Mapping[str, str], files: t.Mapping[str, t.Any]
    ) -> None:
        self.values = values
        self.files = files

    def get_value(self, name: str) -> str | None:
        return self.values.get(name)

    def get_file(self, name: str) -> t.Any | None:
        return self.files.get(name)


@dataclasses.dataclass()
class Assignment:
    """A form value or file and every variable path it is placed at."""

    name: str
    """The form field name used as the key in the map."""

    value: t.Any
    """The plain text value, or the file object."""

    paths: list[str]
    """Paths from the map, in the order given. A file may be used more than once."""


def _load_map(files_map: str) -> dict[str, list[str]]:
    try:
        data = json.loads(files_map)
    except (ValueError, RecursionError) as e:
        raise FormatError("invalid map string") from e

    if not isinstance(data, dict) or not all(
        isinstance(paths, list) and all(isinstance(path, str) for path in paths)
        for paths in data.values()
    ):
        raise FormatError("invalid map string") from ValueError(
            "map must be an object of field names to lists of paths"
        )

    return data


def interpret_map(
    files_map: str, form: MultipartForm
) -> tuple[list[Assignment], list[Assignment]]:
    """Parse the ``map`` field and look up each field it names in the submitted
    form. A field with a plain text value is a variable, otherwise it must be a
    file.

    :param files_map: The JSON encoded map of field names to lists of paths.
    :param form: The submitted form values and files.
    :return: The plain value assignments and the file assignments.
    :raises FormatError: If the map is not valid JSON or has the wrong shape.
    :raises UploadError: If a field in the map was not submitted.
    """
    values: list[Assignment] = []
    files: list[Assignment] = []

    for name, paths in _load_map(files_map).items():
        value = form.get_value(name)

        if value is not None:
            values.append(Assignment(name, value, paths))
            continue

        file = form.get_file(name)

        if file is None:
            raise UploadError("invalid file upload") from LookupError(
                f"'{name}' was not found in the submitted form"
            )

        files.append(Assignment(name, file, paths))

    return values, files


def assemble_operations(
    operations: str, files_map: str, form: MultipartForm
) -> RequestParams:
    """Build the request parameters from a multipart request, placing each mapped
    form value and file in the variables.

    The map is checked against the form before anything is placed. If any step
    fails, the partially filled variables are discarded with the error.

    :param operations: The JSON encoded request parameters.
    :param files_map: The JSON encoded map of field names to lists of paths.
    :param form: The submitted form values and files.
    :raises FormatError: If ``operations``, ``map``, or a path is malformed.
    :raises UploadError: If a field in the map was not submitted.
    :raises NavigationError: If a path does not match the variables.
    """
    try:
        data = json.loads(operations)

        if not isinstance(data, dict):
            raise ValueError("operations must be a JSON object")

        params = RequestParams.from_mapping(data)
    except (ValueError, RecursionError) as e:
        raise FormatError("invalid operations string") from e

    values, files = interpret_map(files_map, form)

    for assignment in values + files:
        for path in assignment.paths:
            place_value(assignment.value, params.variables, resolve_path(path))

    logger.debug(
        "Placed %d form values and %d files in the variables.", len(values), len(files)
    )
    return params
