from __future__ import annotations

import dataclasses
import json
import typing as t


@dataclasses.dataclass()
class RequestParams:
    """The basic parameters of a GraphQL request, from the querystring, form, JSON
    body, or the ``operations`` field of a multipart request.
    """

    query: str = ""
    """The operation document. An empty document is reported as a syntax error by
    the execution engine.
    """

    variables: dict[str, t.Any] = dataclasses.field(default_factory=dict)
    """Values for the operation's variables. Uploaded files are placed in here."""

    operation_name: str | None = None
    """The operation to run if the document defines more than one."""

    @classmethod
    def from_mapping(cls, data: t.Mapping[str, t.Any]) -> RequestParams:
        """Read parameters from a JSON object or a form. ``variables`` may be given
        as a JSON encoded string, which is how it is sent in a querystring or
        urlencoded form.

        :param data: Mapping with ``query``, ``variables``, and ``operationName`` keys,
            all optional.
        :raises ValueError: If a value has the wrong type or ``variables`` is not valid
            JSON.
        """
        query = data.get("query")

        if query is None:
            query = ""
        elif not isinstance(query, str):
            raise ValueError("'query' must be a string.")

        variables = data.get("variables")

        if isinstance(variables, str):
            variables = json.loads(variables) if variables else None

        if variables is None:
            variables = {}
        elif not isinstance(variables, dict):
            raise ValueError("'variables' must be an object.")

        operation_name = data.get("operationName")

        if operation_name == "":
            operation_name = None

        if operation_name is not None and not isinstance(operation_name, str):
            raise ValueError("'operationName' must be a string.")

        return cls(query=query, variables=variables, operation_name=operation_name)
