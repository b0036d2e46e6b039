from __future__ import annotations

import json
import typing as t

from flask.testing import FlaskClient


def post_graphql(
    client: FlaskClient,
    query: str,
    variables: dict[str, t.Any] | None = None,
    operation_name: str | None = None,
    url: str = "/graphql",
) -> dict[str, t.Any]:
    """Post a JSON GraphQL request with the test client and return the reply.
    Raise an error if the response status is not 200.
    """
    body: dict[str, t.Any] = {"query": query}

    if variables is not None:
        body["variables"] = variables

    if operation_name is not None:
        body["operationName"] = operation_name

    response = client.post(url, json=body)
    assert response.status_code == 200, response.status
    return response.get_json()


def post_upload(
    client: FlaskClient,
    operations: dict[str, t.Any],
    files_map: dict[str, list[str]],
    parts: dict[str, t.Any],
    url: str = "/graphql",
) -> dict[str, t.Any]:
    """Post a multipart GraphQL request with the test client and return the reply.

    :param operations: The request parameters, with ``None`` placeholders where files
        will be placed. Encoded as the ``operations`` field.
    :param files_map: Maps field names in ``parts`` to variable paths. Encoded as the
        ``map`` field.
    :param parts: Form fields. Files are given as ``(io.BytesIO(data), filename)``
        tuples, plain values as strings.
    """
    data = {
        "operations": json.dumps(operations),
        "map": json.dumps(files_map),
        **parts,
    }
    response = client.post(url, data=data, content_type="multipart/form-data")
    assert response.status_code == 200, response.status
    return response.get_json()


def expect_data(client: FlaskClient, query: str, **kwargs: t.Any) -> dict[str, t.Any]:
    """Call :func:`post_graphql` and return the data portion of the reply. Raise an
    error if there are any errors in the reply.
    """
    result = post_graphql(client, query, **kwargs)

    if result.get("errors"):
        raise AssertionError(result["errors"][0]["message"])

    assert result["data"] is not None
    return result["data"]


def expect_errors(
    client: FlaskClient, query: str, **kwargs: t.Any
) -> list[dict[str, t.Any]]:
    """Call :func:`post_graphql` and return the errors portion of the reply. Raise an
    error if there are no errors.
    """
    result = post_graphql(client, query, **kwargs)
    assert result.get("errors"), "Expected the reply to contain errors."
    return result["errors"]


def expect_error(client: FlaskClient, query: str, **kwargs: t.Any) -> dict[str, t.Any]:
    """Call :func:`post_graphql` and return the single error from the reply. Raise
    an error if there is not exactly one error.
    """
    result = expect_errors(client, query, **kwargs)

    if len(result) > 1:
        raise ValueError(
            "Expected query to return a single error, but it returned multiple."
        )

    return result[0]
