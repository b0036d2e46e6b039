from __future__ import annotations

import typing as t


class GraphQLRequestError(Exception):
    """Base class for errors raised while assembling a multipart GraphQL request.
    These are reported to the client as a GraphQL error reply rather than an HTTP
    error status.

    :param message: Human readable description of what failed. The underlying cause
        is attached with ``raise ... from``.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class FormatError(GraphQLRequestError):
    """The ``operations`` or ``map`` payload, or an upload path, is malformed."""


class UploadError(GraphQLRequestError):
    """The upload map references a form field that was not submitted."""


class NavigationError(GraphQLRequestError):
    """An upload path does not match the shape of the submitted variables."""


def graphql_error_reply(error: GraphQLRequestError) -> dict[str, t.Any]:
    """Build a GraphQL shaped error reply for an assembly error. The cause, if any,
    is appended to the message in parentheses.
    """
    message = error.message

    if error.__cause__ is not None:
        message = f"{message} ({error.__cause__})"

    return {"errors": [{"message": message}]}
