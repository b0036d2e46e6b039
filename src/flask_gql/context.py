from __future__ import annotations

import typing as t

from flask import Request

ContextProvider = t.Callable[[Request, t.Dict[str, t.Any]], t.Dict[str, t.Any]]
"""Receives the current request and the context built so far, and returns the
context to pass to the next provider. Return a new dict rather than modifying the
given one.
"""

REQUEST_CONTEXT_KEY = "flask_request"
"""The key in the context that holds the current Flask request."""


def request_context_provider(
    request: Request, context: dict[str, t.Any]
) -> dict[str, t.Any]:
    """Add the current request to the context under :data:`REQUEST_CONTEXT_KEY`.
    This always runs before any other provider.
    """
    return {**context, REQUEST_CONTEXT_KEY: request}


def get_request(context: t.Mapping[str, t.Any]) -> Request | None:
    """Get the Flask request from the context passed to a resolver as
    ``info.context``. To set a response header from a resolver, register a function
    with :func:`flask.after_this_request`.

    .. code-block:: python

        def resolve_login(parent, info, **kwargs):
            request = get_request(info.context)
            ...
    """
    return context.get(REQUEST_CONTEXT_KEY)


def run_context_providers(
    context: dict[str, t.Any],
    request: Request,
    providers: t.Iterable[ContextProvider],
) -> dict[str, t.Any]:
    """Build the context for a request by passing it through each provider in
    order. :func:`request_context_provider` is applied first.

    :param context: The initial context, usually empty.
    :param request: The current request, passed to every provider.
    :param providers: Called in order, each with the result of the previous one.
    """
    context = request_context_provider(request, context)

    for provider in providers:
        context = provider(request, context)

    return context
