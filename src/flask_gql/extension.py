from __future__ import annotations

import typing as t

import graphql
from flask import abort
from flask import Flask
from flask import jsonify
from flask import request
from flask import Request
from flask.typing import ResponseReturnValue
from werkzeug.exceptions import BadRequest

from .context import ContextProvider
from .context import run_context_providers
from .errors import graphql_error_reply
from .errors import GraphQLRequestError
from .logging import logger
from .params import RequestParams
from .schema import execute
from .schema import with_upload_type
from .uploads import assemble_operations
from .uploads import MultipartForm


def _request_data(r: Request) -> t.Any:
    if r.method == "GET":
        return r.args

    if r.is_json:
        return r.get_json()

    if r.form:
        return r.form

    return r.args


def bind_params(r: Request) -> RequestParams:
    """Read the basic request parameters from the querystring for GET, otherwise from
    the JSON body or the form.

    :raises InternalServerError: If the body is not valid JSON or a parameter has the
        wrong type.
    """
    try:
        data = _request_data(r)

        if not isinstance(data, t.Mapping):
            raise ValueError("The request body must be an object.")

        return RequestParams.from_mapping(data)
    except (BadRequest, ValueError, RecursionError) as e:
        logger.error("Could not read GraphQL request parameters: %s", e)
        abort(500, description=str(e))


class GraphQLApp:
    """Serve a GraphQL-Core schema from Flask, with support for the GraphQL multipart
    request convention for file uploads.

    .. code-block:: python

        gql = GraphQLApp(schema, add_user)
        gql.init_app(app)

        # or register views directly, with extra context providers
        app.add_url_rule(
            "/admin/graphql",
            endpoint="admin_graphql",
            view_func=gql.view(add_admin),
            methods=["GET", "POST"],
        )

    :param schema: The schema to execute. The :data:`.Upload` scalar is added to it if
        it doesn't define an ``Upload`` type.
    :param context_providers: Build the context passed to resolvers as
        ``info.context``. Called in order for every request, after the request itself
        has been added.
    """

    def __init__(
        self, schema: graphql.GraphQLSchema, *context_providers: ContextProvider
    ) -> None:
        self.schema: graphql.GraphQLSchema = with_upload_type(schema)
        """The schema to execute, including the ``Upload`` type."""

        self.context_providers: list[ContextProvider] = list(context_providers)
        """Context providers used by every view. Providers passed to :meth:`view` run
        after these.
        """

    def add_context_provider(self, provider: ContextProvider) -> None:
        """Add a context provider used by every view. Must be called before the app
        starts handling requests.
        """
        self.context_providers.append(provider)

    def init_app(self, app: Flask) -> None:
        """Register the default GraphQL view at the ``GRAPHQL_URL`` config, which
        defaults to ``/graphql``, with the ``graphql`` endpoint name. Sets the
        library's log level from the ``GRAPHQL_LOG_LEVEL`` config.
        """
        app.config.setdefault("GRAPHQL_URL", "/graphql")
        app.config.setdefault("GRAPHQL_LOG_LEVEL", "ERROR")
        logger.setLevel(app.config["GRAPHQL_LOG_LEVEL"])
        app.extensions["flask_gql"] = self
        app.add_url_rule(
            app.config["GRAPHQL_URL"],
            endpoint="graphql",
            view_func=self.view(),
            methods=["GET", "POST"],
        )

    def view(
        self, *context_providers: ContextProvider
    ) -> t.Callable[[], ResponseReturnValue]:
        """Create a view function that executes GraphQL requests.

        :param context_providers: Run after the providers given to the app, only for
            this view.
        """

        def graphql_view() -> ResponseReturnValue:
            return self.dispatch_request(context_providers)

        return graphql_view

    def dispatch_request(
        self, context_providers: t.Sequence[ContextProvider] = ()
    ) -> ResponseReturnValue:
        """Handle the current request. If it has both ``operations`` and ``map``
        form fields, the parameters are assembled from the multipart request.
        Assembly errors are returned as a GraphQL error reply with a 200 status.
        """
        params = bind_params(request)
        operations = request.form.get("operations")
        files_map = request.form.get("map")

        if operations and files_map:
            try:
                params = assemble_operations(
                    operations, files_map, MultipartForm(request.form, request.files)
                )
            except GraphQLRequestError as e:
                logger.warning("Invalid multipart GraphQL request: %s", e, exc_info=e)
                return jsonify(graphql_error_reply(e))

        context = run_context_providers(
            {},
            request._get_current_object(),  # type: ignore[attr-defined]
            [*self.context_providers, *context_providers],
        )
        result = execute(self.schema, params, context)
        return jsonify(result.formatted)
