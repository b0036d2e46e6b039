from __future__ import annotations

import typing as t

import graphql

from .params import RequestParams
from .scalars import Upload


def with_upload_type(schema: graphql.GraphQLSchema) -> graphql.GraphQLSchema:
    """Return a schema that includes the :data:`.Upload` scalar. If the schema already
    has a type named ``Upload``, either this one or a custom one, it is returned
    unchanged. Otherwise a new schema is created from the same definitions.

    :param schema: The GraphQL-Core schema to serve.
    """
    if schema.get_type(Upload.name) is not None:
        return schema

    kwargs = schema.to_kwargs()
    kwargs["types"] = (*(kwargs["types"] or ()), Upload)
    return graphql.GraphQLSchema(**kwargs)


def execute(
    schema: graphql.GraphQLSchema,
    params: RequestParams,
    context: t.Any = None,
) -> graphql.ExecutionResult:
    """Execute a GraphQL operation with :func:`graphql.graphql_sync`.

    :param schema: The schema to execute against.
    :param params: The query, variables, and operation name from the request.
    :param context: Passed to resolvers as ``info.context``.
    """
    return graphql.graphql_sync(
        schema,
        source=params.query,
        context_value=context,
        variable_values=params.variables,
        operation_name=params.operation_name,
    )
