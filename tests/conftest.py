from __future__ import annotations

import typing as t

import graphql
import pytest
from flask import after_this_request
from flask import Flask
from flask import Response
from graphql import GraphQLArgument
from graphql import GraphQLBoolean
from graphql import GraphQLField
from graphql import GraphQLInputField
from graphql import GraphQLInputObjectType
from graphql import GraphQLInt
from graphql import GraphQLList
from graphql import GraphQLNonNull
from graphql import GraphQLObjectType
from graphql import GraphQLResolveInfo
from graphql import GraphQLSchema
from graphql import GraphQLString
from werkzeug.datastructures import FileStorage

from flask_gql import get_request
from flask_gql import GraphQLApp
from flask_gql import Upload


def resolve_size(parent: FileStorage, info: GraphQLResolveInfo) -> int:
    data = parent.read()
    parent.seek(0)
    return len(data)


file_object = GraphQLObjectType(
    "File",
    fields={
        "filename": GraphQLField(GraphQLString),
        "size": GraphQLField(GraphQLInt, resolve=resolve_size),
    },
)


def resolve_set_header(
    parent: t.Any, info: GraphQLResolveInfo, name: str, value: str
) -> bool:
    @after_this_request
    def set_header(response: Response) -> Response:
        response.headers[name] = value
        return response

    return True


query = GraphQLObjectType(
    "Query",
    fields={
        "hello": GraphQLField(GraphQLString, resolve=lambda parent, info: "world"),
        "double": GraphQLField(
            GraphQLInt,
            args={"value": GraphQLArgument(GraphQLInt)},
            resolve=lambda parent, info, value: value * 2,
        ),
        "hasRequest": GraphQLField(
            GraphQLBoolean,
            resolve=lambda parent, info: get_request(info.context) is not None,
        ),
        "context": GraphQLField(
            GraphQLString,
            args={"key": GraphQLArgument(GraphQLNonNull(GraphQLString))},
            resolve=lambda parent, info, key: info.context.get(key),
        ),
        "header": GraphQLField(
            GraphQLString,
            args={"name": GraphQLArgument(GraphQLNonNull(GraphQLString))},
            resolve=lambda parent, info, name: get_request(info.context).headers.get(
                name
            ),
        ),
    },
)

document_input = GraphQLInputObjectType(
    "DocumentInput",
    fields={
        "title": GraphQLInputField(GraphQLString),
        "attachments": GraphQLInputField(GraphQLList(Upload)),
    },
)

mutation = GraphQLObjectType(
    "Mutation",
    fields={
        "singleUpload": GraphQLField(
            file_object,
            args={"file": GraphQLArgument(Upload)},
            resolve=lambda parent, info, file: file,
        ),
        "multiUpload": GraphQLField(
            GraphQLList(file_object),
            args={"files": GraphQLArgument(GraphQLList(Upload))},
            resolve=lambda parent, info, files: files,
        ),
        "singleFileAndValue": GraphQLField(
            GraphQLObjectType(
                "FileAndValue",
                fields={
                    "file": GraphQLField(file_object),
                    "value": GraphQLField(GraphQLInt),
                },
            ),
            args={
                "file": GraphQLArgument(Upload),
                "value": GraphQLArgument(GraphQLInt),
            },
            resolve=lambda parent, info, **kwargs: kwargs,
        ),
        "sameFile": GraphQLField(
            GraphQLBoolean,
            args={"a": GraphQLArgument(Upload), "b": GraphQLArgument(Upload)},
            resolve=lambda parent, info, a, b: a is b,
        ),
        "createDocument": GraphQLField(
            GraphQLList(file_object),
            args={"input": GraphQLArgument(GraphQLNonNull(document_input))},
            resolve=lambda parent, info, input: input["attachments"],
        ),
        "setHeader": GraphQLField(
            GraphQLBoolean,
            args={
                "name": GraphQLArgument(GraphQLNonNull(GraphQLString)),
                "value": GraphQLArgument(GraphQLNonNull(GraphQLString)),
            },
            resolve=resolve_set_header,
        ),
    },
)

schema = GraphQLSchema(query=query, mutation=mutation)


def add_value(request: t.Any, context: dict[str, t.Any]) -> dict[str, t.Any]:
    return {**context, "value": "app"}


@pytest.fixture
def gql() -> GraphQLApp:
    return GraphQLApp(schema, add_value)


@pytest.fixture
def app(gql: GraphQLApp) -> Flask:
    app = Flask(__name__)
    app.testing = True
    gql.init_app(app)
    return app


@pytest.fixture
def client(app: Flask) -> t.Any:
    return app.test_client()


@pytest.fixture
def simple_schema() -> graphql.GraphQLSchema:
    """A schema that doesn't reference the Upload scalar."""
    return GraphQLSchema(
        query=GraphQLObjectType(
            "Query",
            fields={
                "hello": GraphQLField(GraphQLString, resolve=lambda p, i: "world")
            },
        )
    )
