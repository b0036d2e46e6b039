from __future__ import annotations

import typing as t
from pathlib import Path

from flask import Blueprint
from flask import current_app
from flask import Flask
from flask import send_file
from flask import url_for
from graphql import GraphQLArgument
from graphql import GraphQLField
from graphql import GraphQLInt
from graphql import GraphQLList
from graphql import GraphQLNonNull
from graphql import GraphQLObjectType
from graphql import GraphQLResolveInfo
from graphql import GraphQLSchema
from graphql import GraphQLString
from werkzeug import Response
from werkzeug.datastructures import FileStorage

from flask_gql import GraphQLApp
from flask_gql import Upload


class Document:
    def __init__(self, id: int, title: str) -> None:
        self.id = id
        self.title = title
        self.filename: str | None = None
        """The original filename provided when uploading."""
        self.uploaded_by: str | None = None

    def save_file(self, file: FileStorage) -> None:
        """Given a file object from the variables, store the provided filename and
        save the file to a set location and name.
        """
        self.filename = file.filename
        file.save(self.file_path)

    @property
    def file_path(self) -> Path:
        """The path to the file in the instance folder."""
        return (Path(current_app.instance_path) / "document") / f"{self.id}_file"

    @property
    def file_url(self) -> str:
        """The URL that downloads this document's file."""
        return url_for("document.download", id=self.id)


documents: dict[int, Document] = {}

document_object = GraphQLObjectType(
    "Document",
    fields={
        "id": GraphQLField(GraphQLNonNull(GraphQLInt)),
        "title": GraphQLField(GraphQLNonNull(GraphQLString)),
        "filename": GraphQLField(GraphQLString),
        "file_url": GraphQLField(GraphQLNonNull(GraphQLString)),
        "uploaded_by": GraphQLField(GraphQLString),
    },
)


def resolve_document_create(
    parent: t.Any, info: GraphQLResolveInfo, title: str, file: FileStorage
) -> Document:
    """Create the document and save the file."""
    doc = Document(len(documents) + 1, title)
    doc.save_file(file)
    doc.uploaded_by = info.context["user"]
    documents[doc.id] = doc
    return doc


def resolve_document_attach(
    parent: t.Any, info: GraphQLResolveInfo, files: list[FileStorage]
) -> list[Document]:
    """Create one document for each file, titled with the filename."""
    return [
        resolve_document_create(parent, info, title=f.filename or "", file=f)
        for f in files
    ]


schema = GraphQLSchema(
    query=GraphQLObjectType(
        "Query",
        fields={
            "documents": GraphQLField(
                GraphQLList(document_object),
                resolve=lambda parent, info: list(documents.values()),
            )
        },
    ),
    mutation=GraphQLObjectType(
        "Mutation",
        fields={
            "document_create": GraphQLField(
                document_object,
                args={
                    "title": GraphQLArgument(GraphQLNonNull(GraphQLString)),
                    "file": GraphQLArgument(GraphQLNonNull(Upload)),
                },
                resolve=resolve_document_create,
            ),
            "document_attach": GraphQLField(
                GraphQLList(document_object),
                args={"files": GraphQLArgument(GraphQLList(GraphQLNonNull(Upload)))},
                resolve=resolve_document_attach,
            ),
        },
    ),
)


def add_user(request: t.Any, context: dict[str, t.Any]) -> dict[str, t.Any]:
    """Identify who uploaded the file from a request header."""
    return {**context, "user": request.headers.get("X-User", "anonymous")}


gql = GraphQLApp(schema, add_user)

bp = Blueprint("document", __name__, url_prefix="/document")


@bp.route("/download/<int:id>")
def download(id: int) -> Response:
    doc = documents[id]
    return send_file(doc.file_path, download_name=doc.filename, as_attachment=True)


def create_app() -> Flask:
    app = Flask(__name__)
    # Create the instance folder and document folder for saving files.
    (Path(app.instance_path) / "document").mkdir(parents=True, exist_ok=True)
    gql.init_app(app)
    app.register_blueprint(bp)
    return app
