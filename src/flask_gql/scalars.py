from __future__ import annotations

import typing as t

import graphql

# Can't replace graphql default scalars, as they are already referenced by directives
# and introspection types. Instead, mutate them in place. Plain multipart form values
# are placed in the variables as strings, so the number and boolean scalars need to
# accept strings.


def parse_int(value: t.Any) -> t.Any:
    if isinstance(value, str):
        try:
            value = int(value)
        except ValueError:
            pass

    return value


def parse_float(value: t.Any) -> t.Any:
    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError:
            pass

    return value


def parse_boolean(value: t.Any) -> t.Any:
    if isinstance(value, str):
        v = value.lower()

        if v in {"1", "on", "true"}:
            value = True
        elif v in {"0", "off", "false"}:
            value = False

    return value


def _accept_strings(
    scalar: graphql.GraphQLScalarType, convert: t.Callable[[t.Any], t.Any]
) -> None:
    """Convert string input before the scalar's own input handling. GraphQL-Core 3.2
    coerces variables with ``parse_value``, 3.3 with ``coerce_input_value``.
    """
    original_parse_value = scalar.parse_value

    def parse_value(value: t.Any) -> t.Any:
        return original_parse_value(convert(value))

    scalar.parse_value = parse_value  # type: ignore[method-assign]
    original_coerce = getattr(scalar, "coerce_input_value", None)

    if original_coerce is not None:

        def coerce_input_value(value: t.Any, *args: t.Any, **kwargs: t.Any) -> t.Any:
            return original_coerce(convert(value), *args, **kwargs)

        scalar.coerce_input_value = coerce_input_value  # type: ignore[attr-defined]


_accept_strings(graphql.GraphQLInt, parse_int)
_accept_strings(graphql.GraphQLFloat, parse_float)
_accept_strings(graphql.GraphQLBoolean, parse_boolean)

Upload = graphql.GraphQLScalarType(
    "Upload",
    description=(
        "An uploaded file, provided alongside the GraphQL request. Should only be used"
        " as an input type."
    ),
    specified_by_url="https://github.com/jaydenseric/graphql-multipart-request-spec",
)
"""An uploaded file, provided alongside the GraphQL request. Should only be used as an
input type. See https://github.com/jaydenseric/graphql-multipart-request-spec. With
Flask, the value passed to the resolver is a
:class:`~werkzeug.datastructures.FileStorage`. The resolver is responsible for reading
or saving it.
"""
