from .containers import place_value
from .context import ContextProvider
from .context import get_request
from .context import REQUEST_CONTEXT_KEY
from .context import request_context_provider
from .context import run_context_providers
from .errors import FormatError
from .errors import GraphQLRequestError
from .errors import NavigationError
from .errors import UploadError
from .extension import GraphQLApp
from .params import RequestParams
from .paths import resolve_path
from .scalars import Upload
from .uploads import assemble_operations
from .uploads import interpret_map
from .uploads import MultipartForm

__version__ = "1.0.0"

__all__ = [
    "place_value",
    "ContextProvider",
    "get_request",
    "REQUEST_CONTEXT_KEY",
    "request_context_provider",
    "run_context_providers",
    "FormatError",
    "GraphQLRequestError",
    "NavigationError",
    "UploadError",
    "GraphQLApp",
    "RequestParams",
    "resolve_path",
    "Upload",
    "assemble_operations",
    "interpret_map",
    "MultipartForm",
]
