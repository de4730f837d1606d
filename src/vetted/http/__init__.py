"""Request-side parameter access: query strings, form bodies, sources."""

from vetted.http.forms import FormData, UploadFile, parse_form_data
from vetted.http.params import Params, ParamSource, as_param_source
from vetted.http.query import QueryParams

__all__ = [
    "FormData",
    "ParamSource",
    "Params",
    "QueryParams",
    "UploadFile",
    "as_param_source",
    "parse_form_data",
]
