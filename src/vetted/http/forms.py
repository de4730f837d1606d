"""Form body parsing — URL-encoded and multipart.

URL-encoded bodies use stdlib ``urllib.parse``. Multipart bodies need
``python-multipart`` (``pip install vetted[forms]``).

Uploaded files are kept apart from field values: ``Params.get_param``
only ever sees string fields, never file content.
"""

import io
import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from vetted.errors import ConfigurationError

logger = logging.getLogger("vetted.http")

FORM_CONTENT_TYPES = frozenset({"application/x-www-form-urlencoded", "multipart/form-data"})


@dataclass(frozen=True, slots=True)
class UploadFile:
    """An uploaded file from a multipart form submission."""

    filename: str
    size: int
    content: bytes = b""

    def __repr__(self) -> str:
        return f"UploadFile({self.filename!r}, {self.size} bytes)"


class FormData(Mapping[str, str]):
    """Immutable parsed form data.

    Implements ``Mapping[str, str]`` and the ``MultiValueMapping`` protocol.
    ``files`` maps field names to ``UploadFile`` objects.
    """

    __slots__ = ("_data", "_files")

    def __init__(
        self,
        data: dict[str, list[str]] | None = None,
        files: dict[str, UploadFile] | None = None,
    ) -> None:
        self._data = data or {}
        self._files = files or {}

    @property
    def files(self) -> Mapping[str, UploadFile]:
        return self._files

    def __getitem__(self, key: str) -> str:
        return self._data[key][0]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {v!r}" for k, v in self._data.items())
        return f"FormData({{{items}}})"

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key* (checkboxes, multi-selects)."""
        return list(self._data.get(key, []))


def media_type(content_type: str | None) -> str:
    """``"multipart/form-data; boundary=x"`` → ``"multipart/form-data"``."""
    return (content_type or "").split(";")[0].strip().lower()


def parse_form_data(body: bytes, content_type: str) -> FormData:
    """Parse a form body into ``FormData``.

    Raises:
        ConfigurationError: Multipart parsing is needed but
            ``python-multipart`` is not installed.
        ValueError: The content type is not a form encoding, or the
            multipart body is malformed.
    """
    kind = media_type(content_type)

    if kind == "application/x-www-form-urlencoded":
        from urllib.parse import parse_qs

        return FormData(parse_qs(body.decode("utf-8"), keep_blank_values=True))

    if kind == "multipart/form-data":
        return _parse_multipart(body, content_type)

    msg = f"Unsupported form content type: {content_type!r}"
    raise ValueError(msg)


def _parse_multipart(body: bytes, content_type: str) -> FormData:
    try:
        from python_multipart import parse_form
    except ImportError:
        msg = (
            "Multipart form parsing requires the 'python-multipart' package. "
            "Install it with: pip install vetted[forms]"
        )
        raise ConfigurationError(msg) from None

    data: dict[str, list[str]] = {}
    files: dict[str, UploadFile] = {}

    def on_field(field: Any) -> None:
        name = field.field_name.decode("utf-8")
        value = (field.value or b"").decode("utf-8", errors="replace")
        data.setdefault(name, []).append(value)

    def on_file(file: Any) -> None:
        name = file.field_name.decode("utf-8")
        file.file_object.seek(0)
        content = file.file_object.read()
        file.close()
        filename = (file.file_name or b"").decode("utf-8", errors="replace")
        files[name] = UploadFile(filename=filename, size=len(content), content=content)

    headers = {
        "Content-Type": content_type.encode("latin-1"),
        "Content-Length": str(len(body)).encode("latin-1"),
    }
    parse_form(headers, io.BytesIO(body), on_field, on_file)
    logger.debug("Parsed multipart body: %d field(s), %d file(s)", len(data), len(files))
    return FormData(data, files)
