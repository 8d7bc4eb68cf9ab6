"""
Payload codec: JSON serialization plus gzip compression.

Author: Yobie Benjamin
Date: 2026-02-28
"""

import gzip
import json
import zlib
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from apiport.client.exceptions import DecodeError
from apiport.client.transport.base import HttpResponse

T = TypeVar("T")

JSON_CONTENT_TYPE = "application/json"
GZIP_ENCODING = "gzip"
DEFLATE_ENCODING = "deflate"


@lru_cache(maxsize=None)
def _adapter(type_: Any) -> TypeAdapter:
    return TypeAdapter(type_)


def serialize(model: BaseModel) -> bytes:
    """Encode a model as UTF-8 JSON using its wire (PascalCase) names."""
    return model.model_dump_json(by_alias=True).encode("utf-8")


def serialize_compress(model: BaseModel) -> bytes:
    """Encode a model as JSON and gzip the result."""
    return gzip.compress(serialize(model))


def deserialize(data: bytes, type_: type[T]) -> T:
    """
    Decode JSON bytes into ``type_``.

    Args:
        data: UTF-8 JSON document
        type_: Pydantic model or any type a ``TypeAdapter`` accepts

    Raises:
        DecodeError: If the bytes are not JSON or do not match ``type_``
    """
    try:
        raw = json.loads(data.decode("utf-8")) if data else {}
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DecodeError(f"Malformed JSON payload: {e}") from e

    try:
        return _adapter(type_).validate_python(raw)
    except PydanticValidationError as e:
        raise DecodeError(
            f"Payload does not match {getattr(type_, '__name__', type_)}",
            details={"errors": e.errors(include_url=False)},
        ) from e


def decompress(data: bytes) -> bytes:
    try:
        return gzip.decompress(data)
    except (OSError, EOFError, zlib.error) as e:
        raise DecodeError(f"Malformed gzip payload: {e}") from e


def inflate(data: bytes) -> bytes:
    """Undo an HTTP ``deflate`` coding, zlib-wrapped or raw."""
    try:
        return zlib.decompress(data)
    except zlib.error:
        try:
            return zlib.decompress(data, -zlib.MAX_WBITS)
        except zlib.error as e:
            raise DecodeError(f"Malformed deflate payload: {e}") from e


def decompress_deserialize(data: bytes, type_: type[T]) -> T:
    """Inverse of :func:`serialize_compress`."""
    return deserialize(decompress(data), type_)


def content_encodings(response: HttpResponse) -> list[str]:
    encodings = response.headers.get("Content-Encoding", "")
    return [part.strip().lower() for part in encodings.split(",") if part.strip()]


def is_compressed(response: HttpResponse) -> bool:
    return GZIP_ENCODING in content_encodings(response)


def decode_content(response: HttpResponse) -> bytes:
    """
    Undo the content-codings a response declares.

    Codings are removed in reverse order of application.

    Raises:
        DecodeError: If a coding is unsupported or the body is malformed
    """
    data = response.body
    for encoding in reversed(content_encodings(response)):
        if encoding in (GZIP_ENCODING, "x-gzip"):
            data = decompress(data)
        elif encoding == DEFLATE_ENCODING:
            data = inflate(data)
        elif encoding != "identity":
            raise DecodeError(f"Unsupported content encoding: {encoding}")
    return data


def decode_response(response: HttpResponse, type_: type[T]) -> T:
    """Decode a response body, decompressing as its Content-Encoding says."""
    return deserialize(decode_content(response), type_)
