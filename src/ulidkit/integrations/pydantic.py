"""
Pydantic integration for Ulid.

``PydanticUlid`` is ``Annotated[Ulid, ...]`` with validation, serialization
and JSON schema attached, so models (and anything that binds parameters
through pydantic, such as FastAPI path and query parameters) can declare
ULID fields directly.

Behaviour:
    - Validation accepts a Ulid, a ULID string (case-insensitive, lenient)
      or exactly 16 bytes; decode failures surface as pydantic
      ValidationErrors carrying the decoding error's message.
    - Serialization yields the canonical string in JSON mode and the Ulid
      itself in python mode.
    - JSON schema declares ``{"type": "string", "format": "ulid"}``.

Example:
    from pydantic import BaseModel
    from ulidkit.integrations.pydantic import PydanticUlid

    class Document(BaseModel):
        id: PydanticUlid

    Document.model_validate({"id": "01CAT3X5Y5G9A62FH1FA6T9GVR"}).id.timestamp_field
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import PydanticCustomError, core_schema

from ulidkit.core.result import Err, Ok
from ulidkit.core.ulid import ULID_LENGTH, Ulid

JSON_SCHEMA_EXAMPLES = ["01ARZ3NDEKTSV4RRFFQ69G5FAV", "01BX5ZZKBKACTAV9WEVGEMMVS0"]


def _validate(value: Any) -> Ulid:
    if isinstance(value, Ulid):
        return value
    if isinstance(value, str):
        result = Ulid.parse(value)
    elif isinstance(value, (bytes, bytearray)):
        result = Ulid.try_from_bytes(value)
    else:
        raise PydanticCustomError(
            "ulid_type",
            "Input should be a ULID string or 16 bytes",
        )

    match result:
        case Ok(ulid):
            return ulid
        case Err(error):
            raise PydanticCustomError(
                "ulid_parsing",
                "Input should be a valid ULID: {reason}",
                {"reason": str(error)},
            )


def _serialize(value: Ulid, info: core_schema.SerializationInfo) -> Ulid | str:
    if info.mode_is_json():
        return str(value)
    return value


class _UlidPydanticAnnotation:
    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            _validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                _serialize, info_arg=True
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, _core_schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {
            "type": "string",
            "format": "ulid",
            "title": "ULID",
            "description": "Universally Unique Lexicographically Sortable Identifier",
            "minLength": ULID_LENGTH,
            "maxLength": ULID_LENGTH,
            "examples": list(JSON_SCHEMA_EXAMPLES),
        }


PydanticUlid = Annotated[Ulid, _UlidPydanticAnnotation]

__all__ = ["PydanticUlid", "JSON_SCHEMA_EXAMPLES"]
