"""
https://docs.pydantic.dev/latest/concepts/types/#customizing-validation-with-__get_pydantic_core_schema__

uuid_utils.UUID as a Pydantic/FastAPI type.

JSON input must be a string, Python input may already be a UUID; output is
always the canonical string. Unparseable ids fail validation (HTTP 400).
"""

from typing import Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema
from uuid_utils import UUID


def parse_uuid(value: Any) -> UUID:
    try:
        return UUID(str(value))
    except (ValueError, TypeError) as e:
        raise ValueError(f'Invalid UUID: {value}') from e


class UtilsUUID7(UUID):
    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        def validate_uuid_python(value: Any) -> UUID:
            if isinstance(value, UUID):
                return value
            return parse_uuid(value)

        # Must stay convertible to JSON schema for OpenAPI
        return core_schema.json_or_python_schema(
            json_schema=core_schema.chain_schema(
                [
                    core_schema.str_schema(),
                    core_schema.no_info_plain_validator_function(parse_uuid),
                ]
            ),
            python_schema=core_schema.no_info_plain_validator_function(validate_uuid_python),
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, _core_schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {'type': 'string', 'format': 'uuid'}
