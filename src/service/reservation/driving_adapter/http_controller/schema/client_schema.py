from datetime import datetime

from pydantic import BaseModel, Field

from src.platform.types.uuid7_utils_types import UtilsUUID7


class ClientCreateRequest(BaseModel):
    model_config = {
        'json_schema_extra': {'example': {'name': 'Ada Lovelace', 'email': 'ada@example.com'}},
    }

    name: str = Field(min_length=1)
    email: str = Field(min_length=1)


class ClientResponse(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'id': '01936d8f-5e73-7c4e-a9c5-123456789abc',  # UUID7
                'name': 'Ada Lovelace',
                'email': 'ada@example.com',
                'created_at': '2025-01-10T10:30:00Z',
            }
        },
    }

    id: UtilsUUID7
    name: str
    email: str
    created_at: datetime
