from datetime import datetime
from typing import Optional

from pydantic import AwareDatetime, BaseModel, field_validator

from src.platform.types.uuid7_utils_types import UtilsUUID7


class ReservationCreateRequest(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'client_id': '01936d8f-5e73-7c4e-a9c5-123456789abc',
                'start_time': '2025-01-10T10:00:00Z',
                'end_time': '2025-01-10T11:00:00Z',
                'notes': 'Quarterly review',
            }
        },
    }

    client_id: UtilsUUID7
    start_time: AwareDatetime
    end_time: AwareDatetime
    notes: Optional[str] = None

    @field_validator('notes')
    @classmethod
    def empty_notes_as_none(cls, v: Optional[str]) -> Optional[str]:
        return v or None


class ReservationResponse(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'id': '01936d8f-6a10-7b3e-8c21-abcdef012345',
                'client_id': '01936d8f-5e73-7c4e-a9c5-123456789abc',
                'start_time': '2025-01-10T10:00:00Z',
                'end_time': '2025-01-10T11:00:00Z',
                'status': 'confirmed',
                'notes': 'Quarterly review',
                'created_at': '2025-01-09T08:12:00Z',
            }
        },
    }

    id: UtilsUUID7
    client_id: UtilsUUID7
    start_time: datetime
    end_time: datetime
    status: str
    notes: Optional[str] = None
    created_at: Optional[datetime] = None


class TimeSlotResponse(BaseModel):
    start_time: datetime
    end_time: datetime


class SlotAvailabilityResponse(BaseModel):
    start_time: datetime
    end_time: datetime
    available: bool
