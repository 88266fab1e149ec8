"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.reservation.driven_adapter.model.client_model import ClientModel
from src.service.reservation.driven_adapter.model.reservation_model import ReservationModel

__all__ = [
    'ClientModel',
    'ReservationModel',
]
