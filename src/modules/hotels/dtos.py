"""Hotel booking value type.

``HotelBooking`` is a plain immutable record exchanged with the hotel
side of the system.  It carries no behaviour and is not persisted here.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict


class HotelBooking(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    hotel_id: int
    customer_id: int
    booking_date: date | None = None
