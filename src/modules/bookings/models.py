"""Booking model.

A booking belongs to exactly one customer.  The foreign key is declared
with ``on_delete=CASCADE`` so removing a customer removes its bookings in
the same transaction.
"""

from __future__ import annotations

from django.db import models


class Booking(models.Model):
    customer = models.ForeignKey(
        "customers.Customer",
        on_delete=models.CASCADE,
        related_name="bookings",
    )
    hotel_id = models.PositiveIntegerField()
    booking_date = models.DateField()

    class Meta:
        db_table = "Booking"
        ordering = ["booking_date", "id"]

    def __str__(self) -> str:
        return f"Booking #{self.pk} (hotel {self.hotel_id} on {self.booking_date})"
