from __future__ import annotations

import random
from datetime import timedelta

from django.core.management.base import BaseCommand
from django.utils import timezone

from modules.bookings.models import Booking
from modules.customers.models import Customer


class Command(BaseCommand):
    help = "Seed database with development customers and bookings."

    def add_arguments(self, parser):
        parser.add_argument(
            "--bookings",
            type=int,
            default=2,
            help="Bookings to create per seeded customer.",
        )

    def handle(self, *args, **options):
        random.seed(42)
        self.stdout.write("Seeding development data...")

        customers = self._seed_customers()
        bookings_created = self._seed_bookings(customers, options["bookings"])

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"customers={len(customers)}, "
                f"bookings={bookings_created}"
            )
        )

    def _seed_customers(self) -> list[Customer]:
        self.stdout.write("Creating customers...")
        customers: list[Customer] = []
        seed_customers = [
            ("Ann", "ann@example.com", "01234567890"),
            ("Bob", "bob@example.com", "07700900001"),
            ("Cara-Jane", "cara@example.com", "07700900002"),
            ("Dara", "dara@example.com", "07700900003"),
            ("O'Neill", "oneill@example.com", "07700900004"),
        ]
        for name, email, phone_number in seed_customers:
            customer, _ = Customer.objects.get_or_create(
                email=email,
                defaults={"name": name, "phone_number": phone_number},
            )
            customers.append(customer)
        self.stdout.write(self.style.SUCCESS("Creating customers... Done!"))
        return customers

    def _seed_bookings(self, customers: list[Customer], per_customer: int) -> int:
        self.stdout.write("Creating bookings...")
        today = timezone.localdate()
        created = 0
        for customer in customers:
            if customer.bookings.exists():
                continue
            for _ in range(per_customer):
                Booking.objects.create(
                    customer=customer,
                    hotel_id=random.randint(1, 20),
                    booking_date=today + timedelta(days=random.randint(1, 90)),
                )
                created += 1
        self.stdout.write(self.style.SUCCESS("Creating bookings... Done!"))
        return created
