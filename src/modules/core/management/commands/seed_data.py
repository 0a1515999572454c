from __future__ import annotations

from django.core.management.base import BaseCommand

from modules.customers.models import Customer

SEED_CUSTOMERS = [
    ("Ana Souza", "ana@example.com", 34),
    ("Bruno Lima", "bruno@example.com", 27),
    ("Carla Mendes", "carla@example.com", 45),
    ("Daniel Costa", "daniel@example.com", 19),
    ("Eduardo Alves", "eduardo@example.com", 52),
    ("Fernanda Rocha", "fernanda@example.com", 38),
    ("Gabriel Santos", "gabriel@example.com", 23),
    ("Helena Ferreira", "helena@example.com", 61),
]


class Command(BaseCommand):
    help = "Seed database with sample customers for development."

    def handle(self, *args, **options):
        self.stdout.write("Seeding development data...")
        created = self._seed_customers()
        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: customers_created={created}, "
                f"customers_total={Customer.objects.count()}"
            )
        )

    def _seed_customers(self) -> int:
        self.stdout.write("Creating customers...")
        created_count = 0
        for name, email, age in SEED_CUSTOMERS:
            _, created = Customer.objects.get_or_create(
                email=email,
                defaults={"name": name, "age": age},
            )
            created_count += int(created)
        self.stdout.write(self.style.SUCCESS("Creating customers... Done!"))
        return created_count
