from __future__ import annotations

from django.core.management.base import BaseCommand
from django.db import transaction

from modules.beers.constants import BeerType
from modules.beers.models import Beer

# (name, brand, max, quantity, type)
CATALOG: list[tuple[str, str, int, int, str]] = [
    ("Brahma", "Ambev", 50, 10, BeerType.LAGER),
    ("Skol", "Ambev", 100, 40, BeerType.LAGER),
    ("Malzbier Brahma", "Ambev", 30, 5, BeerType.MALZBIER),
    ("Hoegaarden", "AB InBev", 40, 12, BeerType.WITBIER),
    ("Erdinger Weissbier", "Erdinger", 60, 20, BeerType.WEISS),
    ("Bass Pale Ale", "Bass Brewers", 25, 8, BeerType.ALE),
    ("Colorado Indica", "Colorado", 80, 30, BeerType.IPA),
    ("Guinness Draught", "Guinness", 45, 15, BeerType.STOUT),
]


class Command(BaseCommand):
    help = "Seed database with a sample beer catalog."

    def handle(self, *args, **options):
        self.stdout.write("Seeding beers...")

        created = self._seed_beers()

        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: beers_created={created}, "
                f"beers_total={Beer.objects.count()}"
            )
        )

    @transaction.atomic
    def _seed_beers(self) -> int:
        created = 0
        for name, brand, max_capacity, quantity, beer_type in CATALOG:
            _, was_created = Beer.objects.get_or_create(
                name=name,
                defaults={
                    "brand": brand,
                    "max": max_capacity,
                    "quantity": quantity,
                    "type": beer_type,
                },
            )
            created += int(was_created)
        return created
