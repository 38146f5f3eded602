"""Beer DRF serializers for API output.

The serializer operates at the Interface layer (API Views).
Request bodies are validated by the Pydantic DTOs in ``dtos.py``
before they reach the Service Layer.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.beers.models import Beer


class BeerSerializer(serializers.ModelSerializer):
    """Read serializer for the Beer resource."""

    class Meta:
        model = Beer
        fields = ["id", "name", "brand", "max", "quantity", "type"]
        read_only_fields = ["id"]
