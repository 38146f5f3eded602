"""Beer domain constants.

Beer type choices and the field limits shared by the model and the
request DTOs.
"""

from django.db import models


class BeerType(models.TextChoices):
    LAGER = "LAGER", "Lager"
    MALZBIER = "MALZBIER", "Malzbier"
    WITBIER = "WITBIER", "Witbier"
    WEISS = "WEISS", "Weiss"
    ALE = "ALE", "Ale"
    IPA = "IPA", "IPA"
    STOUT = "STOUT", "Stout"


NAME_MAX_LENGTH = 200
BRAND_MAX_LENGTH = 200

# Capacity ceiling accepted when a beer is registered.
MAX_CAPACITY_LIMIT = 500

# Largest quantity accepted in a single creation or stock adjustment request.
QUANTITY_REQUEST_LIMIT = 100
