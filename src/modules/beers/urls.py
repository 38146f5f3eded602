"""Beer URL configuration."""

from __future__ import annotations

from rest_framework.routers import SimpleRouter

from modules.beers.views import BeerViewSet

router = SimpleRouter(trailing_slash=False)
router.register("beers", BeerViewSet, basename="beer")

urlpatterns = router.urls
