"""Beer API views.

Exposes the ``BeerService`` via HTTP using a DRF ViewSet.
Request bodies are validated through the Pydantic DTOs before the
service is called.  Domain exceptions are translated into HTTP status
codes through ``DOMAIN_ERROR_STATUS``; anything not listed there falls
through to DRF's default handling.
"""

from __future__ import annotations

import structlog
from django_filters.rest_framework import DjangoFilterBackend
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.filters import OrderingFilter
from rest_framework.mixins import ListModelMixin
from rest_framework.parsers import JSONParser
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.beers.dtos import CreateBeerDTO, StockAdjustmentDTO
from modules.beers.exceptions import (
    BeerAlreadyRegistered,
    BeerNotFound,
    BeerStockExceeded,
    BeerStockInsufficient,
)
from modules.beers.filters import BeerFilter
from modules.beers.models import Beer
from modules.beers.repositories.django_repository import BeerDjangoRepository
from modules.beers.serializers import BeerSerializer
from modules.beers.services import BeerService

logger = structlog.get_logger(__name__)

DOMAIN_ERROR_STATUS: dict[type[Exception], int] = {
    BeerAlreadyRegistered: status.HTTP_400_BAD_REQUEST,
    BeerNotFound: status.HTTP_404_NOT_FOUND,
    BeerStockExceeded: status.HTTP_400_BAD_REQUEST,
    BeerStockInsufficient: status.HTTP_400_BAD_REQUEST,
}


def _format_validation_error(exc: PydanticValidationError) -> str:
    messages = []
    for error in exc.errors(include_url=False):
        field = ".".join(str(part) for part in error["loc"]) or "body"
        messages.append(f"{field}: {error['msg']}")
    return "; ".join(messages)


def _bad_request(exc: PydanticValidationError) -> Response:
    return Response(
        {"detail": _format_validation_error(exc)},
        status=status.HTTP_400_BAD_REQUEST,
    )


class BeerViewSet(ListModelMixin, GenericViewSet):
    """ViewSet for the beer stock API.

    Uses ``BeerService`` with ``BeerDjangoRepository`` (DIP).  The detail
    segment of the URL is a beer *name* for ``GET`` and a beer *id* for
    ``DELETE`` and the stock actions, hence the neutral ``lookup`` kwarg.
    """

    filterset_class = BeerFilter
    ordering_fields = ["name", "brand", "quantity", "max"]
    ordering = ["name"]
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    parser_classes = [JSONParser]
    pagination_class = None
    queryset = Beer.objects.all()
    serializer_class = BeerSerializer
    lookup_url_kwarg = "lookup"
    lookup_value_regex = "[^/]+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = BeerService(repository=BeerDjangoRepository())

    def handle_exception(self, exc: Exception) -> Response:
        status_code = DOMAIN_ERROR_STATUS.get(type(exc))
        if status_code is None:
            return super().handle_exception(exc)
        logger.warning(
            "beer.request_rejected",
            error=type(exc).__name__,
            detail=str(exc),
            status_code=status_code,
        )
        return Response({"detail": str(exc)}, status=status_code)

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def get_queryset(self):
        return self._service.list_all()

    def retrieve(self, request: Request, lookup: str | None = None) -> Response:
        """GET /api/v1/beers/{name}"""
        beer = self._service.find_by_name(lookup)
        return Response(BeerSerializer(beer).data)

    # ------------------------------------------------------------------
    # Create / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/beers"""
        try:
            dto = CreateBeerDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return _bad_request(exc)

        beer = self._service.create_beer(dto)
        return Response(BeerSerializer(beer).data, status=status.HTTP_201_CREATED)

    def destroy(self, request: Request, lookup: str | None = None) -> Response:
        """DELETE /api/v1/beers/{id}"""
        self._service.delete_by_id(lookup)
        return Response(status=status.HTTP_204_NO_CONTENT)

    # ------------------------------------------------------------------
    # Stock
    # ------------------------------------------------------------------

    @action(detail=True, methods=["patch"], url_path="increment")
    def increment(self, request: Request, lookup: str | None = None) -> Response:
        """PATCH /api/v1/beers/{id}/increment

        Accepts ``{"quantity": N}``.
        """
        try:
            dto = StockAdjustmentDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return _bad_request(exc)

        beer = self._service.increment(lookup, dto.quantity)
        return Response(BeerSerializer(beer).data)

    @action(detail=True, methods=["patch"], url_path="decrement")
    def decrement(self, request: Request, lookup: str | None = None) -> Response:
        """PATCH /api/v1/beers/{id}/decrement

        Accepts ``{"quantity": N}``.
        """
        try:
            dto = StockAdjustmentDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return _bad_request(exc)

        beer = self._service.decrement(lookup, dto.quantity)
        return Response(BeerSerializer(beer).data)
