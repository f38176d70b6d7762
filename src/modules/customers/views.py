"""Customer API views.

Exposes the ``CustomerService`` via HTTP using a DRF ViewSet mounted at
``/customer``.  The service returns result variants; this module is the
single place where they (and unexpected exceptions during writes) are
translated into HTTP status codes.
"""

from __future__ import annotations

from collections.abc import Mapping

import structlog
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.parsers import JSONParser
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.customers.models import Customer
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.results import (
    DuplicateConflict,
    NotFound,
    ValidationFailed,
)
from modules.customers.serializers import CustomerSerializer
from modules.customers.services import CustomerService

logger = structlog.get_logger(__name__)

BAD_REQUEST = {"detail": "Bad Request"}


def _has_body(request: Request) -> bool:
    meta = request.META
    try:
        length = int(meta.get("CONTENT_LENGTH") or meta.get("HTTP_CONTENT_LENGTH") or 0)
    except (TypeError, ValueError):
        length = 0
    return length > 0


class CustomerViewSet(GenericViewSet):
    """ViewSet for Customer list/retrieve/create/destroy.

    Uses ``CustomerService`` with ``CustomerDjangoRepository`` (DIP).
    All ORM access goes through the service/repository layer.
    """

    queryset = Customer.objects.all()
    serializer_class = CustomerSerializer
    parser_classes = [JSONParser]
    pagination_class = None
    lookup_value_regex = "[0-9]+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = CustomerService(repository=CustomerDjangoRepository())

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    @extend_schema(
        summary="Fetch all Customers",
        description="Returns a JSON array of all stored Customer objects, ordered by name.",
    )
    def list(self, request: Request) -> Response:
        """GET /customer"""
        customers = self._service.find_all_customers()
        return Response(CustomerSerializer(customers, many=True).data)

    @extend_schema(
        summary="Fetch a Customer by id",
        responses={200: CustomerSerializer, 404: OpenApiResponse(description="Customer with id not found")},
    )
    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /customer/{pk}"""
        result = self._service.lookup_by_id(int(pk))
        if isinstance(result, NotFound):
            return Response({"detail": result.message}, status=status.HTTP_404_NOT_FOUND)
        logger.info("customer.find_by_id", customer_id=pk, customer=str(result.value))
        return Response(CustomerSerializer(result.value).data)

    @extend_schema(
        summary="Fetch a Customer by email",
        parameters=[
            OpenApiParameter("email", OpenApiTypes.STR, OpenApiParameter.PATH),
            OpenApiParameter(
                "email",
                OpenApiTypes.STR,
                OpenApiParameter.QUERY,
                required=False,
                description="Overrides the path segment when supplied.",
            ),
        ],
        responses={200: CustomerSerializer, 404: OpenApiResponse(description="Customer with email not found")},
    )
    @action(detail=False, methods=["get"], url_path=r"email/(?P<email>[^/]+)")
    def by_email(self, request: Request, email: str | None = None) -> Response:
        """GET /customer/email/{email}"""
        email = request.query_params.get("email", email)
        result = self._service.lookup_by_email(email)
        if isinstance(result, NotFound):
            return Response({"detail": result.message}, status=status.HTTP_404_NOT_FOUND)
        return Response(CustomerSerializer(result.value).data)

    # ------------------------------------------------------------------
    # Create / Destroy
    # ------------------------------------------------------------------

    @extend_schema(
        summary="Add a new Customer to the database",
        request=CustomerSerializer,
        responses={
            201: CustomerSerializer,
            400: OpenApiResponse(description="Invalid Customer supplied in request body"),
            409: OpenApiResponse(description="Customer supplied in request body conflicts with an existing Customer"),
            500: OpenApiResponse(description="An unexpected error occurred whilst processing the request"),
        },
    )
    def create(self, request: Request) -> Response:
        """POST /customer"""
        # An absent body or JSON null is rejected outright; ``{}`` is validated.
        if not _has_body(request):
            return Response(BAD_REQUEST, status=status.HTTP_400_BAD_REQUEST)
        data = request.data
        if not isinstance(data, Mapping):
            return Response(BAD_REQUEST, status=status.HTTP_400_BAD_REQUEST)

        try:
            result = self._service.register(data)
        except Exception as exc:
            logger.exception("customer.create_failed")
            return Response({"detail": str(exc)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        if isinstance(result, ValidationFailed):
            return Response(result.errors, status=status.HTTP_400_BAD_REQUEST)
        if isinstance(result, DuplicateConflict):
            return Response(result.as_errors(), status=status.HTTP_409_CONFLICT)

        customer = result.value
        logger.info("customer.create_completed", customer=str(customer))
        return Response(CustomerSerializer(customer).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        summary="Delete a Customer from the database",
        responses={
            204: OpenApiResponse(description="The customer has been successfully deleted"),
            404: OpenApiResponse(description="Customer with id not found"),
            500: OpenApiResponse(description="An unexpected error occurred whilst processing the request"),
        },
    )
    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /customer/{pk}"""
        try:
            result = self._service.remove(int(pk))
        except Exception as exc:
            logger.exception("customer.delete_failed", customer_id=pk)
            return Response({"detail": str(exc)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        if isinstance(result, NotFound):
            return Response({"detail": result.message}, status=status.HTTP_404_NOT_FOUND)
        logger.info("customer.delete_completed", customer_id=pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
