"""Order API views.

Exposes ``OrderService.create_order`` over HTTP.  Domain exceptions
are not caught here: they propagate to
``modules.core.exceptions.api_exception_handler``, which renders them
into the standard error envelope.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.orders.dtos import CreateOrderDTO, OrderLineRequestDTO
from modules.orders.repositories.django_repository import OrderDjangoRepository
from modules.orders.serializers import CreateOrderSerializer, OrderSerializer
from modules.orders.services import OrderService
from modules.products.repositories.django_repository import ProductDjangoRepository


class OrderViewSet(ViewSet):
    """ViewSet for order creation.

    Uses ``OrderService`` with injected repositories (DIP); all ORM
    access goes through the service/repository layer.
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = OrderService(
            order_repository=OrderDjangoRepository(),
            customer_repository=CustomerDjangoRepository(),
            product_repository=ProductDjangoRepository(),
        )

    def create(self, request: Request) -> Response:
        """POST /api/v1/orders/"""
        create_serializer = CreateOrderSerializer(data=request.data)
        create_serializer.is_valid(raise_exception=True)

        data = create_serializer.validated_data
        dto = CreateOrderDTO(
            customer_id=str(data["customer_id"]),
            products=[
                OrderLineRequestDTO(
                    product_id=str(line["id"]),
                    quantity=line["quantity"],
                )
                for line in data["products"]
            ],
        )

        order = self._service.create_order(dto)

        out = OrderSerializer(order)
        return Response(out.data, status=status.HTTP_201_CREATED)
