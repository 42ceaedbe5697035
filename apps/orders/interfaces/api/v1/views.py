"""
Orders API v1 views.
"""
from uuid import UUID

from django.conf import settings
from django.db import transaction
from drf_spectacular.utils import extend_schema, OpenApiParameter
from rest_framework import status
from rest_framework.permissions import IsAdminUser, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.addresses.infrastructure.repositories import DjangoAddressRepository
from apps.products.infrastructure.repositories import DjangoProductRepository
from ....application.dtos import (
    AddToCartDTO,
    CancelOrderDTO,
    CartTotalsRequestDTO,
    CreateOrderDTO,
    ListOrdersDTO,
    OrderNumberRefDTO,
    OrderRefDTO,
    RecordPaymentDTO,
    RemoveCartItemDTO,
    UpdateCartItemDTO,
)
from ....application.use_cases import (
    AddToCartUseCase,
    CalculateCartTotalsUseCase,
    CancelOrderUseCase,
    ClearCartUseCase,
    CreateOrderFromCartUseCase,
    DeliverOrderUseCase,
    GetCartUseCase,
    GetOrderByNumberUseCase,
    GetOrderUseCase,
    ListOrdersUseCase,
    RecordPaymentUseCase,
    RemoveCartItemUseCase,
    UpdateCartItemUseCase,
)
from ....domain.value_objects.order_status import OrderStatus
from ....infrastructure.repositories import DjangoCartRepository, DjangoOrderRepository
from ...serializers.cart_serializer import (
    CartSerializer,
    CartItemCreateSerializer,
    CartItemUpdateSerializer,
    CartTotalsRequestSerializer,
    CartTotalsSerializer,
)
from ...serializers.order_serializer import (
    OrderSerializer,
    OrderCreateSerializer,
    OrderCancelSerializer,
    OrderPaymentSerializer,
)


def _currency() -> str:
    return getattr(settings, 'STOREFRONT_CURRENCY', 'USD')


def _user_id(request) -> str:
    return str(request.user.pk)


@extend_schema(tags=['Cart'])
class CartView(APIView):
    """Cart endpoint."""
    permission_classes = [IsAuthenticated]

    @extend_schema(
        responses={200: CartSerializer},
        summary="Get current user's cart",
    )
    def get(self, request):
        use_case = GetCartUseCase(cart_repository=DjangoCartRepository(), currency=_currency())
        result = use_case.execute(_user_id(request))
        return Response(CartSerializer(result.data).data)

    @extend_schema(
        request=CartItemCreateSerializer,
        responses={201: CartSerializer},
        summary="Add item to cart",
    )
    def post(self, request):
        serializer = CartItemCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = serializer.validated_data
        use_case = AddToCartUseCase(
            cart_repository=DjangoCartRepository(),
            product_repository=DjangoProductRepository(),
            currency=_currency(),
        )
        result = use_case.execute(
            AddToCartDTO(
                user_id=_user_id(request),
                product_id=data['product_id'],
                quantity=data['quantity'],
                custom_length=data.get('custom_length'),
            )
        )
        return Response(CartSerializer(result.data).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        responses={200: CartSerializer},
        summary="Clear cart",
    )
    def delete(self, request):
        use_case = ClearCartUseCase(cart_repository=DjangoCartRepository(), currency=_currency())
        result = use_case.execute(_user_id(request))
        return Response(CartSerializer(result.data).data)


@extend_schema(tags=['Cart'])
class CartItemView(APIView):
    """Cart item endpoint."""
    permission_classes = [IsAuthenticated]

    @extend_schema(
        request=CartItemUpdateSerializer,
        responses={200: CartSerializer},
        summary="Update cart item quantity or length",
    )
    def patch(self, request, item_id: UUID):
        serializer = CartItemUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = serializer.validated_data
        use_case = UpdateCartItemUseCase(
            cart_repository=DjangoCartRepository(),
            product_repository=DjangoProductRepository(),
            currency=_currency(),
        )
        result = use_case.execute(
            UpdateCartItemDTO(
                user_id=_user_id(request),
                item_id=item_id,
                quantity=data.get('quantity'),
                custom_length=data.get('custom_length'),
            )
        )
        return Response(CartSerializer(result.data).data)

    @extend_schema(
        responses={200: CartSerializer},
        summary="Remove item from cart",
    )
    def delete(self, request, item_id: UUID):
        use_case = RemoveCartItemUseCase(cart_repository=DjangoCartRepository(), currency=_currency())
        result = use_case.execute(RemoveCartItemDTO(user_id=_user_id(request), item_id=item_id))
        return Response(CartSerializer(result.data).data)


@extend_schema(tags=['Cart'])
class CartTotalsView(APIView):
    """Totals preview for the checkout screen."""
    permission_classes = [IsAuthenticated]

    @extend_schema(
        request=CartTotalsRequestSerializer,
        responses={200: CartTotalsSerializer},
        summary="Preview cart totals",
        description="Same computation as order creation; pass the shown total as expected_total when ordering.",
    )
    def post(self, request):
        serializer = CartTotalsRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = serializer.validated_data
        use_case = CalculateCartTotalsUseCase(
            cart_repository=DjangoCartRepository(),
            address_repository=DjangoAddressRepository(),
            currency=_currency(),
        )
        result = use_case.execute(
            CartTotalsRequestDTO(
                user_id=_user_id(request),
                address_id=data.get('address_id'),
                shipping_method=data.get('shipping_method'),
                discount_code=data.get('discount_code'),
                payment_method=data.get('payment_method'),
            )
        )
        return Response(CartTotalsSerializer(result.data).data)


@extend_schema(tags=['Orders'])
class OrderListCreateView(APIView):
    """Order list and create endpoint."""
    permission_classes = [IsAuthenticated]

    @extend_schema(
        parameters=[
            OpenApiParameter(name='status', type=str, required=False),
            OpenApiParameter(name='limit', type=int, required=False),
            OpenApiParameter(name='offset', type=int, required=False),
        ],
        responses={200: OrderSerializer(many=True)},
        summary="List user's orders",
    )
    def get(self, request):
        status_param = request.query_params.get('status')
        try:
            order_status = OrderStatus(status_param.upper()) if status_param else None
            limit = int(request.query_params.get('limit', 20))
            offset = int(request.query_params.get('offset', 0))
        except ValueError:
            return Response({'error': 'Invalid query parameter'}, status=status.HTTP_400_BAD_REQUEST)

        use_case = ListOrdersUseCase(order_repository=DjangoOrderRepository())
        result = use_case.execute(
            ListOrdersDTO(
                user_id=_user_id(request),
                status=order_status,
                offset=max(offset, 0),
                limit=min(max(limit, 1), 100),
            )
        )
        return Response(OrderSerializer(result.data, many=True).data)

    @extend_schema(
        request=OrderCreateSerializer,
        responses={201: OrderSerializer},
        summary="Create order from cart",
    )
    def post(self, request):
        serializer = OrderCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = serializer.validated_data
        use_case = CreateOrderFromCartUseCase(
            cart_repository=DjangoCartRepository(),
            order_repository=DjangoOrderRepository(),
            address_repository=DjangoAddressRepository(),
            currency=_currency(),
        )
        with transaction.atomic():
            result = use_case.execute(
                CreateOrderDTO(
                    user_id=_user_id(request),
                    billing_address_id=data['billing_address_id'],
                    shipping_address_id=data['shipping_address_id'],
                    payment_method=data['payment_method'],
                    shipping_method=data.get('shipping_method'),
                    discount_code=data.get('discount_code'),
                    customer_notes=data.get('customer_notes', ''),
                    payment_reference=data.get('payment_reference'),
                    expected_total=data.get('expected_total'),
                )
            )
        return Response(OrderSerializer(result.data).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=['Orders'])
class OrderDetailView(APIView):
    """Order detail endpoint."""
    permission_classes = [IsAuthenticated]

    @extend_schema(
        responses={200: OrderSerializer},
        summary="Get order detail",
    )
    def get(self, request, order_id: UUID):
        use_case = GetOrderUseCase(order_repository=DjangoOrderRepository())
        result = use_case.execute(OrderRefDTO(user_id=_user_id(request), order_id=order_id))
        return Response(OrderSerializer(result.data).data)


@extend_schema(tags=['Orders'])
class OrderCancelView(APIView):
    """Order cancellation endpoint."""
    permission_classes = [IsAuthenticated]

    @extend_schema(
        request=OrderCancelSerializer,
        responses={200: OrderSerializer},
        summary="Cancel order",
    )
    def post(self, request, order_id: UUID):
        serializer = OrderCancelSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        use_case = CancelOrderUseCase(order_repository=DjangoOrderRepository())
        result = use_case.execute(
            CancelOrderDTO(
                user_id=_user_id(request),
                order_id=order_id,
                reason=serializer.validated_data['reason'],
            )
        )
        return Response(OrderSerializer(result.data).data)


@extend_schema(tags=['Orders'])
class OrderByNumberView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(responses={200: OrderSerializer}, summary="Get order by order number")
    def get(self, request, order_number: str):
        use_case = GetOrderByNumberUseCase(order_repository=DjangoOrderRepository())
        result = use_case.execute(OrderNumberRefDTO(user_id=_user_id(request), order_number=order_number))
        return Response(OrderSerializer(result.data).data)


@extend_schema(tags=['Orders'])
class OrderPaymentView(APIView):
    """Record the gateway payment for an order placed before capture."""
    permission_classes = [IsAuthenticated]

    @extend_schema(
        request=OrderPaymentSerializer,
        responses={200: OrderSerializer},
        summary="Record order payment",
    )
    def post(self, request, order_id: UUID):
        serializer = OrderPaymentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        use_case = RecordPaymentUseCase(order_repository=DjangoOrderRepository())
        result = use_case.execute(
            RecordPaymentDTO(
                user_id=_user_id(request),
                order_id=order_id,
                transaction_id=serializer.validated_data['transaction_id'],
            )
        )
        return Response(OrderSerializer(result.data).data)


@extend_schema(tags=['Orders'])
class OrderDeliverView(APIView):
    """Staff-only: mark a paid order delivered."""
    permission_classes = [IsAdminUser]

    @extend_schema(request=None, responses={200: OrderSerializer}, summary="Mark order delivered")
    def post(self, request, order_id: UUID):
        result = DeliverOrderUseCase(order_repository=DjangoOrderRepository()).execute(order_id)
        return Response(OrderSerializer(result.data).data)
