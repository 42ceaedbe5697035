"""
Addresses API v1 views.
"""
from uuid import UUID

from django.db import transaction
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from ....application.dtos.address_dto import AddressCreateDTO, AddressRefDTO, AddressUpdateDTO
from ....application.use_cases import (
    CreateAddressUseCase,
    DeleteAddressUseCase,
    GetAddressUseCase,
    ListAddressesUseCase,
    SetDefaultAddressUseCase,
    UpdateAddressUseCase,
)
from ....domain.value_objects.address_type import AddressType
from ....infrastructure.repositories import DjangoAddressRepository
from ...serializers.address_serializer import (
    AddressSerializer,
    AddressCreateSerializer,
    AddressUpdateSerializer,
)


@extend_schema(tags=['Addresses'])
class AddressListCreateView(APIView):
    """Address list and create endpoint."""
    permission_classes = [IsAuthenticated]

    @extend_schema(
        responses={200: AddressSerializer(many=True)},
        summary="List my addresses",
    )
    def get(self, request):
        use_case = ListAddressesUseCase(address_repository=DjangoAddressRepository())
        result = use_case.execute(str(request.user.pk))
        return Response(AddressSerializer(result.data, many=True).data)

    @extend_schema(
        request=AddressCreateSerializer,
        responses={201: AddressSerializer},
        summary="Add an address",
        description="The first address of a user always becomes the default.",
    )
    def post(self, request):
        serializer = AddressCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = serializer.validated_data
        use_case = CreateAddressUseCase(address_repository=DjangoAddressRepository())
        dto = AddressCreateDTO(
            user_id=str(request.user.pk),
            street=data['street'],
            street2=data.get('street2', ''),
            city=data['city'],
            state=data['state'],
            postal_code=data['postal_code'],
            country=data['country'],
            type=AddressType(data['type']),
            is_default=data['is_default'],
        )
        with transaction.atomic():
            result = use_case.execute(dto)
        return Response(AddressSerializer(result.data).data, status=status.HTTP_201_CREATED)


@extend_schema(tags=['Addresses'])
class AddressDetailView(APIView):
    """Address detail endpoint."""
    permission_classes = [IsAuthenticated]

    @extend_schema(
        responses={200: AddressSerializer},
        summary="Get an address",
    )
    def get(self, request, address_id: UUID):
        use_case = GetAddressUseCase(address_repository=DjangoAddressRepository())
        result = use_case.execute(AddressRefDTO(user_id=str(request.user.pk), address_id=address_id))
        return Response(AddressSerializer(result.data).data)

    @extend_schema(
        request=AddressUpdateSerializer,
        responses={200: AddressSerializer},
        summary="Update an address",
    )
    def patch(self, request, address_id: UUID):
        serializer = AddressUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        data = serializer.validated_data
        use_case = UpdateAddressUseCase(address_repository=DjangoAddressRepository())
        dto = AddressUpdateDTO(
            user_id=str(request.user.pk),
            address_id=address_id,
            street=data.get('street'),
            street2=data.get('street2'),
            city=data.get('city'),
            state=data.get('state'),
            postal_code=data.get('postal_code'),
            country=data.get('country'),
            type=AddressType(data['type']) if 'type' in data else None,
            is_default=data.get('is_default'),
        )
        with transaction.atomic():
            result = use_case.execute(dto)
        return Response(AddressSerializer(result.data).data)

    @extend_schema(summary="Delete an address")
    def delete(self, request, address_id: UUID):
        use_case = DeleteAddressUseCase(address_repository=DjangoAddressRepository())
        with transaction.atomic():
            use_case.execute(AddressRefDTO(user_id=str(request.user.pk), address_id=address_id))
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(tags=['Addresses'])
class AddressSetDefaultView(APIView):
    """Make an address the default."""
    permission_classes = [IsAuthenticated]

    @extend_schema(
        request=None,
        responses={200: AddressSerializer},
        summary="Set default address",
    )
    def post(self, request, address_id: UUID):
        use_case = SetDefaultAddressUseCase(address_repository=DjangoAddressRepository())
        result = use_case.execute(AddressRefDTO(user_id=str(request.user.pk), address_id=address_id))
        return Response(AddressSerializer(result.data).data)
