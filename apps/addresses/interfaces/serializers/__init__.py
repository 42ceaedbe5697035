# Serializers
from .address_serializer import AddressSerializer, AddressCreateSerializer, AddressUpdateSerializer

__all__ = ['AddressSerializer', 'AddressCreateSerializer', 'AddressUpdateSerializer']
