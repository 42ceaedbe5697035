"""
Address serializers.
"""
from rest_framework import serializers

from ...domain.value_objects.address_type import AddressType

ADDRESS_TYPES = [t.value for t in AddressType]


class AddressSerializer(serializers.Serializer):
    """Serializer for address output."""
    id = serializers.UUIDField(read_only=True)
    street = serializers.CharField(read_only=True)
    street2 = serializers.CharField(read_only=True)
    city = serializers.CharField(read_only=True)
    state = serializers.CharField(read_only=True)
    postal_code = serializers.CharField(read_only=True)
    country = serializers.CharField(read_only=True)
    type = serializers.CharField(read_only=True)
    is_default = serializers.BooleanField(read_only=True)
    full_address = serializers.CharField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)


class AddressCreateSerializer(serializers.Serializer):
    """Serializer for address creation."""
    street = serializers.CharField(max_length=255)
    street2 = serializers.CharField(max_length=255, required=False, allow_blank=True, default='')
    city = serializers.CharField(max_length=100)
    state = serializers.CharField(max_length=100)
    postal_code = serializers.CharField(max_length=10)
    country = serializers.CharField(max_length=100)
    type = serializers.ChoiceField(choices=ADDRESS_TYPES, default=AddressType.SHIPPING.value)
    is_default = serializers.BooleanField(default=False)


class AddressUpdateSerializer(serializers.Serializer):
    """Serializer for partial address updates."""
    street = serializers.CharField(max_length=255, required=False)
    street2 = serializers.CharField(max_length=255, required=False, allow_blank=True)
    city = serializers.CharField(max_length=100, required=False)
    state = serializers.CharField(max_length=100, required=False)
    postal_code = serializers.CharField(max_length=10, required=False)
    country = serializers.CharField(max_length=100, required=False)
    type = serializers.ChoiceField(choices=ADDRESS_TYPES, required=False)
    is_default = serializers.BooleanField(required=False)
