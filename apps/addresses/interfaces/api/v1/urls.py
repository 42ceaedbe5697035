"""
Addresses API v1 URLs.
"""
from django.urls import path

from .views import AddressListCreateView, AddressDetailView, AddressSetDefaultView

urlpatterns = [
    path('', AddressListCreateView.as_view(), name='address-list-create'),
    path('<uuid:address_id>/', AddressDetailView.as_view(), name='address-detail'),
    path('<uuid:address_id>/default/', AddressSetDefaultView.as_view(), name='address-set-default'),
]
