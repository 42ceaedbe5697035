"""
Addresses API URLs.
"""
from django.urls import path, include

urlpatterns = [
    path('', include('apps.addresses.interfaces.api.v1.urls')),
]
