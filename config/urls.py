"""
Root URL configuration.
"""
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from shared.interfaces.health_views import LivenessCheckView, ReadinessCheckView

urlpatterns = [
    path('admin/', admin.site.urls),
    path('health/live/', LivenessCheckView.as_view(), name='health-live'),
    path('health/ready/', ReadinessCheckView.as_view(), name='health-ready'),
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
    path('api/v1/products/', include('apps.products.interfaces.api.urls')),
    path('api/v1/orders/', include('apps.orders.interfaces.api.urls')),
    path('api/v1/addresses/', include('apps.addresses.interfaces.api.urls')),
]
