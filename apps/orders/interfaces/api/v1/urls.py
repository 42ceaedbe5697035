"""
Orders API v1 URLs.
"""
from django.urls import path

from .views import (
    CartView,
    CartItemView,
    CartTotalsView,
    OrderListCreateView,
    OrderDetailView,
    OrderCancelView,
    OrderByNumberView,
    OrderPaymentView,
    OrderDeliverView,
)

urlpatterns = [
    # Cart
    path('cart/', CartView.as_view(), name='cart'),
    path('cart/items/<uuid:item_id>/', CartItemView.as_view(), name='cart-item'),
    path('cart/totals/', CartTotalsView.as_view(), name='cart-totals'),

    # Orders
    path('', OrderListCreateView.as_view(), name='order-list-create'),
    path('<uuid:order_id>/', OrderDetailView.as_view(), name='order-detail'),
    path('<uuid:order_id>/cancel/', OrderCancelView.as_view(), name='order-cancel'),
    path('<uuid:order_id>/payment/', OrderPaymentView.as_view(), name='order-payment'),
    path('<uuid:order_id>/deliver/', OrderDeliverView.as_view(), name='order-deliver'),
    path('number/<str:order_number>/', OrderByNumberView.as_view(), name='order-by-number'),
]
