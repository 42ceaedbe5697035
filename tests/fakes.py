"""
In-memory repositories and gateways for tests that do not touch the database.
"""
import copy
from typing import Callable, Dict, List, Optional, Union
from uuid import UUID

from apps.addresses.domain.entities.address import Address
from apps.addresses.domain.exceptions import AddressNotFoundError
from apps.addresses.domain.repositories.address_repository import AddressRepository
from apps.checkout.domain.ports import CartStore, OrderGateway, PaymentGateway
from apps.checkout.domain.value_objects import CaptureResult, CreatedOrder, OrderRequest, PaymentRequest
from apps.orders.domain.entities.cart import Cart
from apps.orders.domain.entities.cart_item import CartItem
from apps.orders.domain.entities.order import Order
from apps.orders.domain.repositories.cart_repository import CartRepository
from apps.orders.domain.repositories.order_repository import OrderRepository
from apps.orders.domain.value_objects.order_status import OrderStatus
from apps.products.domain.entities.category import Category
from apps.products.domain.entities.product import Product
from apps.products.domain.repositories.category_repository import CategoryRepository
from apps.products.domain.repositories.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products=()):
        self.products: Dict[UUID, Product] = {}
        for product in products:
            self.save(product)

    def save(self, product):
        self.products[product.id] = copy.deepcopy(product)
        return copy.deepcopy(product)

    def find_by_id(self, product_id):
        product = self.products.get(product_id)
        return copy.deepcopy(product) if product else None

    def find_all(self, category_id=None, is_active=True, offset=0, limit=20):
        found = [
            p for p in self.products.values()
            if p.is_active == is_active and (category_id is None or p.category_id == category_id)
        ]
        return [copy.deepcopy(p) for p in found[offset:offset + limit]]

    def find_recommendation_candidates(self, category_id, brand, min_price, max_price):
        return [
            copy.deepcopy(p) for p in self.products.values()
            if p.is_purchasable and (
                p.category_id == category_id
                or (brand and p.brand == brand)
                or min_price <= p.price <= max_price
            )
        ]


class InMemoryCategoryRepository(CategoryRepository):

    def __init__(self, categories=()):
        self.categories: Dict[UUID, Category] = {}
        for category in categories:
            self.save(category)

    def save(self, category):
        self.categories[category.id] = copy.deepcopy(category)
        return copy.deepcopy(category)

    def find_by_id(self, category_id):
        category = self.categories.get(category_id)
        return copy.deepcopy(category) if category else None

    def find_by_slug(self, slug):
        found = [c for c in self.categories.values() if c.slug == slug]
        return copy.deepcopy(found[0]) if found else None

    def find_children(self, parent_id=None, is_active=True):
        found = [
            c for c in self.categories.values()
            if c.parent_id == parent_id and c.is_active == is_active
        ]
        return [copy.deepcopy(c) for c in sorted(found, key=lambda c: (c.sort_order, c.name))]


class InMemoryCartRepository(CartRepository):

    def __init__(self):
        self.carts: Dict[UUID, Cart] = {}
        self.save_calls = 0

    def save(self, cart):
        self.save_calls += 1
        self.carts[cart.id] = copy.deepcopy(cart)
        return copy.deepcopy(cart)

    def find_by_id(self, cart_id):
        cart = self.carts.get(cart_id)
        return copy.deepcopy(cart) if cart else None

    def find_by_user_id(self, user_id):
        for cart in self.carts.values():
            if cart.user_id == str(user_id):
                return copy.deepcopy(cart)
        return None

    def delete(self, cart_id):
        return self.carts.pop(cart_id, None) is not None


def _rehydrated(order: Order) -> Order:
    """A copy as a fresh load would return it: no pending events."""
    loaded = copy.deepcopy(order)
    loaded.pull_events()
    return loaded


class InMemoryOrderRepository(OrderRepository):

    def __init__(self):
        self.orders: Dict[UUID, Order] = {}

    def save(self, order):
        self.orders[order.id] = _rehydrated(order)
        return _rehydrated(order)

    def find_by_id(self, order_id):
        order = self.orders.get(order_id)
        return copy.deepcopy(order) if order else None

    def find_for_user(self, user_id, order_id):
        order = self.orders.get(order_id)
        if order is None or order.user_id != str(user_id):
            return None
        return copy.deepcopy(order)

    def find_by_order_number(self, user_id, order_number):
        for order in self.orders.values():
            if order.user_id == str(user_id) and order.order_number.value == order_number:
                return copy.deepcopy(order)
        return None

    def find_by_user_id(self, user_id, status: Optional[OrderStatus] = None, offset=0, limit=20):
        found = [
            o for o in self.orders.values()
            if o.user_id == str(user_id) and (status is None or o.status == status)
        ]
        found.sort(key=lambda o: o.created_at, reverse=True)
        return [copy.deepcopy(o) for o in found[offset:offset + limit]]


class FailingOrderRepository(InMemoryOrderRepository):
    """Order store whose writes always fail."""

    def save(self, order):
        raise RuntimeError("database is locked")


class InMemoryAddressRepository(AddressRepository):

    def __init__(self, addresses=()):
        self.addresses: Dict[UUID, Address] = {}
        for address in addresses:
            self.save(address)

    def save(self, address):
        self.addresses[address.id] = copy.deepcopy(address)
        return copy.deepcopy(address)

    def find_by_id(self, address_id):
        address = self.addresses.get(address_id)
        return copy.deepcopy(address) if address else None

    def find_by_user_id(self, user_id):
        found = [a for a in self.addresses.values() if a.user_id == str(user_id)]
        return [copy.deepcopy(a) for a in sorted(found, key=lambda a: a.created_at)]

    def exists_for_user(self, user_id):
        return any(a.user_id == str(user_id) for a in self.addresses.values())

    def set_default(self, user_id, address_id):
        target = self.addresses.get(address_id)
        if target is None or target.user_id != str(user_id):
            raise AddressNotFoundError(str(address_id))
        for address in self.addresses.values():
            if address.user_id == str(user_id):
                address.is_default = address.id == address_id
        return copy.deepcopy(target)

    def delete(self, address_id):
        return self.addresses.pop(address_id, None) is not None

    def defaults_for(self, user_id) -> List[Address]:
        return [a for a in self.addresses.values() if a.user_id == str(user_id) and a.is_default]


class ListCartStore(CartStore):

    def __init__(self, lines: List[CartItem]):
        self._lines = list(lines)
        self.cleared = False

    def lines(self):
        return list(self._lines)

    def clear(self):
        self._lines = []
        self.cleared = True


class StubPaymentGateway(PaymentGateway):
    """Answers every capture with a fixed result, or with what ``on_capture`` returns."""

    def __init__(
        self,
        result: Optional[CaptureResult] = None,
        on_capture: Optional[Callable[[PaymentRequest], CaptureResult]] = None,
    ):
        self.result = result or CaptureResult.captured('pay_123', 'order_abc', 'sig_xyz')
        self.on_capture = on_capture
        self.requests: List[PaymentRequest] = []

    def capture(self, request):
        self.requests.append(request)
        if self.on_capture is not None:
            return self.on_capture(request)
        return self.result


class StubOrderGateway(OrderGateway):
    """Returns ``outcome`` or raises it when it is an exception."""

    def __init__(self, outcome: Union[CreatedOrder, Exception]):
        self.outcome = outcome
        self.requests: List[OrderRequest] = []

    def create_order(self, request):
        self.requests.append(request)
        if isinstance(self.outcome, Exception):
            raise self.outcome
        return self.outcome
