"""
Catalog persistence on the Django ORM.
"""
from decimal import Decimal
from typing import Any, Dict, List, Optional
from uuid import UUID

from django.db.models import Q

from ...domain.entities.product import Product
from ...domain.repositories.product_repository import ProductRepository
from ...domain.value_objects.dimension_unit import DimensionUnit
from ...domain.value_objects.sku import SKU
from ...domain.value_objects.stock import Stock
from ..models.product_model import ProductModel


def _columns(product: Product) -> Dict[str, Any]:
    # tax_amount and price are derived; they are stored so the catalog can be filtered by price.
    return {
        'name': product.name,
        'description': product.description,
        'brand': product.brand,
        'sku': str(product.sku),
        'category_id': product.category_id,
        'base_amount': product.base_amount,
        'tax_rate': product.tax_rate,
        'tax_amount': product.tax_amount,
        'price': product.price,
        'currency': product.currency,
        'stock_quantity': product.stock.quantity,
        'is_active': product.is_active,
        'is_variable_dimension': product.is_variable_dimension,
        'fixed_height': product.fixed_height,
        'variable_dimension_rate': product.variable_dimension_rate,
        'max_length': product.max_length,
        'dimension_unit': product.dimension_unit.value if product.dimension_unit else '',
        'images': list(product.images),
    }


def _hydrate(row: ProductModel) -> Product:
    unit = row.dimension_unit
    return Product(
        id=row.id,
        created_at=row.created_at,
        updated_at=row.updated_at,
        name=row.name,
        description=row.description,
        brand=row.brand,
        sku=SKU(row.sku),
        category_id=row.category_id,
        base_amount=Decimal(str(row.base_amount)),
        tax_rate=Decimal(str(row.tax_rate)),
        currency=row.currency,
        stock=Stock(row.stock_quantity),
        is_active=row.is_active,
        is_variable_dimension=row.is_variable_dimension,
        fixed_height=row.fixed_height,
        variable_dimension_rate=row.variable_dimension_rate,
        max_length=row.max_length,
        dimension_unit=DimensionUnit(unit) if unit else None,
        images=list(row.images or []),
    )


class DjangoProductRepository(ProductRepository):

    def save(self, product: Product) -> Product:
        row, _ = ProductModel.objects.update_or_create(id=product.id, defaults=_columns(product))
        return _hydrate(row)

    def find_by_id(self, product_id: UUID) -> Optional[Product]:
        row = ProductModel.objects.filter(id=product_id).first()
        return _hydrate(row) if row else None

    def find_all(
        self,
        category_id: Optional[UUID] = None,
        is_active: bool = True,
        offset: int = 0,
        limit: int = 20,
    ) -> List[Product]:
        rows = ProductModel.objects.filter(is_active=is_active)
        if category_id:
            rows = rows.filter(category_id=category_id)
        return [_hydrate(row) for row in rows.order_by('-created_at')[offset:offset + limit]]

    def find_recommendation_candidates(
        self,
        category_id: UUID,
        brand: str,
        min_price: Decimal,
        max_price: Decimal,
    ) -> List[Product]:
        related = Q(category_id=category_id) | Q(price__range=(min_price, max_price))
        if brand:
            related |= Q(brand=brand)
        rows = ProductModel.objects.filter(related, is_active=True, stock_quantity__gt=0)
        return [_hydrate(row) for row in rows.order_by('created_at')]
