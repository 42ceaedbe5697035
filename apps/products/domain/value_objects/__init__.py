# Value objects
from .sku import SKU
from .stock import Stock
from .dimension_unit import DimensionUnit

__all__ = ['SKU', 'Stock', 'DimensionUnit']
