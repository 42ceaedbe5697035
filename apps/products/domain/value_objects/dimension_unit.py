"""
Dimension unit for variable-dimension products.
"""
from enum import Enum


class DimensionUnit(str, Enum):
    """Linear unit a cut-to-size product is measured in."""
    MILLIMETER = 'MILLIMETER'
    CENTIMETER = 'CENTIMETER'
    METER = 'METER'
    INCH = 'INCH'
    FOOT = 'FOOT'
    YARD = 'YARD'

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {
    DimensionUnit.MILLIMETER: 'mm',
    DimensionUnit.CENTIMETER: 'cm',
    DimensionUnit.METER: 'm',
    DimensionUnit.INCH: 'in',
    DimensionUnit.FOOT: 'ft',
    DimensionUnit.YARD: 'yd',
}
