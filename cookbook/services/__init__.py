"""
Services Package

Exact numbers, the unit catalog, document serialization and the
inventory mirror.
"""

from .rational import (
    Rational,
    fits_int64,
)

from .units import (
    Category,
    Unit,
    UnitCatalog,
    get_catalog,
)

__all__ = [
    # Rational
    'Rational',
    'fits_int64',
    # Units
    'Category',
    'Unit',
    'UnitCatalog',
    'get_catalog',
]
