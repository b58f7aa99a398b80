"""
Constants Package

Unit tables and validation limits shared across the cookbook.
"""

from .units import (
    BASE_UNITS,
    UNIT_TABLES,
    UNICODE_FRACTIONS,
)

from .validation import (
    VALID_STEP_TYPES,
    DEFAULT_STEP_TYPE,
    INGREDIENT_AMOUNT_VARIANTS,
    MAX_LENGTHS,
    RECIPE_FILE_SUFFIX,
    RECIPE_KEYS,
    STEP_KEYS,
    INGREDIENT_KEYS,
    EQUIPMENT_KEYS,
    AMOUNT_KEYS,
)

__all__ = [
    # Units
    'BASE_UNITS',
    'UNIT_TABLES',
    'UNICODE_FRACTIONS',
    # Validation
    'VALID_STEP_TYPES',
    'DEFAULT_STEP_TYPE',
    'INGREDIENT_AMOUNT_VARIANTS',
    'MAX_LENGTHS',
    'RECIPE_FILE_SUFFIX',
    'RECIPE_KEYS',
    'STEP_KEYS',
    'INGREDIENT_KEYS',
    'EQUIPMENT_KEYS',
    'AMOUNT_KEYS',
]
