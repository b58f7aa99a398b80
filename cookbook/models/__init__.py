"""
Models Package

Exports the recipe document model, quantities, and the database
instance with the inventory tables.
"""

from .base import db

from .quantity import Quantity, Precision
from .entity import Entity, new_id, coerce_id
from .equipment import Equipment
from .ingredient import Ingredient
from .step import Step, StepType
from .recipe import Recipe
from .inventory import InventoryIngredient, InventoryEquipment

__all__ = [
    'db',
    'Quantity',
    'Precision',
    'Entity',
    'new_id',
    'coerce_id',
    'Equipment',
    'Ingredient',
    'Step',
    'StepType',
    'Recipe',
    'InventoryIngredient',
    'InventoryEquipment',
]
