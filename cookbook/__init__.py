"""
Cookbook

Recipe documents with exact quantities and unit conversion, stored as
human-editable TOML files.
"""

from .errors import (
    CookbookError,
    MalformedRational,
    DivisionByZero,
    UnknownUnit,
    CategoryMismatch,
    ValidationError,
    ParseError,
    ArithmeticOverflow,
)
from .services import Rational, Category, Unit, UnitCatalog, get_catalog
from .models import Quantity, Precision, Recipe, Step, StepType, Ingredient, Equipment
from .services.serialization import (
    parse_recipe,
    serialize_recipe,
    load_recipe,
    save_recipe,
    load_recipes_from_directory,
    compile_tag_list,
)

__version__ = '0.1.0'
