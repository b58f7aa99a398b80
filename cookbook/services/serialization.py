"""
Recipe Serialization Service

Reads and writes recipe documents as TOML using tomlkit.

Rationals are stored as ``[numerator, denominator]`` integer arrays and
never as decimal literals, so every value survives a round trip
exactly. Units are stored by abbreviation and resolved through the unit
catalog on load. Any id missing from a file is allocated on load and
written back by the next save.

Every failure is a CookbookError whose path names the offending part of
the document, e.g. ``steps[2].ingredients[0].Mass.unit``.
"""

import logging
import uuid
from pathlib import Path

import tomlkit
from tomlkit.exceptions import TOMLKitError

from ..constants import (
    AMOUNT_KEYS,
    DEFAULT_STEP_TYPE,
    EQUIPMENT_KEYS,
    INGREDIENT_KEYS,
    RECIPE_FILE_SUFFIX,
    RECIPE_KEYS,
    STEP_KEYS,
)
from ..errors import ArithmeticOverflow, CookbookError, MalformedRational, ParseError, ValidationError
from ..models import Equipment, Ingredient, Quantity, Recipe, Step
from ..models.entity import coerce_id
from .rational import Rational, fits_int64
from .units import Category, get_catalog

logger = logging.getLogger(__name__)

NIL_ID = uuid.UUID(int=0)

# File-format variant name -> Ingredient.amount_from_variants keyword
_VARIANT_ARGS = {'Quantity': 'count', 'Mass': 'mass', 'Volume': 'volume'}


# ============================================
# PARSING
# ============================================

def _check_table(value, path):
    if not isinstance(value, dict):
        raise ParseError(f"expected a table, got {type(value).__name__}", path=path)
    return value


def _check_keys(table, allowed, path):
    for key in table:
        if key not in allowed:
            raise ParseError(f"unexpected key {key!r}", path=path)


def _require(table, key, path=None):
    if key not in table:
        raise ParseError(f"missing required key {key!r}", path=path)
    return table[key]


def _array_of_tables(table, key):
    value = table.get(key, [])
    if not isinstance(value, list):
        raise ParseError("expected an array of tables", path=key)
    return [_check_table(item, f"{key}[{index}]") for index, item in enumerate(value)]


def _rational(value, field):
    """Build a Rational from a [n, d] array or a bare integer."""
    try:
        if isinstance(value, int) and not isinstance(value, bool):
            result = Rational(value)
        elif isinstance(value, list):
            result = Rational.from_pair(value)
            if not all(fits_int64(part) for part in value):
                raise ArithmeticOverflow(f"{value} does not fit in 64-bit numerator/denominator")
        else:
            raise MalformedRational(f"expected [numerator, denominator], got {value!r}")
        result.checked_pair()
        return result
    except CookbookError as err:
        raise err.located(field)


def _amount(value, variant, catalog):
    """Parse one ingredient amount variant into a Quantity."""
    if variant == 'Quantity' and not isinstance(value, dict):
        return Quantity(_rational(value, variant), catalog.base_unit(Category.COUNT))
    table = _check_table(value, variant)
    _check_keys(table, AMOUNT_KEYS, variant)
    amount = _rational(_require(table, 'value', variant), f"{variant}.value")
    unit = _require(table, 'unit', variant)
    try:
        unit = catalog.lookup(unit)
    except CookbookError as err:
        raise err.located(f"{variant}.unit")
    return Quantity(amount, unit)


def _ingredient(table, catalog):
    _check_keys(table, INGREDIENT_KEYS, None)
    variants = [name for name in _VARIANT_ARGS if name in table]
    if len(variants) != 1:
        found = ', '.join(variants) or 'none'
        raise ValidationError(f"exactly one of Quantity, Mass, Volume must be set (found: {found})")
    variant = variants[0]
    amount = Ingredient.amount_from_variants(
        **{_VARIANT_ARGS[variant]: _amount(table[variant], variant, catalog)}
    )
    return Ingredient(
        _require(table, 'name'),
        amount,
        description=table.get('description'),
        id=table.get('id'),
    )


def _equipment(table):
    _check_keys(table, EQUIPMENT_KEYS, None)
    return Equipment(
        _require(table, 'name'),
        is_owned=_require(table, 'is_owned'),
        description=table.get('description'),
        id=table.get('id'),
    )


def _optional_rational(table, key):
    value = table.get(key)
    return None if value is None else _rational(value, key)


def _step(table, catalog):
    _check_keys(table, STEP_KEYS, None)
    step = Step(
        _require(table, 'instructions'),
        step_type=table.get('step_type', DEFAULT_STEP_TYPE),
        id=table.get('id'),
    )
    step.set_time_needed(_optional_rational(table, 'time_needed'),
                         table.get('time_needed_unit'), catalog)
    step.set_temperature(_optional_rational(table, 'temperature'),
                         table.get('temperature_unit'), catalog)

    for index, item in enumerate(_array_of_tables(table, 'ingredients')):
        prefix = f"ingredients[{index}]"
        try:
            step.add_ingredient(_ingredient(item, catalog))
        except CookbookError as err:
            if err.path == 'ingredients':
                err.path = None
            raise err.located(prefix)

    for index, item in enumerate(_array_of_tables(table, 'equipment')):
        prefix = f"equipment[{index}]"
        try:
            step.add_equipment(_equipment(item))
        except CookbookError as err:
            if err.path == 'equipment':
                err.path = None
            raise err.located(prefix)
    return step


def recipe_from_dict(data, catalog=None):
    """
    Build a validated Recipe from plain parsed TOML data.

    Args:
        data: Mapping as produced by ``tomlkit.parse(text).unwrap()``
        catalog: Unit catalog to resolve abbreviations (default: process catalog)

    Returns:
        Recipe; ``id_generated`` is set if the data carried no id
    """
    catalog = catalog or get_catalog()
    _check_table(data, None)
    _check_keys(data, RECIPE_KEYS, None)

    # The nil UUID is a placeholder, never a real id
    recipe_id = data.get('id')
    if recipe_id is not None and coerce_id(recipe_id) == NIL_ID:
        recipe_id = None

    recipe = Recipe(
        _require(data, 'name'),
        _require(data, 'source'),
        _require(data, 'author'),
        amount_made=_rational(_require(data, 'amount_made'), 'amount_made'),
        amount_made_unit=_require(data, 'amount_made_unit'),
        description=data.get('description'),
        comments=data.get('comments'),
        tags=data.get('tags', []),
        id=recipe_id,
    )
    if recipe_id is None:
        recipe.id_generated = True
        logger.info("Recipe %r has no id, allocated %s", recipe.name, recipe.id)

    for index, table in enumerate(_array_of_tables(data, 'steps')):
        prefix = f"steps[{index}]"
        try:
            step = _step(table, catalog)
        except CookbookError as err:
            raise err.located(prefix)
        try:
            recipe.add_step(step)
        except CookbookError as err:
            err.path = prefix
            raise
    return recipe


def parse_recipe(text, catalog=None):
    """Parse TOML text into a validated Recipe."""
    try:
        data = tomlkit.parse(text).unwrap()
    except TOMLKitError as err:
        raise ParseError(f"invalid TOML: {err}") from err
    recipe = recipe_from_dict(data, catalog)
    logger.debug("Parsed recipe %s (%d steps)", recipe.id, len(recipe.steps))
    return recipe


# ============================================
# SERIALIZING
# ============================================

def _string(value):
    """Multi-line text as a TOML multi-line string where that renders it verbatim."""
    if ('\n' in value and not value.startswith('\n')
            and not any(c in value for c in '"\\\r')):
        return tomlkit.string(value, multiline=True)
    return value


def _pair(value, field):
    try:
        return list(value.checked_pair())
    except ArithmeticOverflow as err:
        raise err.located(field)


def _put_optional(table, key, value):
    if value is not None:
        table[key] = _string(value)


def _amount_item(quantity, field):
    item = tomlkit.inline_table()
    item['value'] = _pair(quantity.value, f"{field}.value")
    item['unit'] = quantity.unit.abbreviation
    return item


def _ingredient_table(ingredient, path):
    table = tomlkit.table()
    table['id'] = str(ingredient.id)
    table['name'] = ingredient.name
    _put_optional(table, 'description', ingredient.description)
    variant = ingredient.amount_variant
    amount = ingredient.amount
    if variant == 'Quantity' and amount.unit.is_base:
        table[variant] = _pair(amount.value, f"{path}.{variant}")
    else:
        table[variant] = _amount_item(amount, f"{path}.{variant}")
    return table


def _equipment_table(equipment):
    table = tomlkit.table()
    table['id'] = str(equipment.id)
    table['name'] = equipment.name
    _put_optional(table, 'description', equipment.description)
    table['is_owned'] = equipment.is_owned
    return table


def _step_table(step, path):
    table = tomlkit.table()
    table['id'] = str(step.id)
    if step.time_needed is not None:
        table['time_needed'] = _pair(step.time_needed.value, f"{path}.time_needed")
        table['time_needed_unit'] = step.time_needed_unit
    if step.temperature is not None:
        table['temperature'] = _pair(step.temperature.value, f"{path}.temperature")
        table['temperature_unit'] = step.temperature_unit
    table['instructions'] = _string(step.instructions)
    table['step_type'] = step.step_type.value
    if step.ingredients:
        ingredients = tomlkit.aot()
        for index, ingredient in enumerate(step.ingredients):
            ingredients.append(_ingredient_table(ingredient, f"{path}.ingredients[{index}]"))
        table['ingredients'] = ingredients
    if step.equipment:
        equipment = tomlkit.aot()
        for item in step.equipment:
            equipment.append(_equipment_table(item))
        table['equipment'] = equipment
    return table


def serialize_recipe(recipe):
    """
    Render a Recipe as TOML text.

    Output is deterministic: serializing the result of parsing this text
    gives back the same text.
    """
    doc = tomlkit.document()
    doc['id'] = str(recipe.id)
    doc['name'] = recipe.name
    _put_optional(doc, 'description', recipe.description)
    _put_optional(doc, 'comments', recipe.comments)
    doc['source'] = recipe.source
    doc['author'] = recipe.author
    doc['amount_made'] = _pair(recipe.amount_made, 'amount_made')
    doc['amount_made_unit'] = recipe.amount_made_unit
    doc['tags'] = list(recipe.tags)
    if recipe.steps:
        steps = tomlkit.aot()
        for index, step in enumerate(recipe.steps):
            steps.append(_step_table(step, f"steps[{index}]"))
        doc['steps'] = steps
    text = tomlkit.dumps(doc)
    logger.debug("Serialized recipe %s (%d bytes)", recipe.id, len(text))
    return text


# ============================================
# FILES AND DIRECTORIES
# ============================================

def load_recipe(path, catalog=None):
    """Load one recipe file. Errors carry the file name in their path."""
    path = Path(path)
    try:
        text = path.read_text(encoding='utf-8')
    except UnicodeDecodeError as err:
        raise ParseError(f"not valid UTF-8: {err}").in_file(path.name) from err
    try:
        return parse_recipe(text, catalog)
    except CookbookError as err:
        raise err.in_file(path.name)


def save_recipe(recipe, path):
    """Write a recipe file, persisting any id allocated on load."""
    path = Path(path)
    text = serialize_recipe(recipe)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding='utf-8')
    recipe.mark_saved()
    logger.info("Saved recipe %s to %s", recipe.id, path)
    return path


def iter_recipe_files(directory):
    """Recipe files under a directory, recursively, in sorted order."""
    return sorted(p for p in Path(directory).rglob(f"*{RECIPE_FILE_SUFFIX}") if p.is_file())


def load_recipes_from_directory(directory, catalog=None):
    """
    Load every recipe file under a directory.

    Returns:
        Dict of recipe id -> Recipe

    Raises:
        NotADirectoryError: If the path is not a directory
        CookbookError: For the first bad file, or two files sharing an id
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise NotADirectoryError(f"not a directory: {directory}")
    catalog = catalog or get_catalog()
    recipes = {}
    for path in iter_recipe_files(directory):
        recipe = load_recipe(path, catalog)
        if recipe.id in recipes:
            raise ValidationError(f"duplicate recipe id {recipe.id}", path='id').in_file(path.name)
        recipes[recipe.id] = recipe
    logger.info("Loaded %d recipes from %s", len(recipes), directory)
    return recipes


def find_recipe_file(directory, recipe_id, catalog=None):
    """
    Locate the file holding a recipe id.

    Returns:
        Tuple of (path, Recipe), or (None, None) if no file has that id
    """
    catalog = catalog or get_catalog()
    for path in iter_recipe_files(directory):
        try:
            recipe = load_recipe(path, catalog)
        except CookbookError as err:
            logger.warning("Skipping unreadable recipe file %s: %s", path, err)
            continue
        if recipe.id == recipe_id:
            return path, recipe
    return None, None


def compile_tag_list(recipes):
    """Sorted, de-duplicated tags over a collection of recipes (or a dict of them)."""
    if isinstance(recipes, dict):
        recipes = recipes.values()
    return sorted({tag for recipe in recipes for tag in recipe.tags})
