"""
Inventory Sync Service

Mirrors the ingredients and equipment of a recipe document into the
inventory tables, keyed by document UUID. Must run inside an app
context.
"""

import logging

from ..models import InventoryEquipment, InventoryIngredient, db

logger = logging.getLogger(__name__)


def _upsert(model, uuid, **fields):
    """Insert a row for uuid, or update the existing one. Returns True if created."""
    row = model.query.filter_by(uuid=uuid).first()
    created = row is None
    if created:
        row = model(uuid=uuid)
        db.session.add(row)
    for name, value in fields.items():
        setattr(row, name, value)
    return created


def sync_inventory(recipe):
    """
    Upsert every ingredient and equipment entry of a recipe.

    Args:
        recipe: The Recipe document to mirror

    Returns:
        Dict of counts: ingredients, equipment, created
    """
    recipe_uuid = str(recipe.id)
    counts = {'ingredients': 0, 'equipment': 0, 'created': 0}

    for step in recipe.steps:
        for ingredient in step.ingredients:
            if _upsert(InventoryIngredient, str(ingredient.id),
                       name=ingredient.name,
                       description=ingredient.description,
                       recipe_uuid=recipe_uuid):
                counts['created'] += 1
            counts['ingredients'] += 1
        for item in step.equipment:
            if _upsert(InventoryEquipment, str(item.id),
                       name=item.name,
                       description=item.description,
                       is_owned=item.is_owned,
                       recipe_uuid=recipe_uuid):
                counts['created'] += 1
            counts['equipment'] += 1

    db.session.commit()
    logger.info("Synced recipe %s: %d ingredients, %d equipment (%d new rows)",
                recipe_uuid, counts['ingredients'], counts['equipment'], counts['created'])
    return counts
