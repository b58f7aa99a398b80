"""
Tests for mirroring recipe documents into the inventory tables.
"""

from cookbook.models import InventoryEquipment, InventoryIngredient
from cookbook.services.inventory import sync_inventory
from cookbook.services.serialization import parse_recipe


def test_sync_inserts_rows_keyed_by_document_uuid(app, bread_text):
    recipe = parse_recipe(bread_text)
    counts = sync_inventory(recipe)
    assert counts == {'ingredients': 3, 'equipment': 2, 'created': 5}

    flour = recipe.steps[0].ingredients[0]
    row = InventoryIngredient.query.filter_by(uuid=str(flour.id)).one()
    assert row.name == 'flour'
    assert row.recipe_uuid == str(recipe.id)
    assert {e.name for e in InventoryEquipment.query.all()} == {'bowl', 'oven'}


def test_sync_updates_existing_rows(app, bread_text):
    recipe = parse_recipe(bread_text)
    sync_inventory(recipe)
    bake = recipe.steps[1]
    oven = bake.equipment[0]
    recipe.update_equipment(bake.id, oven.id, is_owned=True, description='Gas')

    counts = sync_inventory(recipe)
    assert counts['created'] == 0
    assert InventoryEquipment.query.count() == 2
    row = InventoryEquipment.query.filter_by(uuid=str(oven.id)).one()
    assert row.is_owned is True
    assert row.description == 'Gas'
