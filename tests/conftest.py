"""
Shared fixtures for cookbook tests.
"""

import pytest

from cookbook.app import create_app
from cookbook.models import Equipment, Ingredient, Quantity, Recipe, Step, db
from cookbook.services import get_catalog

BREAD_ID = '0f3b8a52-8d0e-4d8c-9a43-2f7e5d0c1a11'

BREAD_TOML = '''\
id = "0f3b8a52-8d0e-4d8c-9a43-2f7e5d0c1a11"
name = "Bread"
description = """A plain loaf.
Good with soup."""
source = "Grandma"
author = "Grandma"
amount_made = [2, 1]
amount_made_unit = "loaves"
tags = ["baking", "bread"]

[[steps]]
id = "6c1d1a8e-4b0f-4d3e-8f7a-0a9d2b3c4d01"
time_needed = [15, 1]
time_needed_unit = "min"
instructions = "Mix flour, water and eggs."
step_type = "Prep"

[[steps.ingredients]]
id = "6c1d1a8e-4b0f-4d3e-8f7a-0a9d2b3c4d02"
name = "flour"
Mass = {value = [1, 2], unit = "kg"}

[[steps.ingredients]]
id = "6c1d1a8e-4b0f-4d3e-8f7a-0a9d2b3c4d03"
name = "water"
Volume = {value = [3, 2], unit = "cup"}

[[steps.ingredients]]
id = "6c1d1a8e-4b0f-4d3e-8f7a-0a9d2b3c4d04"
name = "eggs"
Quantity = [3, 1]

[[steps.equipment]]
id = "6c1d1a8e-4b0f-4d3e-8f7a-0a9d2b3c4d05"
name = "bowl"
is_owned = true

[[steps]]
id = "6c1d1a8e-4b0f-4d3e-8f7a-0a9d2b3c4d06"
time_needed = [45, 1]
time_needed_unit = "min"
temperature = [2001, 5]
temperature_unit = "°C"
instructions = "Bake."
step_type = "Cook"

[[steps.equipment]]
id = "6c1d1a8e-4b0f-4d3e-8f7a-0a9d2b3c4d07"
name = "oven"
is_owned = false
'''


@pytest.fixture
def catalog():
    return get_catalog()


@pytest.fixture
def bread_text():
    return BREAD_TOML


@pytest.fixture
def recipe():
    """A small recipe built through the model API."""
    prep = Step(
        'Cream the butter and sugar.',
        step_type='Prep',
        time_needed=Quantity(10, 'min'),
        ingredients=[
            Ingredient('butter', Quantity(1, 'cup')),
            Ingredient('sugar', Quantity(200, 'g')),
        ],
        equipment=[Equipment('mixer', is_owned=True)],
    )
    bake = Step(
        'Bake until golden.',
        step_type='Cook',
        time_needed=Quantity(12, 'min'),
        temperature=Quantity(350, '°F'),
        ingredients=[Ingredient('Butter', Quantity(2, 'tbsp'))],
        equipment=[Equipment('oven', is_owned=False), Equipment('Mixer', is_owned=True)],
    )
    return Recipe('Cookies', 'Family', 'Ann', amount_made=24, amount_made_unit='cookies',
                  tags=['dessert'], steps=[prep, bake])


@pytest.fixture
def recipe_dir(tmp_path):
    directory = tmp_path / 'recipes'
    directory.mkdir()
    (directory / 'bread.toml').write_text(BREAD_TOML, encoding='utf-8')
    return directory


@pytest.fixture
def app(recipe_dir):
    app = create_app('testing', RECIPE_DIR=str(recipe_dir))
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()
