"""
Tests for the recipe document model and its invariants.
"""

import uuid

import pytest

from cookbook.errors import CategoryMismatch, ValidationError
from cookbook.models import Equipment, Ingredient, Quantity, Recipe, Step, StepType
from cookbook.services import Rational


# ============================================
# INGREDIENTS AND EQUIPMENT
# ============================================

def test_ingredient_variant_follows_unit():
    assert Ingredient('eggs', Quantity(3, 'ea')).amount_variant == 'Quantity'
    assert Ingredient('eggs', Quantity(1, 'doz')).amount_variant == 'Quantity'
    assert Ingredient('flour', Quantity(1, 'kg')).amount_variant == 'Mass'
    assert Ingredient('milk', Quantity(1, 'cup')).amount_variant == 'Volume'


def test_ingredient_rejects_time_amount():
    with pytest.raises(CategoryMismatch):
        Ingredient('patience', Quantity(5, 'min'))


def test_amount_from_variants_needs_exactly_one():
    with pytest.raises(ValidationError):
        Ingredient.amount_from_variants(count=Quantity(1, 'ea'), mass=Quantity(1, 'g'))
    with pytest.raises(ValidationError):
        Ingredient.amount_from_variants()
    with pytest.raises(CategoryMismatch) as exc:
        Ingredient.amount_from_variants(mass=Quantity(1, 'mL'))
    assert exc.value.path == 'Mass.unit'


def test_blank_name_rejected():
    with pytest.raises(ValidationError) as exc:
        Ingredient('  ', Quantity(1, 'g'))
    assert exc.value.path == 'name'


def test_equipment_is_owned_must_be_bool():
    with pytest.raises(ValidationError):
        Equipment('oven', is_owned=1)


def test_fresh_ids_are_unique():
    ids = {Equipment('pan').id for _ in range(100)}
    assert len(ids) == 100
    assert all(isinstance(i, uuid.UUID) for i in ids)


def test_equality_keeps_the_written_unit():
    ingredient_id = uuid.uuid4()
    cup = Ingredient('milk', Quantity(1, 'cup'), id=ingredient_id)
    millilitres = Ingredient('milk', Quantity(Rational.parse('236.5882365'), 'mL'), id=ingredient_id)
    assert cup.amount == millilitres.amount
    assert cup != millilitres
    assert cup == Ingredient('milk', Quantity(1, 'cup'), id=ingredient_id)

    step_id = uuid.uuid4()
    assert Step('Wait.', time_needed=Quantity(1, 'h'), id=step_id) != \
        Step('Wait.', time_needed=Quantity(60, 'min'), id=step_id)


# ============================================
# STEPS
# ============================================

def test_step_defaults_to_other():
    assert Step('Rest.').step_type is StepType.OTHER


def test_step_type_must_be_known():
    with pytest.raises(ValidationError) as exc:
        Step('Stir.', step_type='Stir')
    assert exc.value.path == 'step_type'


def test_half_specified_pairs_fail():
    step = Step('Bake.')
    with pytest.raises(ValidationError) as exc:
        step.set_temperature(Rational(180), None)
    assert exc.value.path == 'temperature_unit'
    with pytest.raises(ValidationError) as exc:
        step.set_time_needed(None, 'min')
    assert exc.value.path == 'time_needed'
    assert step.temperature is None and step.time_needed is None


def test_step_quantities_must_match_category():
    step = Step('Bake.')
    with pytest.raises(CategoryMismatch) as exc:
        step.set_time_needed(Rational(5), 'g')
    assert exc.value.path == 'time_needed_unit'
    with pytest.raises(CategoryMismatch):
        step.temperature = Quantity(5, 'min')
    step.set_temperature(Rational(350), '°F')
    assert step.temperature_unit == '°F'


def test_step_rejects_duplicate_child_ids():
    flour = Ingredient('flour', Quantity(1, 'cup'))
    step = Step('Mix.', ingredients=[flour])
    with pytest.raises(ValidationError):
        step.add_ingredient(Ingredient('more flour', Quantity(1, 'cup'), id=flour.id))
    assert len(step.ingredients) == 1


def test_step_children_are_read_only_views():
    step = Step('Mix.')
    assert isinstance(step.ingredients, tuple)
    step.add_equipment(Equipment('bowl'))
    removed = step.remove_equipment(step.equipment[0].id)
    assert removed.name == 'bowl'
    assert step.equipment == ()


# ============================================
# RECIPES
# ============================================

def test_amount_made_display(recipe):
    assert recipe.amount_made == 24
    assert recipe.amount_made_display == 'Makes: 24 cookies'


def test_amount_made_cannot_be_negative(recipe):
    with pytest.raises(ValidationError):
        recipe.amount_made = -1


def test_tags_are_an_ordered_set(recipe):
    assert recipe.add_tag('baking') is True
    assert recipe.add_tag('dessert') is False
    assert recipe.tags == ('dessert', 'baking')
    assert recipe.remove_tag('dessert') is True
    with pytest.raises(ValidationError) as exc:
        recipe.tags = ['ok', '']
    assert exc.value.path == 'tags[1]'
    assert recipe.tags == ('baking',)


def test_update_is_atomic(recipe):
    with pytest.raises(ValidationError):
        recipe.update(name='Biscuits', author=5)
    assert recipe.name == 'Cookies'
    recipe.update(name='Biscuits', author='Bea')
    assert (recipe.name, recipe.author) == ('Biscuits', 'Bea')
    with pytest.raises(ValidationError):
        recipe.update(id='nope')


def test_update_ingredient_error_names_the_field(recipe):
    step = recipe.steps[0]
    sugar = step.ingredients[1]
    with pytest.raises(ValidationError) as exc:
        recipe.update_ingredient(step.id, sugar.id, name='')
    assert exc.value.path == 'steps[0].ingredients[1].name'
    recipe.update_ingredient(step.id, sugar.id, amount=Quantity(250, 'g'))
    assert sugar.amount == Quantity(250, 'g')


def test_step_ids_unique_across_document(recipe):
    stolen = recipe.steps[0].ingredients[0].id
    with pytest.raises(ValidationError):
        recipe.add_ingredient(recipe.steps[1].id, Ingredient('more butter', Quantity(1, 'g'), id=stolen))
    with pytest.raises(ValidationError):
        recipe.add_step(Step('Again.', id=recipe.steps[0].id))
    with pytest.raises(ValidationError):
        recipe.add_step(Step('Again.', equipment=[Equipment('x', id=recipe.id)]))
    assert len(recipe.steps) == 2


def test_steps_in_a_recipe_check_ids_across_document(recipe):
    prep, bake = recipe.steps
    butter, mixer = prep.ingredients[0], prep.equipment[0]
    with pytest.raises(ValidationError) as exc:
        bake.add_ingredient(Ingredient('more butter', Quantity(1, 'g'), id=butter.id))
    assert exc.value.path == 'ingredients'
    with pytest.raises(ValidationError):
        bake.add_equipment(Equipment('whisk', id=mixer.id))
    with pytest.raises(ValidationError):
        bake.add_equipment(Equipment('whisk', id=recipe.id))
    assert len(bake.ingredients) == 2 and len(bake.equipment) == 2


def test_removed_step_is_detached(recipe):
    prep, bake = recipe.steps
    recipe.remove_step(prep.id)
    assert prep.owner is None
    prep.add_ingredient(Ingredient('salt', Quantity(1, 'g'), id=bake.ingredients[0].id))
    assert len(prep.ingredients) == 3

    other = Recipe('Other', 'me', 'me', amount_made_unit='loaf')
    with pytest.raises(ValidationError):
        other.add_step(bake)


def test_reorder_and_remove_steps(recipe):
    prep, bake = recipe.steps
    recipe.move_step(bake.id, 0)
    assert recipe.steps == (bake, prep)
    with pytest.raises(ValidationError):
        recipe.move_step(bake.id, 5)
    recipe.remove_step(prep.id)
    assert recipe.steps == (bake,)
    with pytest.raises(ValidationError):
        recipe.get_step(prep.id)


def test_path_of(recipe):
    bake = recipe.steps[1]
    assert recipe.path_of(recipe.id) == ''
    assert recipe.path_of(bake.id) == 'steps[1]'
    assert recipe.path_of(str(bake.equipment[1].id)) == 'steps[1].equipment[1]'
    assert recipe.path_of(uuid.uuid4()) is None


def test_time_totals(recipe):
    totals = recipe.step_time_totals()
    assert totals == {StepType.PREP: Quantity(600, 's'), StepType.COOK: Quantity(12, 'min')}
    total = recipe.total_time()
    assert total.unit.abbreviation == 's'
    assert total == Quantity(22, 'min')
    recipe.add_step(Step('Cool.', step_type='Wait'))
    assert recipe.step_time_totals()[StepType.WAIT] is None


def test_total_time_of_untimed_recipe():
    recipe = Recipe('Toast', 'me', 'me', amount_made_unit='slices', steps=[Step('Toast it.')])
    assert recipe.total_time() == Quantity(0, 's')


def test_ingredient_list_merges_by_name(recipe):
    merged = recipe.ingredient_list()
    assert [i.name for i in merged] == ['butter', 'sugar']
    butter = merged[0]
    assert butter.amount.unit.abbreviation == 'cup'
    assert butter.amount.value == Rational(9, 8)
    assert butter.id == recipe.steps[0].ingredients[0].id
    assert recipe.steps[0].ingredients[0].amount.value == 1


def test_ingredient_list_keeps_incompatible_amounts_apart():
    recipe = Recipe('Cake', 'me', 'me', amount_made_unit='cake', steps=[
        Step('a', ingredients=[Ingredient('flour', Quantity(1, 'cup'))]),
        Step('b', ingredients=[Ingredient('flour', Quantity(100, 'g'))]),
    ])
    assert len(recipe.ingredient_list()) == 2


def test_equipment(recipe):
    assert [e.name for e in recipe.equipment_list()] == ['mixer', 'oven']
    assert recipe.all_equipment_owned() is False
    bake = recipe.steps[1]
    recipe.update_equipment(bake.id, bake.equipment[0].id, is_owned=True)
    assert recipe.all_equipment_owned() is True


def test_scale(recipe):
    recipe.scale(Rational(1, 2))
    assert recipe.amount_made == 12
    assert recipe.steps[0].ingredients[0].amount == Quantity(Rational(1, 2), 'cup')
    assert recipe.steps[0].time_needed == Quantity(10, 'min')
    with pytest.raises(ValidationError):
        recipe.scale(0)
