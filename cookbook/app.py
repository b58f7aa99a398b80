"""
Cookbook Web and CLI Surface

Thin Flask glue over the cookbook core: lists units, serves recipe
documents from RECIPE_DIR as JSON or raw TOML, converts quantities,
and mirrors recipes into the inventory database.

Run with: flask --app cookbook.app run
"""

import logging

import click
from flask import Blueprint, Flask, Response, abort, current_app, jsonify, request

from .config import get_config
from .errors import CookbookError, ValidationError
from .models import Precision, Quantity, db
from .services.inventory import sync_inventory
from .services.rational import Rational
from .services.serialization import (
    compile_tag_list,
    find_recipe_file,
    iter_recipe_files,
    load_recipe,
    load_recipes_from_directory,
    save_recipe,
)
from .services.units import get_catalog

logger = logging.getLogger(__name__)

bp = Blueprint('cookbook', __name__, cli_group=None)


def _catalog():
    return current_app.extensions['unit_catalog']


def _quantity_json(quantity):
    if quantity is None:
        return None
    places = current_app.config['DISPLAY_PLACES']
    return {
        'value': list(quantity.value.to_pair()),
        'unit': quantity.unit.abbreviation,
        'display': quantity.format(),
        'decimal': quantity.format(Precision.DECIMAL, places),
    }


def recipe_to_json(recipe):
    """JSON-ready view of a recipe with formatted quantities."""
    steps = []
    for step in recipe.steps:
        steps.append({
            'id': str(step.id),
            'instructions': step.instructions,
            'step_type': step.step_type.value,
            'time_needed': _quantity_json(step.time_needed),
            'temperature': _quantity_json(step.temperature),
            'ingredients': [
                {
                    'id': str(ingredient.id),
                    'name': ingredient.name,
                    'description': ingredient.description,
                    'variant': ingredient.amount_variant,
                    'amount': _quantity_json(ingredient.amount),
                }
                for ingredient in step.ingredients
            ],
            'equipment': [
                {
                    'id': str(item.id),
                    'name': item.name,
                    'description': item.description,
                    'is_owned': item.is_owned,
                }
                for item in step.equipment
            ],
        })
    return {
        'id': str(recipe.id),
        'name': recipe.name,
        'description': recipe.description,
        'comments': recipe.comments,
        'source': recipe.source,
        'author': recipe.author,
        'amount_made': list(recipe.amount_made.to_pair()),
        'amount_made_unit': recipe.amount_made_unit,
        'makes': recipe.amount_made_display,
        'tags': list(recipe.tags),
        'total_time': _quantity_json(recipe.total_time()),
        'all_equipment_owned': recipe.all_equipment_owned(),
        'steps': steps,
    }


def _find_or_404(recipe_id):
    path, recipe = find_recipe_file(current_app.config['RECIPE_DIR'], recipe_id, _catalog())
    if path is None:
        abort(404)
    return path, recipe


# ============================================
# ROUTES
# ============================================

@bp.app_errorhandler(CookbookError)
def cookbook_error(err):
    logger.warning("Rejected request: %s", err)
    return jsonify({
        'error': type(err).__name__,
        'message': err.message,
        'path': err.path,
    }), 400


@bp.route('/units')
def units_list():
    catalog = _catalog()
    result = {}
    for category, abbreviations in catalog.listing().items():
        result[category] = {
            'base': catalog.base_unit(category).abbreviation,
            'units': [
                {'abbreviation': a, 'name': catalog.lookup(a).name}
                for a in abbreviations
            ],
        }
    return jsonify(result)


@bp.route('/recipes')
def recipes_list():
    try:
        recipes = load_recipes_from_directory(current_app.config['RECIPE_DIR'], _catalog())
    except NotADirectoryError:
        logger.warning("Recipe directory %s does not exist", current_app.config['RECIPE_DIR'])
        recipes = {}
    items = sorted(recipes.values(), key=lambda r: r.name.casefold())
    return jsonify({
        'recipes': [
            {'id': str(r.id), 'name': r.name, 'tags': list(r.tags)}
            for r in items
        ],
        'tags': compile_tag_list(recipes),
    })


@bp.route('/recipe/<uuid:recipe_id>')
def recipe_view(recipe_id):
    _, recipe = _find_or_404(recipe_id)
    return jsonify(recipe_to_json(recipe))


@bp.route('/recipe/<uuid:recipe_id>/raw')
def recipe_raw(recipe_id):
    path, _ = _find_or_404(recipe_id)
    return Response(path.read_bytes(), mimetype='application/toml')


@bp.route('/convert')
def convert():
    args = request.args
    for name in ('value', 'from', 'to'):
        if not args.get(name):
            raise ValidationError("query parameter is required", path=name)
    catalog = _catalog()
    quantity = Quantity(Rational.parse(args['value']), catalog.lookup(args['from']))
    result = catalog.convert(quantity, args['to'])
    return jsonify({
        'from': _quantity_json(quantity),
        'to': _quantity_json(result),
    })


@bp.route('/recipe/<uuid:recipe_id>/sync', methods=['POST'])
def recipe_sync(recipe_id):
    _, recipe = _find_or_404(recipe_id)
    counts = sync_inventory(recipe)
    return jsonify({'id': str(recipe.id), **counts})


# ============================================
# CLI COMMANDS
# ============================================

@bp.cli.command('units')
def units_command():
    """Print every supported unit, grouped by category."""
    catalog = _catalog()
    for category, abbreviations in catalog.listing().items():
        base = catalog.base_unit(category).abbreviation
        click.echo(f"{category} (base {base}): {', '.join(abbreviations)}")


@bp.cli.command('check')
@click.argument('directory', type=click.Path(exists=True, file_okay=False))
def check_command(directory):
    """Parse every recipe file under DIRECTORY and report errors."""
    failures = 0
    seen = {}
    for path in iter_recipe_files(directory):
        try:
            recipe = load_recipe(path, _catalog())
        except CookbookError as err:
            failures += 1
            click.echo(f"FAIL {path}: {err}", err=True)
            continue
        if recipe.id in seen:
            failures += 1
            click.echo(f"FAIL {path}: duplicate id {recipe.id} (also in {seen[recipe.id]})", err=True)
            continue
        seen[recipe.id] = path
        note = ' (no id yet, run normalize)' if recipe.id_generated else ''
        click.echo(f"OK   {path}{note}")
    click.echo(f"{len(seen)} ok, {failures} failed")
    if failures:
        raise SystemExit(1)


@bp.cli.command('normalize')
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
def normalize_command(file):
    """Load FILE and write it back in canonical form, persisting ids."""
    recipe = load_recipe(file, _catalog())
    save_recipe(recipe, file)
    click.echo(f"{file}: {recipe.id}")


@bp.cli.command('init-db')
def init_db_command():
    """Create the inventory tables."""
    db.create_all()
    click.echo("Initialized the inventory database.")


# ============================================
# APP FACTORY
# ============================================

def create_app(env=None, **settings):
    """
    Build the Flask app.

    Args:
        env: Configuration name (development, production, testing);
             defaults to FLASK_ENV
        **settings: Config values overriding the selected configuration

    Returns:
        Configured Flask app
    """
    app = Flask(__name__)
    app.config.from_object(get_config(env))
    app.config.update(settings)

    logging.basicConfig(level=app.config['LOG_LEVEL'])

    db.init_app(app)
    app.extensions['unit_catalog'] = get_catalog()
    app.register_blueprint(bp)
    return app


def init_db(app):
    with app.app_context():
        db.create_all()


if __name__ == '__main__':
    app = create_app()
    init_db(app)
    app.run(debug=True, host='0.0.0.0', port=5000, use_reloader=False)
