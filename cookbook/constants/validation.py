"""
Validation Constants

Contains whitelist values and limits used when validating recipe
documents, both on load and on every edit.
"""

# Valid values for the step_type field
VALID_STEP_TYPES = ('Prep', 'Cook', 'Wait', 'Other')

# Default step type when a file omits it
DEFAULT_STEP_TYPE = 'Other'

# Categories an ingredient amount may use, keyed by file-format variant name
INGREDIENT_AMOUNT_VARIANTS = {
    'Quantity': 'Count',
    'Mass': 'Mass',
    'Volume': 'Volume',
}

# Maximum field lengths
MAX_LENGTHS = {
    'name': 200,
    'source': 500,
    'author': 200,
    'amount_made_unit': 50,
    'tag': 50,
    'description': 10000,
    'comments': 10000,
    'instructions': 50000,
}

# Recipe documents on disk
RECIPE_FILE_SUFFIX = '.toml'

# Table keys in the order they are written; anything else is rejected on load
RECIPE_KEYS = ('id', 'name', 'description', 'comments', 'source', 'author',
               'amount_made', 'amount_made_unit', 'tags', 'steps')
STEP_KEYS = ('id', 'time_needed', 'time_needed_unit', 'temperature', 'temperature_unit',
             'instructions', 'step_type', 'ingredients', 'equipment')
INGREDIENT_KEYS = ('id', 'name', 'description', 'Quantity', 'Mass', 'Volume')
EQUIPMENT_KEYS = ('id', 'name', 'description', 'is_owned')
AMOUNT_KEYS = ('value', 'unit')
