"""
Unit Constants and Conversion Tables

Contains every unit the catalog knows about, grouped by category, with
the exact conversion to the category's base unit. All factors and
offsets are exact fractions: ``base = value * factor + offset``.
"""

from fractions import Fraction

# Base unit abbreviation for each category
BASE_UNITS = {
    'Mass': 'g',
    'Volume': 'mL',
    'Count': 'ea',
    'Time': 's',
    'Temperature': 'K',
}

# SI prefixes used to build the metric tables (symbol, name, power of ten)
SI_PREFIXES = [
    ('T', 'tera', 12),
    ('G', 'giga', 9),
    ('M', 'mega', 6),
    ('k', 'kilo', 3),
    ('h', 'hecto', 2),
    ('da', 'deca', 1),
    ('', '', 0),
    ('d', 'deci', -1),
    ('c', 'centi', -2),
    ('m', 'milli', -3),
    ('µ', 'micro', -6),
    ('n', 'nano', -9),
    ('p', 'pico', -12),
]


def _power_of_ten(exponent):
    return Fraction(10) ** exponent


def _prefixed(symbol, name, scale=1):
    """Build {abbreviation: (display name, factor, offset)} for every SI prefix."""
    table = {}
    for prefix_symbol, prefix_name, exponent in SI_PREFIXES:
        table[prefix_symbol + symbol] = (
            prefix_name + name,
            _power_of_ten(exponent) * scale,
            Fraction(0),
        )
    return table


# US customary volume definitions (in mL)
CUBIC_INCH_ML = Fraction('16.387064')
CUBIC_FOOT_ML = CUBIC_INCH_ML * 1728
US_GALLON_ML = CUBIC_INCH_ML * 231
US_BUSHEL_ML = CUBIC_INCH_ML * Fraction('2150.42')
US_FLUID_OUNCE_ML = US_GALLON_ML / 128
US_TABLESPOON_ML = US_FLUID_OUNCE_ML / 2

# Imperial volume definitions (in mL)
IMPERIAL_GALLON_ML = Fraction('4546.09')

# Avoirdupois mass definitions (in g)
POUND_G = Fraction('453.59237')
OUNCE_G = POUND_G / 16

# Mass: base = g
MASS_UNITS = {
    **_prefixed('g', 'gram'),
    'oz': ('ounce', OUNCE_G, Fraction(0)),
    'lb': ('pound', POUND_G, Fraction(0)),
}

# Volume: base = mL
VOLUME_UNITS = {
    # cubic meters, 1 m³ = 10^6 mL, each prefix applies cubed
    **{
        f"{prefix_symbol}m³": (
            f"cubic {prefix_name}meter",
            _power_of_ten(3 * exponent) * 10**6,
            Fraction(0),
        )
        for prefix_symbol, prefix_name, exponent in SI_PREFIXES
    },
    **_prefixed('L', 'liter', scale=1000),
    # US customary
    'in³': ('cubic inch', CUBIC_INCH_ML, Fraction(0)),
    'ft³': ('cubic foot', CUBIC_FOOT_ML, Fraction(0)),
    'yd³': ('cubic yard', CUBIC_FOOT_ML * 27, Fraction(0)),
    'mi³': ('cubic mile', CUBIC_FOOT_ML * 5280**3, Fraction(0)),
    'ac · ft': ('acre foot', CUBIC_FOOT_ML * 43560, Fraction(0)),
    'cords': ('cord', CUBIC_FOOT_ML * 128, Fraction(0)),
    'bbl': ('barrel', US_GALLON_ML * 42, Fraction(0)),
    'bu': ('bushel', US_BUSHEL_ML, Fraction(0)),
    'pk': ('peck', US_BUSHEL_ML / 4, Fraction(0)),
    'dry qt': ('dry quart', US_BUSHEL_ML / 32, Fraction(0)),
    'dry pt': ('dry pint', US_BUSHEL_ML / 64, Fraction(0)),
    'gal': ('gallon', US_GALLON_ML, Fraction(0)),
    'liq qt': ('liquid quart', US_GALLON_ML / 4, Fraction(0)),
    'liq pt': ('liquid pint', US_GALLON_ML / 8, Fraction(0)),
    'cup': ('cup', US_GALLON_ML / 16, Fraction(0)),
    'gi': ('gill', US_GALLON_ML / 32, Fraction(0)),
    'fl oz': ('fluid ounce', US_FLUID_OUNCE_ML, Fraction(0)),
    'tbsp': ('tablespoon', US_TABLESPOON_ML, Fraction(0)),
    'tsp': ('teaspoon', US_TABLESPOON_ML / 3, Fraction(0)),
    # Imperial
    'gal (UK)': ('imperial gallon', IMPERIAL_GALLON_ML, Fraction(0)),
    'gi (UK)': ('imperial gill', IMPERIAL_GALLON_ML / 32, Fraction(0)),
    'fl oz (UK)': ('imperial fluid ounce', IMPERIAL_GALLON_ML / 160, Fraction(0)),
}

# Count: base = ea
COUNT_UNITS = {
    'ea': ('each', Fraction(1), Fraction(0)),
    'doz': ('dozen', Fraction(12), Fraction(0)),
}

# Time: base = s
TIME_UNITS = {
    **_prefixed('s', 'second'),
    'min': ('minute', Fraction(60), Fraction(0)),
    'h': ('hour', Fraction(3600), Fraction(0)),
    'd': ('day', Fraction(86400), Fraction(0)),
    'a': ('year', Fraction(365 * 86400), Fraction(0)),
}

# Temperature: base = K (affine)
TEMPERATURE_UNITS = {
    **_prefixed('K', 'kelvin'),
    '°C': ('degree Celsius', Fraction(1), Fraction('273.15')),
    '°F': ('degree Fahrenheit', Fraction(5, 9), Fraction('459.67') * Fraction(5, 9)),
    '°R': ('degree Rankine', Fraction(5, 9), Fraction(0)),
}

# Category name -> unit table, in listing order
UNIT_TABLES = {
    'Mass': MASS_UNITS,
    'Volume': VOLUME_UNITS,
    'Count': COUNT_UNITS,
    'Time': TIME_UNITS,
    'Temperature': TEMPERATURE_UNITS,
}

# Unicode fraction characters mapping (exact)
UNICODE_FRACTIONS = {
    '\u00bd': Fraction(1, 2),    # ½
    '\u2153': Fraction(1, 3),    # ⅓
    '\u2154': Fraction(2, 3),    # ⅔
    '\u00bc': Fraction(1, 4),    # ¼
    '\u00be': Fraction(3, 4),    # ¾
    '\u2155': Fraction(1, 5),    # ⅕
    '\u2156': Fraction(2, 5),    # ⅖
    '\u2157': Fraction(3, 5),    # ⅗
    '\u2158': Fraction(4, 5),    # ⅘
    '\u2159': Fraction(1, 6),    # ⅙
    '\u215a': Fraction(5, 6),    # ⅚
    '\u215b': Fraction(1, 8),    # ⅛
    '\u215c': Fraction(3, 8),    # ⅜
    '\u215d': Fraction(5, 8),    # ⅝
    '\u215e': Fraction(7, 8),    # ⅞
}
