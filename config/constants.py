"""Application constants.

Centralized location for the unit tables, template phrases and section labels
used by the structured description engine. Adding a unit alias or a
placeholder phrase is a one-line change here.
"""

from decimal import Decimal

# ============================================================================
# Unit Normalization
# ============================================================================

# Case-insensitive aliases mapped to canonical unit tokens
UNIT_ALIASES = {
    "g": "g",
    "gm": "g",
    "gms": "g",
    "gram": "g",
    "grams": "g",
    "kg": "kg",
    "kgs": "kg",
    "kilogram": "kg",
    "kilograms": "kg",
    "lb": "lb",
    "lbs": "lb",
    "pound": "lb",
    "pounds": "lb",
    "oz": "oz",
    "ounce": "oz",
    "ounces": "oz",
    "ml": "ml",
    "milliliter": "ml",
    "milliliters": "ml",
    "millilitre": "ml",
    "millilitres": "ml",
    "l": "l",
    "liter": "l",
    "liters": "l",
    "litre": "l",
    "litres": "l",
}

# Small unit -> (threshold, large unit, divisor) used when formatting amounts
UNIT_ROLLOVER = {
    "g": (Decimal("1000"), "kg", Decimal("1000")),
    "ml": (Decimal("1000"), "l", Decimal("1000")),
    "oz": (Decimal("16"), "lb", Decimal("16")),
}

# Gram equivalents for servings. ml and l pass through unchanged like g.
UNIT_TO_GRAMS = {
    "g": Decimal("1"),
    "kg": Decimal("1000"),
    "lb": Decimal("453.592"),
    "oz": Decimal("28.3495"),
    "ml": Decimal("1"),
    "l": Decimal("1"),
}

# Base weights typed without a unit: >= threshold means grams, below means kg
BASE_WEIGHT_GRAMS_THRESHOLD = Decimal("10")
BASE_WEIGHT_GRAMS_SUFFIX = "gm"
BASE_WEIGHT_KILOGRAMS_SUFFIX = "kg"

# ============================================================================
# Servings
# ============================================================================

GRAMS_PER_SERVING_MIN = Decimal("100")
GRAMS_PER_SERVING_MAX = Decimal("83.33")
SERVINGS_RANGE_SEPARATOR = "–"

# ============================================================================
# Text Sanitizing
# ============================================================================

TEMPLATE_PLACEHOLDERS = (
    "(Editable per product)",
    "(Editable)",
    "(Template)",
    "(Placeholder)",
    "(To be filled)",
    "(Customize)",
    "(Edit as needed)",
    "(Fill in)",
    "(Enter details)",
    "(Add details)",
)

EMPTY_PARENS = "()"

# ============================================================================
# Canonical Description Layout
# ============================================================================

DETAILS_HEADER = "Product Details:"
PLEASE_NOTE_HEADER = "Please Note:"
PLEASE_NOTE_BULLET = "•"

# (field name, label) in the order the generator emits them
DETAIL_LABELS = (
    ("cake_flavour", "Cake Flavour:"),
    ("version", "Version:"),
    ("shape", "Shape:"),
    ("servings", "Servings:"),
    ("toppings", "Toppings:"),
    ("weight", "Weight:"),
    ("country_of_origin", "Country of Origin:"),
)

# A parsed details block only replaces the current one if one of these is set
PRIMARY_DETAIL_FIELDS = ("cake_flavour", "weight", "servings", "toppings")

DEFAULT_PLEASE_NOTE = (
    "• Cake stands and cutlery shown in images are for display only and are "
    "not included with the cake.\n"
    "• This cake is hand-delivered in a high-quality cardboard box."
)

# Pre-filled values for a brand new listing
LISTING_DEFAULT_DETAILS = {
    "version": "Eggless",
    "shape": "Round",
    "country_of_origin": "India",
}

# ============================================================================
# Authoring Guidance
# ============================================================================

OVERVIEW_MAX_WORDS = 50
