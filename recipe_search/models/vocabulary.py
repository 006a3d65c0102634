"""Static vocabularies used by the Edamam recipe search API.

These tables are opaque constant data: the state container references them in
type hints and the UI renders them, but nothing here is validated at runtime.
"""

from enum import Enum
from typing import Dict


class CuisineType(str, Enum):
    AMERICAN = "American"
    ASIAN = "Asian"
    BRITISH = "British"
    CARIBBEAN = "Caribbean"
    CENTRAL_EUROPE = "Central Europe"
    CHINESE = "Chinese"
    EASTERN_EUROPE = "Eastern Europe"
    FRENCH = "French"
    GREEK = "Greek"
    INDIAN = "Indian"
    ITALIAN = "Italian"
    JAPANESE = "Japanese"
    KOREAN = "Korean"
    KOSHER = "Kosher"
    MEDITERRANEAN = "Mediterranean"
    MEXICAN = "Mexican"
    MIDDLE_EASTERN = "Middle Eastern"
    NORDIC = "Nordic"
    SOUTH_AMERICAN = "South American"
    SOUTH_EAST_ASIAN = "South East Asian"
    WORLD = "World"


class MealType(str, Enum):
    BREAKFAST = "Breakfast"
    DINNER = "Dinner"
    LUNCH = "Lunch"
    SNACK = "Snack"
    TEATIME = "Teatime"


class DishType(str, Enum):
    ALCOHOL_COCKTAIL = "Alcohol cocktail"
    BISCUITS_AND_COOKIES = "Biscuits and cookies"
    BREAD = "Bread"
    CEREALS = "Cereals"
    CONDIMENTS_AND_SAUCES = "Condiments and sauces"
    DESSERTS = "Desserts"
    DRINKS = "Drinks"
    EGG = "Egg"
    MAIN_COURSE = "Main course"
    PANCAKE = "Pancake"
    PREPS = "Preps"
    PRESERVE = "Preserve"
    SALAD = "Salad"
    SANDWICHES = "Sandwiches"
    SEAFOOD = "Seafood"
    SIDE_DISH = "Side dish"
    SOUP = "Soup"
    SPECIAL_OCCASIONS = "Special occasions"
    STARTER = "Starter"
    SWEETS = "Sweets"


class DietLabel(str, Enum):
    """Diet filter values as sent in the ``diet`` query parameter."""

    BALANCED = "balanced"
    HIGH_FIBER = "high-fiber"
    HIGH_PROTEIN = "high-protein"
    LOW_CARB = "low-carb"
    LOW_FAT = "low-fat"
    LOW_SODIUM = "low-sodium"


class HealthLabel(str, Enum):
    """Health filter values as sent in the ``health`` query parameter."""

    ALCOHOL_COCKTAIL = "alcohol-cocktail"
    ALCOHOL_FREE = "alcohol-free"
    CELERY_FREE = "celery-free"
    CRUSTACEAN_FREE = "crustacean-free"
    DAIRY_FREE = "dairy-free"
    DASH = "DASH"
    EGG_FREE = "egg-free"
    FISH_FREE = "fish-free"
    FODMAP_FREE = "fodmap-free"
    GLUTEN_FREE = "gluten-free"
    IMMUNO_SUPPORTIVE = "immuno-supportive"
    KETO_FRIENDLY = "keto-friendly"
    KIDNEY_FRIENDLY = "kidney-friendly"
    KOSHER = "kosher"
    LOW_POTASSIUM = "low-potassium"
    LOW_SUGAR = "low-sugar"
    LUPINE_FREE = "lupine-free"
    MEDITERRANEAN = "Mediterranean"
    MOLLUSK_FREE = "mollusk-free"
    MUSTARD_FREE = "mustard-free"
    NO_OIL_ADDED = "no-oil-added"
    PALEO = "paleo"
    PEANUT_FREE = "peanut-free"
    PESCATARIAN = "pescatarian"
    PORK_FREE = "pork-free"
    RED_MEAT_FREE = "red-meat-free"
    SESAME_FREE = "sesame-free"
    SHELLFISH_FREE = "shellfish-free"
    SOY_FREE = "soy-free"
    SUGAR_CONSCIOUS = "sugar-conscious"
    SULFITE_FREE = "sulfite-free"
    TREE_NUT_FREE = "tree-nut-free"
    VEGAN = "vegan"
    VEGETARIAN = "vegetarian"
    WHEAT_FREE = "wheat-free"


class ImageSize(str, Enum):
    THUMBNAIL = "THUMBNAIL"
    SMALL = "SMALL"
    REGULAR = "REGULAR"
    LARGE = "LARGE"


# Recipe records carry display labels ("Low-Carb"); queries use the param form.
DIET_LABELS: Dict[str, DietLabel] = {
    "Balanced": DietLabel.BALANCED,
    "High-Fiber": DietLabel.HIGH_FIBER,
    "High-Protein": DietLabel.HIGH_PROTEIN,
    "Low-Carb": DietLabel.LOW_CARB,
    "Low-Fat": DietLabel.LOW_FAT,
    "Low-Sodium": DietLabel.LOW_SODIUM,
}

# Nutrient codes used as keys of totalNutrients / totalDaily.
NUTRIENTS: Dict[str, str] = {
    "ENERC_KCAL": "Energy",
    "FAT": "Fat",
    "FASAT": "Saturated",
    "FATRN": "Trans",
    "FAMS": "Monounsaturated",
    "FAPU": "Polyunsaturated",
    "CHOCDF": "Carbs",
    "CHOCDF.net": "Carbohydrates (net)",
    "FIBTG": "Fiber",
    "SUGAR": "Sugars",
    "PROCNT": "Protein",
    "CHOLE": "Cholesterol",
    "NA": "Sodium",
    "CA": "Calcium",
    "MG": "Magnesium",
    "K": "Potassium",
    "FE": "Iron",
    "ZN": "Zinc",
    "P": "Phosphorus",
    "VITA_RAE": "Vitamin A",
    "VITC": "Vitamin C",
    "THIA": "Thiamin (B1)",
    "RIBF": "Riboflavin (B2)",
    "NIA": "Niacin (B3)",
    "VITB6A": "Vitamin B6",
    "FOLDFE": "Folate equivalent (total)",
    "VITB12": "Vitamin B12",
    "VITD": "Vitamin D",
    "TOCPHA": "Vitamin E",
    "VITK1": "Vitamin K",
    "WATER": "Water",
}
