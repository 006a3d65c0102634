"""Pydantic schemas to validate Edamam recipe search payloads.

These schemas act as contracts at the API ingress point so we fail fast when
external payloads change shape. Only the reduced hit-list projection flows
into the GUI state; the full recipe record is kept for detail views.
"""
from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .vocabulary import DIET_LABELS, NUTRIENTS, DietLabel

RECIPE_URI_MARKER = "#recipe_"


def recipe_id_from_uri(uri: str) -> str:
    """Extract the recipe id from an Edamam ontology URI.

    >>> recipe_id_from_uri("http://www.edamam.com/ontologies/edamam.owl#recipe_abc")
    'abc'
    """
    _, marker, recipe_id = uri.partition(RECIPE_URI_MARKER)
    return recipe_id if marker else uri


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RecipeLinkSchema(BaseModel):
    href: str = ""
    title: str = ""


class RecipeSummarySchema(BaseModel):
    uri: str
    label: str
    image: str = ""

    @property
    def recipe_id(self) -> str:
        return recipe_id_from_uri(self.uri)


class HitLinksSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    self_link: RecipeLinkSchema = Field(default_factory=RecipeLinkSchema, alias="self")


class HitSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    recipe: RecipeSummarySchema
    links: HitLinksSchema = Field(default_factory=HitLinksSchema, alias="_links")


class ListLinksSchema(BaseModel):
    # The last page of results carries no "next" link.
    next: RecipeLinkSchema = Field(default_factory=RecipeLinkSchema)


class HitListSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_: int = Field(default=0, ge=0, alias="from")
    to: int = Field(default=0, ge=0)
    count: int = Field(default=0, ge=0)
    hits: List[HitSchema] = Field(default_factory=list)
    links: ListLinksSchema = Field(default_factory=ListLinksSchema, alias="_links")

    def to_state(self) -> dict:
        """Project the API page onto the GUI list-slice shape."""
        return {
            "from": self.from_,
            "to": self.to,
            "count": self.count,
            "hits": [
                {
                    "selfLink": hit.links.self_link.model_dump(),
                    "recipe": hit.recipe.model_dump(),
                }
                for hit in self.hits
            ],
            "next": self.links.next.model_dump(),
        }


class SizedImageSchema(BaseModel):
    url: str
    width: int = 0
    height: int = 0


class IngredientSchema(_CamelModel):
    text: str
    quantity: float = 0.0
    measure: Optional[str] = None
    food: str = ""
    weight: float = 0.0
    food_category: Optional[str] = None
    food_id: Optional[str] = None
    image: Optional[str] = None


class NutrientSchema(BaseModel):
    label: str
    quantity: float
    unit: str
    uri: Optional[str] = None


class DigestSchema(_CamelModel):
    label: str
    tag: str
    schema_org_tag: Optional[str] = None
    total: float = 0.0
    has_rdi: bool = Field(default=False, alias="hasRDI")
    daily: float = 0.0
    unit: str = ""
    sub: List["DigestSchema"] = Field(default_factory=list)


class RecipeSchema(_CamelModel):
    uri: str
    label: str
    image: str = ""
    images: Dict[str, SizedImageSchema] = Field(default_factory=dict)
    source: str = ""
    url: str = ""
    share_as: str = ""
    yield_: float = Field(default=0.0, alias="yield")
    diet_labels: List[str] = Field(default_factory=list)
    health_labels: List[str] = Field(default_factory=list)
    cautions: List[str] = Field(default_factory=list)
    ingredient_lines: List[str] = Field(default_factory=list)
    ingredients: List[IngredientSchema] = Field(default_factory=list)
    calories: float = 0.0
    total_co2_emissions: Optional[float] = Field(default=None, alias="totalCO2Emissions")
    co2_emissions_class: Optional[str] = Field(default=None, alias="co2EmissionsClass")
    total_weight: float = 0.0
    total_time: float = 0.0
    cuisine_type: List[str] = Field(default_factory=list)
    meal_type: List[str] = Field(default_factory=list)
    dish_type: List[str] = Field(default_factory=list)
    total_nutrients: Dict[str, NutrientSchema] = Field(default_factory=dict)
    total_daily: Dict[str, NutrientSchema] = Field(default_factory=dict)
    digest: List[DigestSchema] = Field(default_factory=list)

    @property
    def recipe_id(self) -> str:
        return recipe_id_from_uri(self.uri)

    @property
    def diet_params(self) -> List[DietLabel]:
        """Diet labels of this recipe in the form the ``diet`` search param takes."""
        return [DIET_LABELS[label] for label in self.diet_labels if label in DIET_LABELS]

    def nutrient(self, code: str) -> Optional[NutrientSchema]:
        """Total amount of a nutrient by code (``ENERC_KCAL``, ``PROCNT``...)."""
        if code not in NUTRIENTS:
            raise KeyError(f"Unknown nutrient code: {code}")
        return self.total_nutrients.get(code)


class RecipeResponseSchema(BaseModel):
    """Envelope returned by the single-recipe endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    recipe: RecipeSchema
    links: HitLinksSchema = Field(default_factory=HitLinksSchema, alias="_links")
