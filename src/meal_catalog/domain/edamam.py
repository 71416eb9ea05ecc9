"""Pydantic models for Edamam recipe search payloads."""

from pydantic import BaseModel, Field

from meal_catalog.domain.labels import EdamamLabel, health_label_from_web


class EdamamIngredient(BaseModel):
    """Ingredient line of an Edamam recipe."""

    text: str
    weight: float = 0.0


class EdamamRecipe(BaseModel):
    """Recipe record returned by Edamam."""

    uri: str
    label: str
    image: str | None = None
    source: str | None = None
    url: str | None = None
    health_labels: list[str] = Field(default_factory=list, alias="healthLabels")
    diet_labels: list[str] = Field(default_factory=list, alias="dietLabels")
    ingredients: list[EdamamIngredient] = Field(default_factory=list)

    def health_tags(self) -> list[str]:
        """Return display names of the recipe's health labels.

        Labels missing from the taxonomy are kept as Edamam spelled them.
        """
        tags = []
        for raw in self.health_labels:
            known: EdamamLabel | None = health_label_from_web(raw)
            tags.append(known.web_label if known else raw)
        return tags


class EdamamHit(BaseModel):
    """Single search hit."""

    recipe: EdamamRecipe


class EdamamSearchResponse(BaseModel):
    """Paginated search response."""

    q: str | None = None
    from_: int = Field(default=0, alias="from")
    to: int = 0
    count: int = 0
    more: bool = False
    hits: list[EdamamHit] = Field(default_factory=list)
