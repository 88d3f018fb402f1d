"""
Grandma Recipes API: Recipe Aggregation
========================================

What:  Folds the flat rows of the five-way recipe join back into nested
       RecipeResponse entities.
Who:   RecipeService.list_recipes / search_recipes / get_recipe.

Row shape (one per recipe × ingredient link × image):

    id_recipe | name_recipe | ... | id_ingredient | name_ingredient |
    quantity | unit | image | id_grandma | grandma_name | ... | grandma_photo

A recipe with N ingredient links and M images arrives as N×M rows:

    recipe 1, ingredient A, image x
    recipe 1, ingredient A, image y
    recipe 1, ingredient B, image x
    recipe 1, ingredient B, image y

Folding rules:
    - Recipes are emitted in the order their id is first seen.
    - Scalar fields and the contributor come from the recipe's first row.
    - Images are appended when truthy and not already present (by value).
    - Ingredients are appended once per ingredient id. Passing
      collapse_ingredients=False appends one entry per row instead, which
      repeats every ingredient once per image (N×M entries).
"""

from typing import Any, Dict, Iterable, List, Mapping, Set

from grandma_recipes.schemas.recipe import (
    GrandmaLocation,
    GrandmaName,
    RecipeGrandma,
    RecipeIngredientItem,
    RecipeResponse,
)


def _start_recipe(row: Mapping[str, Any]) -> RecipeResponse:
    return RecipeResponse(
        id_recipe=row["id_recipe"],
        name_recipe=row["name_recipe"],
        desc_recipe=row["desc_recipe"],
        cooking_time=row["cooking_time"],
        directions=row["directions"],
        background=row["background"],
        ingredients=[],
        images=[],
        grandma=RecipeGrandma(
            id_grandma=row["id_grandma"],
            name_grandma=GrandmaName(
                name=row["grandma_name"],
                lastname=row["grandma_lastname"],
            ),
            location=GrandmaLocation(
                city=row["grandma_city"],
                province=row["grandma_province"],
            ),
            photo=row["grandma_photo"],
        ),
    )


def aggregate_recipes(
    rows: Iterable[Mapping[str, Any]],
    collapse_ingredients: bool = True,
) -> List[RecipeResponse]:
    """
    Single pass over the join rows; returns recipes in first-seen order.

    Args:
        rows: Mappings keyed by the labels of RecipeService._joined_rows_query
            (SQLAlchemy RowMapping or dict)
        collapse_ingredients: Keep one entry per ingredient id (default) or
            one entry per row
    """
    recipes: Dict[int, RecipeResponse] = {}
    seen_ingredients: Dict[int, Set[int]] = {}

    for row in rows:
        recipe_id = row["id_recipe"]
        recipe = recipes.get(recipe_id)
        if recipe is None:
            recipe = recipes[recipe_id] = _start_recipe(row)
            seen_ingredients[recipe_id] = set()

        ingredient_id = row["id_ingredient"]
        if not collapse_ingredients or ingredient_id not in seen_ingredients[recipe_id]:
            seen_ingredients[recipe_id].add(ingredient_id)
            recipe.ingredients.append(
                RecipeIngredientItem(
                    id_ingredient=ingredient_id,
                    name_ingredient=row["name_ingredient"],
                    quantity=row["quantity"],
                    unit=row["unit"],
                )
            )

        image = row["image"]
        if image and image not in recipe.images:
            recipe.images.append(image)

    return list(recipes.values())
