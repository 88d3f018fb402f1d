"""
Grandma Recipes API: Aggregation Unit Tests
============================================

What:  Tests for folding flat join rows back into nested recipes.
How:   Plain dict rows; no database involved.
"""

from grandma_recipes.services.aggregation import aggregate_recipes
from grandma_recipes.services.recipe_service import RecipeService


def _row(recipe_id, ingredient_id, image, **overrides):
    row = {
        "id_recipe": recipe_id,
        "name_recipe": f"Recipe {recipe_id}",
        "desc_recipe": "desc",
        "cooking_time": 30,
        "directions": "cook",
        "background": "story",
        "id_ingredient": ingredient_id,
        "name_ingredient": f"ingredient {ingredient_id}",
        "quantity": 1.5,
        "unit": "cups",
        "image": image,
        "id_grandma": 7,
        "grandma_name": "Carmen",
        "grandma_lastname": "Vázquez",
        "grandma_city": "Betanzos",
        "grandma_province": "A Coruña",
        "grandma_photo": None,
    }
    row.update(overrides)
    return row


def _cross_join(recipe_id, ingredient_ids, images):
    return [
        _row(recipe_id, ingredient_id, image)
        for ingredient_id in ingredient_ids
        for image in images
    ]


class TestAggregateRecipes:

    def test_rows_match_query_projection(self):
        """The keys aggregation reads are exactly the labels the join selects."""
        labels = RecipeService._joined_rows_query().selected_columns.keys()

        assert set(_row(1, 1, "a.jpg")) == set(labels)

    def test_empty_rows(self):
        assert aggregate_recipes([]) == []

    def test_recipe_order_is_first_seen(self):
        """Recipes come out in the order their id first appears, not sorted."""
        rows = [_row(5, 1, "a.jpg"), _row(2, 2, "b.jpg"), _row(5, 3, "a.jpg"), _row(9, 4, "c.jpg")]

        recipes = aggregate_recipes(rows)

        assert [r.id_recipe for r in recipes] == [5, 2, 9]

    def test_images_deduplicated_in_first_seen_order(self):
        rows = _cross_join(1, [10, 11], ["x.jpg", "y.jpg", "z.jpg"])

        recipe = aggregate_recipes(rows)[0]

        assert recipe.images == ["x.jpg", "y.jpg", "z.jpg"]

    def test_ingredients_collapsed_by_default(self):
        """2 ingredients × 3 images is 6 rows but only 2 ingredient entries."""
        rows = _cross_join(1, [10, 11], ["x.jpg", "y.jpg", "z.jpg"])
        assert len(rows) == 6

        recipe = aggregate_recipes(rows)[0]

        assert [i.id_ingredient for i in recipe.ingredients] == [10, 11]

    def test_raw_ingredient_duplication_when_not_collapsing(self):
        rows = _cross_join(1, [10, 11], ["x.jpg", "y.jpg", "z.jpg"])

        recipe = aggregate_recipes(rows, collapse_ingredients=False)[0]

        assert len(recipe.ingredients) == 6
        assert [i.id_ingredient for i in recipe.ingredients] == [10, 10, 10, 11, 11, 11]

    def test_falsy_image_not_appended(self):
        rows = [_row(1, 10, ""), _row(1, 11, None), _row(1, 12, "ok.jpg")]

        recipe = aggregate_recipes(rows)[0]

        assert recipe.images == ["ok.jpg"]
        assert len(recipe.ingredients) == 3

    def test_scalar_fields_and_grandma_from_first_row(self):
        rows = [
            _row(1, 10, "a.jpg", name_recipe="Filloas", grandma_photo="carmen.jpg"),
            _row(1, 11, "a.jpg", name_recipe="ignored"),
        ]

        recipe = aggregate_recipes(rows)[0]

        assert recipe.name_recipe == "Filloas"
        assert recipe.grandma.id_grandma == 7
        assert recipe.grandma.name_grandma.name == "Carmen"
        assert recipe.grandma.location.province == "A Coruña"
        assert recipe.grandma.photo == "carmen.jpg"

    def test_wire_format_is_camel_case(self):
        recipe = aggregate_recipes([_row(1, 10, "a.jpg")])[0]

        wire = recipe.model_dump(by_alias=True)

        assert wire["idRecipe"] == 1
        assert wire["cookingTime"] == 30
        assert wire["ingredients"][0]["nameIngredient"] == "ingredient 10"
        assert wire["grandma"]["nameGrandma"]["lastname"] == "Vázquez"
