import uuid

from recipebook.recipe_ingredient import RecipeIngredient


def test_fields_are_stored():
    recipe_id = uuid.uuid4()
    ingredient_id = uuid.uuid4()
    link = RecipeIngredient(recipe_id, ingredient_id, "2", "cups")
    assert link.recipe_id == recipe_id
    assert link.ingredient_id == ingredient_id
    assert link.quantity == "2"
    assert link.unit == "cups"


def test_gets_its_own_identifier():
    recipe_id = uuid.uuid4()
    ingredient_id = uuid.uuid4()
    first = RecipeIngredient(recipe_id, ingredient_id, "1", "g")
    second = RecipeIngredient(recipe_id, ingredient_id, "1", "g")
    assert first.id != second.id
    assert first.id not in (recipe_id, ingredient_id)


def test_fields_can_be_changed():
    link = RecipeIngredient(uuid.uuid4(), uuid.uuid4(), "1", "g")
    new_recipe = uuid.uuid4()
    link.recipe_id = new_recipe
    link.quantity = "3"
    link.unit = "kg"
    assert (link.recipe_id, link.quantity, link.unit) == (new_recipe, "3", "kg")