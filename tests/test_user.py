from recipebook.recipe import Recipe
from recipebook.user import User


def test_defaults():
    user = User()
    assert user.username == ""
    assert user.password_hash == ""
    assert user.shared_recipes == []


def test_authenticate_compares_with_stored_value():
    password = "password"
    user = User(username="alice", password_hash=password)
    assert user.authenticate(password) is True
    assert user.authenticate("secret") is False


def test_add_shared_recipe_stores_a_copy():
    recipe = Recipe("Cake", "Sweet")
    user = User()
    user.add_shared_recipe(recipe)
    recipe.add_instruction("bake")
    assert user.shared_recipes == [Recipe("Cake", "Sweet")]


def test_remove_shared_recipe_removes_only_first_match():
    user = User()
    recipe = Recipe("Bread", "Loaf")
    user.add_shared_recipe(recipe)
    user.add_shared_recipe(recipe)
    user.remove_shared_recipe(Recipe("Bread", "Loaf"))
    assert user.shared_recipes == [recipe]


def test_remove_missing_recipe_is_ignored():
    user = User()
    user.add_shared_recipe(Recipe("A", "B"))
    user.remove_shared_recipe(Recipe("X", "Y"))
    assert user.shared_recipes == [Recipe("A", "B")]