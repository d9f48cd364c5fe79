import uuid

from recipebook.shared_recipe import SharedRecipe


def test_fields_are_stored():
    original = uuid.uuid4()
    author = uuid.uuid4()
    given = uuid.uuid4()
    shared = SharedRecipe(original, author, 5, given)
    assert shared.original_recipe_id == original
    assert shared.author_id == author
    assert shared.like_count == 5
    assert shared.id == given


def test_defaults():
    shared = SharedRecipe()
    assert shared.original_recipe_id is None
    assert shared.author_id is None
    assert shared.like_count == 0


def test_add_then_remove_like_round_trips():
    shared = SharedRecipe(like_count=7)
    user = uuid.uuid4()
    shared.add_like(user)
    assert shared.like_count == 8
    shared.remove_like(user)
    assert shared.like_count == 7


def test_remove_like_at_zero_wraps_like_unsigned_counter():
    shared = SharedRecipe()
    shared.remove_like(uuid.uuid4())
    assert shared.like_count == 0xFFFFFFFF
    shared.add_like(uuid.uuid4())
    assert shared.like_count == 0