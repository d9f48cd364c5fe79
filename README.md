# recipebook

A small recipe book. It keeps recipes, ingredients and users in memory, and
it walks you through entering a new recipe one step at a time in the terminal.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
recipe-book
```

This starts `recipebook.app.main`, which runs a `MainWindow` on standard input
and output. The form has five steps, in this order:

1. the recipe's name (must not be blank),
2. a description (must not be blank, at most 2048 characters once trimmed),
3. the instructions (a list; at least one item is needed),
4. notes (must not be blank, at most 2048 characters once trimmed),
5. the equipment (a list; may be empty).

A line that does not start with `:` sets the text of the current step or, on
a list step, adds an item to the list. Lines that start with `:` are commands:

- `:next` moves to the next step if the current one is complete, and on the
  last step submits the form and prints the collected data.
- `:back` returns to the previous step.
- `:remove <row> ...` removes the listed rows (numbered from 0) from a list step.
- `:quit` stops without submitting; so does end of input.
- `:help`, `:navigation`, `:license`, `:contribute` and `:contact` print a
  menu topic.

`MainWindow(input_fn, output_fn)` takes the functions used to read a line and
write a line (by default `input` and `print`). `MainWindow.run()` returns the
submitted data as a dictionary, or `None` if the user quit.
`MainWindow.show_info(topic)` prints one menu topic and returns its title and
message; an unknown topic raises `ValueError`.

## Using it as a library

The model classes can be used on their own:

- `recipebook.ingredient.Ingredient` holds a name and a description.
- `recipebook.recipe.Recipe` is an ingredient that also holds instructions,
  equipment, notes, a preparation time in minutes, a shared flag and a like
  count. `remove_instruction` and `remove_equipment` remove every equal item;
  `remove_instruction_at` and `remove_equipment_at` ignore indices out of range.
- `recipebook.user.User` holds a username, a password hash and copies of the
  recipes the user has shared.
- `recipebook.recipe_ingredient.RecipeIngredient` links a recipe to an
  ingredient by their UUIDs, with a quantity and a unit.
- `recipebook.shared_recipe.SharedRecipe` counts the likes on a shared recipe
  as an unsigned 32-bit value (`add_like`, `remove_like`).

`recipebook.storable.Storable` gives an object a UUID (a new one when none or
the nil UUID is given) and emits `id_changed` when it is replaced.
`recipebook.storable.Signal` is a list of callables with `connect`,
`disconnect` and `emit`.

`recipebook.wrappers` has `IngredientWrapper`, `RecipeWrapper` and
`UserWrapper`. Each keeps its own copy of a model object, has a UUID, and
emits a signal such as `name_changed` or `instructions_changed` when a
property changes. `RecipeWrapper.equals` compares identifiers only.

```python
from recipebook.recipe import Recipe
from recipebook.wrappers import RecipeWrapper

wrapper = RecipeWrapper(Recipe("Pancakes", "Fluffy breakfast pancakes"))
wrapper.instructions_changed.connect(lambda: print("instructions updated"))
wrapper.add_instruction("Whisk the batter")
wrapper.add_equipment("Frying pan")
print(wrapper.instructions, wrapper.equipment)
```

`UserWrapper.set_password` stores the SHA-256 hex digest of the password.
`authenticate` compares the string it is given with the stored hash as it
stands, so it succeeds when given the digest, not the plain password:

```python
import hashlib

from recipebook.user import User
from recipebook.wrappers import UserWrapper

user = UserWrapper(User())
user.username = "cook"
password = "password"
user.set_password(password)
digest = hashlib.sha256(password.encode("utf-8")).hexdigest()
print(user.authenticate(digest))  # True
```

### Forms

`recipebook.form_fields` has the fields `TextField`, `TextAreaField` and
`TextListField`, each with `validate()` and `data()`.
`recipebook.carousel_form.CarouselForm` steps through fields in order
(`add_form_step`, `show_next`, `show_previous`) and emits `form_completed`
with the merged data of every step; `RecipeCarouselForm` is the recipe entry
form described above.

`recipebook.recipe_form.RecipeForm` builds a `RecipeWrapper` from values you
set on it when you call `submit()`, and emits `recipe_created`. Its
preparation time and like count are clamped to 0–99.

`recipebook.display_box` has `DisplayBox`, `IngredientDisplayBox` and
`RecipeDisplayBox`. They hold the display state (size, scale, colours, shadow)
and the summary text for an ingredient or a recipe, and follow the wrapper's
changes. `RecipeDisplayBox` emits `clicked` after `press()` and
`release(True)`.

## What it does not do

Everything lives in memory: nothing is saved to disk or to a database, and
recipes entered with `recipe-book` are gone when it exits. There is no
graphical window; the display boxes only keep state and text, and drawing
them is left to the caller.