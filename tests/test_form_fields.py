import pytest

from recipebook.form_fields import (
    FormField,
    TextAreaField,
    TextField,
    TextListField,
)


def test_form_field_is_abstract():
    with pytest.raises(TypeError):
        FormField()


def test_text_field_empty_is_invalid():
    field = TextField("name", "Name")
    assert field.validate() is False


def test_text_field_whitespace_is_invalid():
    field = TextField("name", "Name")
    field.set_text("   \t ")
    assert field.validate() is False


def test_text_field_valid_and_data():
    field = TextField("name", "Name")
    field.set_text(" Soup ")
    assert field.validate() is True
    assert field.data() == {"name": " Soup "}


def test_text_field_emits_validity():
    field = TextField("name", "Name")
    seen = []
    field.valid_changed.connect(seen.append)
    field.set_text("a")
    field.set_text("  ")
    assert seen == [True, False]
    assert field.input_valid is False


def test_text_field_title_settable():
    field = TextField("name", "Name")
    field.title = "Step"
    assert field.title == "Step"


def test_text_area_default_max_length():
    field = TextAreaField("notes", "Notes")
    assert field.max_length == 2048


def test_text_area_length_limit():
    field = TextAreaField("notes", "Notes", max_length=5)
    field.set_text("abcde")
    assert field.validate() is True
    field.set_text("abcdef")
    assert field.validate() is False


def test_text_area_limit_counts_trimmed_text():
    field = TextAreaField("notes", "Notes", max_length=3)
    field.set_text("  abc  ")
    assert field.validate() is True
    assert field.data() == {"notes": "  abc  "}


def test_text_area_blank_invalid_and_signal():
    field = TextAreaField("notes", "Notes")
    seen = []
    field.valid_changed.connect(seen.append)
    field.set_text("\n\n")
    assert seen == [False]
    assert field.validate() is False


def test_text_list_allows_empty_by_default():
    field = TextListField("equipment", "Equipment")
    assert field.validate() is True
    assert field.data() == {"equipment": []}


def test_text_list_requires_item_when_not_allowed_empty():
    field = TextListField("instructions", "Steps", False)
    assert field.validate() is False
    field.add_item("Boil water")
    assert field.validate() is True


def test_text_list_add_emits_and_orders():
    field = TextListField("instructions", "Steps")
    count = []
    field.field_changed.connect(lambda: count.append(1))
    field.add_item("one")
    field.add_item("two")
    assert field.items == ["one", "two"]
    assert len(count) == 2


def test_text_list_remove_rows():
    field = TextListField("instructions", "Steps")
    for item in ["a", "b", "c", "d"]:
        field.add_item(item)
    field.remove_items([0, 2])
    assert field.data() == {"instructions": ["b", "d"]}


def test_text_list_remove_out_of_range():
    field = TextListField("instructions", "Steps")
    field.add_item("a")
    with pytest.raises(IndexError):
        field.remove_items([3])
    assert field.items == ["a"]


def test_text_list_data_is_a_copy():
    field = TextListField("instructions", "Steps")
    field.add_item("a")
    field.data()["instructions"].append("b")
    assert field.items == ["a"]


def test_text_list_button_texts():
    field = TextListField("instructions", "Steps")
    assert (field.add_button_text, field.remove_button_text) == ("Add", "Remove")