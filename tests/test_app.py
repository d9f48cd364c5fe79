import pytest

from recipebook.app import STEP_INCOMPLETE, TOPICS, MainWindow, main


def scripted(lines):
    remaining = list(lines)

    def read(prompt):
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return read


def make_window(lines):
    out = []
    return MainWindow(scripted(lines), out.append), out


def test_show_info_contribute():
    window, out = make_window([])
    title, message = window.show_info("contribute")
    assert title == "Contribute"
    assert out == [title, message]
    assert message.startswith("To contribute to this project")


def test_show_info_empty_message_prints_only_title():
    window, out = make_window([])
    assert window.show_info("license") == ("License", "")
    assert out == ["License"]


def test_show_info_unknown_topic():
    window, _ = make_window([])
    with pytest.raises(ValueError):
        window.show_info("nonsense")


def test_full_run_returns_form_data():
    window, out = make_window(
        ["Pancakes", ":next", "Fluffy", ":next", "Mix", ":next",
         "Hot pan", ":next", ":next"]
    )
    result = window.run()
    assert result == {
        "name": "Pancakes",
        "description": "Fluffy",
        "instructions": ["Mix"],
        "notes": "Hot pan",
        "equipment": [],
    }
    assert window.submitted == result


def test_next_on_blank_step_stays():
    window, out = make_window([":next"])
    assert window.run() is None
    assert window.form.current_index == 0
    assert STEP_INCOMPLETE in out


def test_quit_returns_none():
    window, _ = make_window(["Soup", ":quit"])
    assert window.run() is None
    assert window.submitted is None


def test_remove_and_back():
    window, _ = make_window(
        ["Soup", ":next", "Hot", ":next", "Chop", "Boil", ":remove 0", ":back"]
    )
    assert window.run() is None
    instructions = window.form.steps[2]
    assert instructions.items == ["Boil"]
    assert window.form.current_index == 1


def test_topic_command_in_run():
    window, out = make_window([":contact"])
    window.run()
    assert TOPICS["contact"][0] in out


def test_main_exits_cleanly_on_end_of_input(monkeypatch):
    def no_input(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", no_input)
    assert main([]) == 0