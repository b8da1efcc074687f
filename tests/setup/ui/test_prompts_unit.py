"""Tests for ``starterkit.setup.ui.prompts``."""

from types import SimpleNamespace

import pytest

from starterkit.exceptions import PromptCancelledError, UserInputError
from starterkit.setup import console_helpers as ch
from starterkit.setup.ui import prompts


class _Question:
    def __init__(self, answer):
        self.answer = answer

    def ask(self):
        return self.answer


@pytest.fixture
def fake_questionary(monkeypatch):
    """Pretend to be on a TTY and answer every questionary prompt."""
    calls = []
    answers = {}

    def text(prompt, default="", validate=None):
        calls.append(("text", prompt, default, validate))
        return _Question(answers.get("text"))

    def select(prompt, choices, default=None):
        calls.append(("select", prompt, list(choices), default))
        return _Question(answers.get("select"))

    monkeypatch.setattr(prompts, "_stdin_is_tty", lambda: True)
    monkeypatch.setattr(ch, "questionary", SimpleNamespace(text=text, select=select))
    return SimpleNamespace(calls=calls, answers=answers)


def test_ask_text_questionary(fake_questionary):
    fake_questionary.answers["text"] = "  demo  "
    assert prompts.ask_text("Project name:", default="x") == "demo"
    kind, prompt, default, _validate = fake_questionary.calls[0]
    assert (kind, prompt, default) == ("text", "Project name:", "x")


def test_ask_text_questionary_cancel(fake_questionary):
    fake_questionary.answers["text"] = None
    with pytest.raises(PromptCancelledError):
        prompts.ask_text("Project name:")


def test_ask_select_questionary(fake_questionary):
    fake_questionary.answers["select"] = "pnpm"
    assert prompts.ask_select("Pick", ["yarn", "pnpm", "npm"]) == "pnpm"
    assert fake_questionary.calls[0][2] == ["yarn", "pnpm", "npm"]


def test_ask_select_questionary_cancel(fake_questionary):
    fake_questionary.answers["select"] = None
    with pytest.raises(PromptCancelledError):
        prompts.ask_select("Pick", ["a", "b"])


def test_ask_text_fallback_default(feed_input):
    asked = feed_input("")
    assert prompts.ask_text("Project name:", default="demo") == "demo"
    assert asked == ["Project name: (demo) "]


def test_ask_text_fallback_reprompts_until_valid(feed_input, capsys):
    feed_input("bad name", "good-name")
    value = prompts.ask_text(
        "Project name:", validate=lambda v: True if " " not in v else "no spaces"
    )
    assert value == "good-name"
    assert "no spaces" in capsys.readouterr().out


def test_ask_text_fallback_gives_up(feed_input):
    feed_input(*(["x y"] * 10))
    with pytest.raises(UserInputError):
        prompts.ask_text("Name:", validate=lambda v: "nope")


def test_ask_text_fallback_eof_is_cancel(feed_input):
    feed_input()
    with pytest.raises(PromptCancelledError):
        prompts.ask_text("Name:")


@pytest.mark.parametrize("answer, expected", [("2", "pnpm"), ("npm", "npm"), ("1", "yarn")])
def test_ask_select_fallback(feed_input, answer, expected):
    feed_input(answer)
    assert prompts.ask_select("Pick", ["yarn", "pnpm", "npm"]) == expected


def test_ask_select_fallback_lists_options(feed_input, capsys):
    feed_input("1")
    prompts.ask_select("Which one?", ["express-api", "express-api-typeorm"])
    out = capsys.readouterr().out
    assert "Which one?" in out
    assert "1. express-api" in out
    assert "2. express-api-typeorm" in out


def test_ask_select_fallback_only_returns_choices(feed_input, capsys):
    feed_input("bun", "0", "4", "3")
    assert prompts.ask_select("Pick", ["yarn", "pnpm", "npm"]) == "npm"
    assert capsys.readouterr().out.count("Invalid choice") == 3


def test_ask_select_fallback_empty_uses_default(feed_input):
    feed_input("")
    assert prompts.ask_select("Pick", ["yarn", "npm"], default="npm") == "npm"


def test_ask_select_fallback_gives_up(feed_input):
    feed_input(*(["?"] * 10))
    with pytest.raises(UserInputError, match="Too many invalid answers"):
        prompts.ask_select("Pick", ["yarn"])
