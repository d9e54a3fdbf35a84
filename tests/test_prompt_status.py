from __future__ import annotations

from typing import List, Tuple

from zen_engine.modes import KeyInput, Keys
from zen_engine.view import PromptOutcome, PromptSession, StatusMessage


def test_prompt_accumulates_printable_input() -> None:
    calls: List[Tuple[str, str]] = []
    session = PromptSession("Find: ", lambda key, text: calls.append((key.key, text)))

    session.feed(KeyInput.char("a"))
    session.feed(KeyInput.char("b"))
    session.feed(KeyInput(Keys.BACKSPACE))
    session.feed(KeyInput.ctrl("x"))

    assert session.display == "Find: a"
    assert calls == [("a", "a"), ("b", "ab"), (Keys.BACKSPACE, "a"), ("x", "a")]
    assert session.active


def test_prompt_enter_submits_without_callback() -> None:
    calls: List[str] = []
    session = PromptSession("Save as: ", lambda key, text: calls.append(text))
    session.feed(KeyInput.char("x"))

    assert session.feed(KeyInput(Keys.ENTER)) is PromptOutcome.SUBMIT

    assert session.result == "x"
    assert calls == ["x"]
    assert not session.active


def test_prompt_escape_cancels_and_clears() -> None:
    session = PromptSession("Save as: ")
    session.feed(KeyInput.char("x"))

    assert session.feed(KeyInput(Keys.ESC)) is PromptOutcome.CANCEL

    assert session.result is None
    assert session.text == ""


def test_prompt_empty_submit_returns_none() -> None:
    session = PromptSession(":")

    session.feed(KeyInput(Keys.ENTER))

    assert session.outcome is PromptOutcome.SUBMIT
    assert session.result is None


def test_prompt_ignores_keys_after_completion() -> None:
    session = PromptSession(":")
    session.feed(KeyInput(Keys.ENTER))

    assert session.feed(KeyInput.char("z")) is PromptOutcome.SUBMIT
    assert session.text == ""


def test_status_message_visibility() -> None:
    message = StatusMessage.from_text("hi", clock=lambda: 10.0)

    assert message.is_visible(14.9, 5.0)
    assert not message.is_visible(15.0, 5.0)
    assert not StatusMessage("", 10.0).is_visible(10.0, 5.0)


def test_status_message_defaults_to_monotonic_clock() -> None:
    from zen_engine.view import status

    message = status.StatusMessage.from_text("x")

    assert message.text == "x"
    assert message.is_visible(message.time, 5.0)
    assert StatusMessage().time > 0
