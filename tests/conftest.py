"""Shared fixtures driving the calculator with scripted input."""
from typing import Iterable, List, Optional

import pytest

from interactive_calculator.console.validator import InputValidator


class ScriptedReader:
    """Fake reader returning scripted answers, then signalling end of input."""

    def __init__(self, answers: Iterable[Optional[str]]):
        self.answers = list(answers)
        self.prompts: List[str] = []

    def __call__(self, prompt_text: str) -> Optional[str]:
        self.prompts.append(prompt_text)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


class Transcript:
    """Collects everything written to the user."""

    def __init__(self):
        self.messages: List[str] = []

    def __call__(self, message: str) -> None:
        self.messages.append(message)

    @property
    def text(self) -> str:
        return "\n".join(self.messages)


@pytest.fixture
def transcript() -> Transcript:
    return Transcript()


@pytest.fixture
def make_validator(transcript: Transcript):
    """Build an InputValidator fed by the given answers."""

    def factory(*answers: Optional[str]) -> InputValidator:
        return InputValidator(reader=ScriptedReader(answers), writer=transcript)

    return factory
