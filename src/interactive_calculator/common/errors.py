"""Exceptions raised by the calculator."""


class InputExhaustedError(Exception):
    """Raised when the input stream ends while a value is still expected."""

    def __init__(self, prompt_text: str) -> None:
        self.prompt_text = prompt_text
        super().__init__(f"Input ended while waiting for: {prompt_text!r}")
