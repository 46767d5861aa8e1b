"""Prompt the user until a valid number or operator is entered."""
from collections.abc import Callable
import math
import re
from typing import Optional, cast

from pydantic import BaseModel, ConfigDict, Field

from interactive_calculator.common.errors import InputExhaustedError
from interactive_calculator.common.logger import logger
from interactive_calculator.common.models import VALID_OPERATORS, Operator

DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
INFINITY_RE = re.compile(r"([+-]?)Infinity")
PREFIXED_INT_RE = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")

EMPTY_NUMBER_MESSAGE = "Input tidak boleh kosong atau dibatalkan. Silakan coba lagi."
EMPTY_OPERATOR_MESSAGE = "Operator tidak boleh kosong atau dibatalkan. Silakan coba lagi."


def parse_number(text: str) -> Optional[float]:
    """
    Parse a numeric literal, ignoring surrounding whitespace.

    Accepted forms:
        - decimal integers and floats, with optional sign and exponent: ``-3``, ``.5``, ``1e3``
        - ``Infinity`` with optional sign
        - unsigned hexadecimal, octal and binary integers: ``0x1F``, ``0o17``, ``0b101``

    :param str text: Raw user input

    :return: Parsed value, or None if the text is not a number
    :rtype: Optional[float]
    """
    text = text.strip()

    if DECIMAL_RE.fullmatch(text):
        return float(text)

    match = INFINITY_RE.fullmatch(text)
    if match:
        return -math.inf if match.group(1) == "-" else math.inf

    if PREFIXED_INT_RE.fullmatch(text):
        try:
            return float(int(text, 0))
        except OverflowError:
            return math.inf

    return None


class InputValidator(BaseModel):
    """
    Blocking prompts with unbounded retries.

    The reader receives the prompt text and returns the typed line, None when
    the user cancelled, or raises EOFError when the input stream is exhausted.
    The writer receives every feedback message.
    """

    model_config = ConfigDict(frozen=True)

    reader: Callable[[str], Optional[str]] = Field(default=input, description="Reads one line of user input")
    writer: Callable[[str], None] = Field(default=print, description="Displays feedback to the user")

    def read(self, prompt_text: str) -> Optional[str]:
        """
        Read one answer for ``prompt_text``.

        :param str prompt_text: Prompt displayed to the user

        :return: Raw answer, or None if the read was cancelled
        :rtype: Optional[str]
        :raises InputExhaustedError: If the input stream has ended
        """
        try:
            return self.reader(prompt_text)
        except EOFError as exc:
            logger.error(f"Input exhausted at prompt {prompt_text!r}")
            raise InputExhaustedError(prompt_text) from exc

    def request_number(self, prompt_text: str) -> float:
        """
        Prompt until the user enters a valid number.

        :param str prompt_text: Prompt displayed to the user

        :return: Parsed operand
        :rtype: float
        :raises InputExhaustedError: If the input stream ends first
        """
        while True:
            raw = self.read(prompt_text)

            if raw is None or not raw.strip():
                logger.warning("Empty or cancelled number input")
                self.writer(EMPTY_NUMBER_MESSAGE)
                continue

            value = parse_number(raw)
            if value is not None:
                logger.debug(f"Accepted number {value} from {raw!r}")
                return value

            logger.warning(f"Rejected non-numeric input {raw!r}")
            self.writer(f'"{raw}" bukan angka yang valid. Silakan masukkan angka.')

    def request_operator(self, prompt_text: str) -> Operator:
        """
        Prompt until the user enters one of the supported operators.

        :param str prompt_text: Prompt displayed to the user

        :return: Operator symbol
        :rtype: Operator
        :raises InputExhaustedError: If the input stream ends first
        """
        while True:
            raw = self.read(prompt_text)

            if raw is None or not raw.strip():
                logger.warning("Empty or cancelled operator input")
                self.writer(EMPTY_OPERATOR_MESSAGE)
                continue

            symbol = raw.strip()
            if symbol in VALID_OPERATORS:
                logger.debug(f"Accepted operator {symbol!r}")
                return cast(Operator, symbol)

            logger.warning(f"Rejected operator {raw!r}")
            self.writer(f'Operator "{raw}" tidak valid. Yang diizinkan: {", ".join(VALID_OPERATORS)}.')
