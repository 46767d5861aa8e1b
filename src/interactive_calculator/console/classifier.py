"""Describe a calculation result in a human-readable report."""
from decimal import ROUND_HALF_UP, Decimal
import math
from typing import List, Optional

from interactive_calculator.common.models import CalculationResult, ErrorResult, NumericResult
from interactive_calculator.common.operations import modulo

MISSING_RESULT_MESSAGE = "Result is undefined or null, something went wrong!"

# Decimal point positions outside (-6, 21] switch to exponent notation
MIN_PLAIN_POSITION = -6
MAX_PLAIN_POSITION = 21


def format_number(value: float) -> str:
    """
    Render a number the way it is shown to the user.

    Uses the shortest digits that round-trip, in plain notation when the
    decimal point falls within 21 places left or 6 places right of them,
    otherwise in exponent notation (``1e+21``, ``1e-7``). Integral values
    have no fractional part; non-finite values read ``Infinity``,
    ``-Infinity`` and ``NaN``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()
    digits = "".join(map(str, digit_tuple)).lstrip("0")
    stripped = digits.rstrip("0")
    exponent += len(digits) - len(stripped)
    digits = stripped

    # Position of the decimal point relative to the first digit
    point = len(digits) + exponent

    if len(digits) <= point <= MAX_PLAIN_POSITION:
        text = digits + "0" * (point - len(digits))
    elif 0 < point <= MAX_PLAIN_POSITION:
        text = f"{digits[:point]}.{digits[point:]}"
    elif MIN_PLAIN_POSITION < point <= 0:
        text = "0." + "0" * -point + digits
    else:
        mantissa = digits if len(digits) == 1 else f"{digits[0]}.{digits[1:]}"
        shown = point - 1
        text = f"{mantissa}e{'+' if shown >= 0 else '-'}{abs(shown)}"

    return sign + text


def format_fixed(value: float) -> str:
    """Two decimal places, exact ties rounded away from zero."""
    if not math.isfinite(value):
        return format_number(value)
    return str(Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def format_result(result: Optional[CalculationResult]) -> str:
    if result is None:
        return "None"
    if result.kind == "error":
        return result.message
    return format_number(result.value)


def _describe_number(result: NumericResult) -> List[str]:
    value = float(result.value)
    is_integer = value.is_integer()

    if value > 0:
        sign = "Nilai: Positif."
    elif value < 0:
        sign = "Nilai: Negatif."
    else:
        # NaN ends up here as well
        sign = "Nilai: Nol."

    if is_integer:
        sign += " (Integer)"
    else:
        fixed = format_fixed(value)
        sign += f" (Floating-Point / Desimal: {fixed})"

    # Parity uses the plain remainder test, fractions included: 3.5 is odd
    parity = "Genap" if modulo(value, 2) == 0 else "Ganjil"

    lines = [sign, f"Paritas: {parity}"]

    if value > 0 and is_integer:
        lines.append("* Catatan: Angka ini Positif dan Integer.")
    elif value < 0 or not is_integer:
        lines.append("* Catatan: Angka ini Negatif atau Desimal.")

    return lines


def _describe_error(result: ErrorResult) -> List[str]:
    return [f"Pesan: {result.message}"]


def analyze_result(result: Optional[CalculationResult]) -> str:
    """
    Build the multi-line analysis report of a result.

    Numeric results are classified by sign, integrality and parity; error
    results are reported verbatim. A missing result yields a default message.

    :param result: Tagged result to describe, or None

    :return: Report ready to be printed
    :rtype: str
    """
    if result is None:
        body = ["Tipe data hasil: none", f"Pesan Default: {MISSING_RESULT_MESSAGE}"]
    elif result.kind == "number":
        body = [f"Tipe data hasil: {result.kind}", *_describe_number(result)]
    else:
        body = [f"Tipe data hasil: {result.kind}", *_describe_error(result)]

    lines = [f"Hasil Akhir: {format_result(result)}", "", "--- Analisis Hasil ---", *body]
    return "\n".join(lines)
