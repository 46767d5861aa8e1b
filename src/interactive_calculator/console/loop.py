"""Interactive read-compute-print loop."""
from pydantic import BaseModel, ConfigDict, Field

from interactive_calculator.common.logger import logger
from interactive_calculator.common.models import CalculationRequest
from interactive_calculator.common.operations import calculate
from interactive_calculator.console.classifier import analyze_result
from interactive_calculator.console.validator import InputValidator

FIRST_NUMBER_PROMPT = "Masukkan angka pertama:"
OPERATOR_PROMPT = "Masukkan operator (+, -, *, /, %, **):"
SECOND_NUMBER_PROMPT = "Masukkan angka kedua:"
CONTINUE_PROMPT = "Apakah Anda ingin melakukan perhitungan lagi? (ketik 'yes' atau 'no')"
FAREWELL_MESSAGE = "Terima kasih telah menggunakan Kalkulator!"


class CalculatorLoop(BaseModel):
    """
    Calculator session running until the user answers "no".

    Each iteration:
        1. Reads the first operand, the operator and the second operand.
        2. Dispatches to the matching arithmetic operation.
        3. Prints the analysis report of the result.
        4. Asks whether to continue.
    """

    model_config = ConfigDict(frozen=True)

    validator: InputValidator = Field(default_factory=InputValidator, description="Prompts used for every read")

    def read_request(self) -> CalculationRequest:
        """
        Read the operands and the operator of one calculation.

        :return: Validated calculation request
        :rtype: CalculationRequest
        """
        left = self.validator.request_number(FIRST_NUMBER_PROMPT)
        operator = self.validator.request_operator(OPERATOR_PROMPT)
        right = self.validator.request_number(SECOND_NUMBER_PROMPT)
        return CalculationRequest(left=left, operator=operator, right=right)

    def wants_another(self) -> bool:
        """Only an explicit "no" stops the session; a cancelled answer continues."""
        answer = self.validator.read(CONTINUE_PROMPT)
        return answer is None or answer.lower() != "no"

    def run(self) -> int:
        """
        Run calculations until the user opts out.

        :return: Number of completed calculations
        :rtype: int
        :raises InputExhaustedError: If the input stream ends mid-session
        """
        logger.info("🧮 Calculator session started")
        count = 0

        while True:
            request = self.read_request()
            result = calculate(request.left, request.operator, request.right)
            count += 1
            logger.info(f"🧮 Calculation {count}: {request.left} {request.operator} {request.right} -> {result.kind}")

            self.validator.writer(analyze_result(result))

            if not self.wants_another():
                break

        self.validator.writer(FAREWELL_MESSAGE)
        logger.info(f"🧮 Calculator session finished after {count} calculation(s)")
        return count
