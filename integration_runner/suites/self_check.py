"""Built-in suite that exercises the assertion helpers end to end."""

from integration_runner.expect import ExpectationError
from integration_runner.runner import TestRunner


def register_self_check(runner: TestRunner) -> None:
    """Register the self-check suite on ``runner``."""

    @runner.describe("Assertion helpers")
    def _() -> None:
        @runner.it("to_be_defined accepts falsy values")
        def _() -> None:
            runner.expect(0).to_be_defined()
            runner.expect("").to_be_defined()

        @runner.it("to_be compares scalars by value")
        def _() -> None:
            runner.expect("abc").to_be("abc")
            runner.expect(lambda: runner.expect(1).to_be(True)).to_throw(
                ExpectationError
            )

        @runner.it("to_be_greater_than orders numbers")
        def _() -> None:
            runner.expect(5).to_be_greater_than(3)
            runner.expect(lambda: runner.expect(3).to_be_greater_than(5)).to_throw(
                ExpectationError
            )

        @runner.it("to_throw requires the function to raise")
        def _() -> None:
            runner.expect(lambda: int("not a number")).to_throw(ValueError)
            runner.expect(lambda: runner.expect(lambda: None).to_throw()).to_throw(
                ExpectationError
            )
