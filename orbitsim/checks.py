"""A small self-reporting test harness with floating-point tolerance."""

from __future__ import annotations

import inspect
import sys
from dataclasses import dataclass

DEFAULT_TOLERANCE = 0.0001


def close_enough(value: float, test: float, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """True when value and test differ by no more than tolerance."""
    difference = value - test
    return -tolerance <= difference <= tolerance


@dataclass(frozen=True)
class Failure:
    """One failed condition and the line it was checked on."""

    description: str
    line: int


class UnitTest:
    """Collects check results per calling test function and reports them."""

    def __init__(self, tolerance: float = DEFAULT_TOLERANCE) -> None:
        self.tolerance = tolerance
        self.tests: dict[str, list[Failure]] = {}

    def reset(self) -> None:
        """Forget every recorded result."""
        self.tests.clear()

    def _record(self, condition: bool, description: str, depth: int) -> bool:
        frame = inspect.currentframe()
        try:
            for _ in range(depth):
                if frame is None:
                    break
                frame = frame.f_back
            name = frame.f_code.co_name if frame is not None else "<unknown>"
            line = frame.f_lineno if frame is not None else 0
        finally:
            del frame
        failures = self.tests.setdefault(name, [])
        if not condition:
            failures.append(Failure(description, line))
        return bool(condition)

    def check(self, condition: bool, description: str = "") -> bool:
        """Record a condition under the name of the calling function."""
        return self._record(condition, description, depth=2)

    def assert_equals(self, value: float, test: float, tolerance: float | None = None) -> bool:
        """Record whether value is within tolerance of test."""
        tol = self.tolerance if tolerance is None else tolerance
        return self._record(close_enough(value, test, tol), repr(test), depth=2)

    def report(self, name: str) -> str:
        """Print and return a summary of the results, then reset them."""
        parts: list[str] = []
        for test_name in sorted(self.tests):
            failures = self.tests[test_name]
            if failures:
                parts.append(f"\t{test_name}()\n")
                parts.extend(
                    f"\t\tline:{f.line} condition:{f.description}\n" for f in failures
                )
        parts.append(f"{name:<15}:\t")
        if not self.tests:
            parts.append("There were no tests\n")
            text = "".join(parts)
            sys.stdout.write(text)
            return text
        successes = sum(1 for failures in self.tests.values() if not failures)
        rate = successes / len(self.tests) * 100.0
        parts.append(
            f"There were {len(self.tests)} tests run for a success rate of: {rate:.1f}%\n"
        )
        text = "".join(parts)
        sys.stdout.write(text)
        self.reset()
        return text