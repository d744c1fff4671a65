"""Length bounding for untrusted strings."""

from __future__ import annotations

from input_sanitizer.context import SanitizerComponent
from input_sanitizer.faults import FaultCategory, SanitizerViolation
from input_sanitizer.results import is_blank


class LengthBounder(SanitizerComponent):
    """Cap string length before any expensive normalization or matching runs."""

    category = FaultCategory.LENGTH_BOUND

    def bound(self, value: str | None, max_length: int) -> str | None:
        """Return the first ``max_length`` characters of ``value``.

        Blank input maps to ``None`` without a fault. A negative cap is a
        caller contract violation and is reported as a fault.
        """
        if is_blank(value):
            return None
        assert value is not None

        if max_length < 0:
            self._fault(value, SanitizerViolation("Maximum length cannot be negative."))
            return None

        if len(value) > max_length:
            return value[:max_length]
        return value


__all__ = ["LengthBounder"]
