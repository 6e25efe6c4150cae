from __future__ import annotations


class DetectionError(Exception):
    """Base class for failures recovered by the detection engine."""

    reason = "Error analyzing text"

    def __init__(self, message: str, *, reason: str | None = None) -> None:
        super().__init__(message)
        if reason is not None:
            self.reason = reason


class TooShortInputError(DetectionError):
    """Trimmed input is shorter than the configured minimum length."""

    reason = "Text too short for reliable analysis"


class InsufficientDataError(DetectionError):
    """Tokenization produced too few sentences or words to measure reliably."""

    reason = "Not enough sentences or words for reliable analysis"


class ComputationFault(DetectionError):
    """A feature or score failed to produce a finite value."""

    def __init__(self, message: str, *, feature: str | None = None) -> None:
        super().__init__(message)
        self.feature = feature
