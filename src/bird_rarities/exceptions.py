"""Errors that end a pipeline run."""

from __future__ import annotations


class RarityPipelineError(RuntimeError):
    """Base class for conditions that leave nothing to report."""


class NoValidDataError(RarityPipelineError):
    """No input file produced a usable data row."""

    def __init__(self, message: str = "No valid data found in any input file") -> None:
        super().__init__(message)


class NoUSObservationsError(RarityPipelineError):
    """Rows were merged, but none is a valid US observation."""

    def __init__(self, preview: list[str] | None = None) -> None:
        self.preview = preview or []
        super().__init__("No valid US observations found")

    def __reduce__(self) -> tuple[type[NoUSObservationsError], tuple[list[str]]]:
        return (type(self), (self.preview,))

    def __str__(self) -> str:
        message = super().__str__()
        if not self.preview:
            return message
        lines = "\n".join(f"  {line}" for line in self.preview)
        return f"{message}. First merged rows:\n{lines}"
