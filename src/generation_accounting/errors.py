from __future__ import annotations


class GenerationAccountingError(Exception):
    """Base class for failures that abort the processing of one document."""


class ReferenceDataMissingError(GenerationAccountingError, LookupError):
    """Raised when a generator identity has no reference factors."""

    def __init__(self, identity: str, available: list[str] | None = None) -> None:
        self.identity = identity
        self.available = sorted(available or [])
        message = f"No reference data for generator '{identity}'."
        if self.available:
            message += f" Available: {', '.join(self.available)}"
        super().__init__(message)


class StructuralMissingError(GenerationAccountingError, ValueError):
    """Raised when a required element is absent from an input document."""

    def __init__(self, element: str, context: str | None = None) -> None:
        self.element = element
        self.context = context
        where = f" in {context}" if context else ""
        super().__init__(f"Required element '{element}' missing{where}.")


class ReferenceDataInvalidError(GenerationAccountingError, ValueError):
    """Raised when a reference factor tier holds text that is not a number."""

    def __init__(self, container: str, tier: str, text: str) -> None:
        self.container = container
        self.tier = tier
        self.text = text
        super().__init__(f"Reference factor {container}/{tier} is not a number: '{text}'.")
