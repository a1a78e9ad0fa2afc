"""Field error entity."""

from dataclasses import dataclass, field as dataclass_field


@dataclass(frozen=True)
class FieldError:
    """A single rule violation for a named field.

    Attributes:
        field: The field name the violation belongs to.
        message: Human-readable error message.
        code: Machine-readable error code (not part of equality).
    """

    field: str
    message: str
    code: str = dataclass_field(default="", compare=False)

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"
