from pydantic import BaseModel, ConfigDict


class Constraint(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    args: tuple[str, ...] = ()

    def __str__(self) -> str:
        if not self.args:
            return self.name
        return f"{self.name}:{','.join(self.args)}"


class FieldError(BaseModel):
    field: str
    rule: str
    message: str


class ValidationResult(BaseModel):
    errors: list[FieldError] = []

    @property
    def passes(self) -> bool:
        return not self.errors

    def errors_by_field(self) -> dict[str, list[str]]:
        grouped: dict[str, list[str]] = {}
        for error in self.errors:
            grouped.setdefault(error.field, []).append(error.message)
        return grouped
