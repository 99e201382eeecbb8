from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from validation.password_rules import ValidationResult

MISSING_PASSWORD_MESSAGE = "Campo 'senha' é obrigatório e deve ser uma string"
INTERNAL_ERROR_MESSAGE = "Erro interno do servidor"


class PasswordValidationRequest(BaseModel):
    password: StrictStr = Field(alias="senha", min_length=1)


class PasswordValidationResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    valid: bool = Field(alias="valida")
    errors: Optional[List[str]] = Field(default=None, alias="erros")

    @classmethod
    def from_result(cls, result: ValidationResult) -> "PasswordValidationResponse":
        if result.valid:
            return cls(valid=True)
        return cls(valid=False, errors=list(result.errors))

    @classmethod
    def failure(cls, message: str) -> "PasswordValidationResponse":
        return cls(valid=False, errors=[message])

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
