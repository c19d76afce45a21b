import re
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

EMAIL_PATTERN = r'^[^@\s]+@[^@\s]+\.[^@\s]+$'

COMMON_PASSWORDS = frozenset({
    'password', 'password1', 'password123', '12345678', '123456789', 'qwerty123', 'senha123',
    'senha@123', 'admin123', 'admin@123', 'abc12345', 'welcome1', 'letmein1', 'iloveyou1',
})


def _normalize_email(value: str) -> str:
    return value.strip().lower()


def _collapse_spaces(value: str) -> str:
    return re.sub(r'\s+', ' ', value)


Email = Annotated[str, Field(max_length=128, pattern=EMAIL_PATTERN), AfterValidator(_normalize_email)]


class AuthSchema(BaseModel):
    model_config = ConfigDict(extra='forbid', str_strip_whitespace=True)


class RegisterRequest(AuthSchema):
    email: Email
    password: Annotated[str, Field(min_length=8, max_length=100)]
    name: Annotated[str, Field(min_length=2, max_length=100), AfterValidator(_collapse_spaces)]

    @field_validator('password')
    @classmethod
    def strong_password(cls, value: str) -> str:
        checks = (
            (r'[A-Z]', 'uma letra maiúscula'),
            (r'[a-z]', 'uma letra minúscula'),
            (r'\d', 'um número'),
            (r'[^A-Za-z0-9]', 'um caractere especial'),
        )
        for pattern, label in checks:
            if not re.search(pattern, value):
                raise PydanticCustomError('weak_password', 'Senha deve conter pelo menos {what}', {'what': label})
        if value.lower() in COMMON_PASSWORDS:
            raise PydanticCustomError('weak_password', 'Senha muito comum')
        return value


class LoginRequest(AuthSchema):
    email: Email
    password: Annotated[str, Field(min_length=1, max_length=100)]

