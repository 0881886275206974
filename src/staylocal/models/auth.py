"""Authentication models."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel


class User(BaseModel):
    """An authenticated marketplace user."""

    model_config = ConfigDict(
        strict=False,
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    id: int
    username: str
    email: EmailStr
    name: str
    is_host: bool = False
    phone: Optional[str] = None


class Credentials(BaseModel):
    """Username/password pair exchanged with the identity collaborator."""

    model_config = ConfigDict(strict=True)

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
