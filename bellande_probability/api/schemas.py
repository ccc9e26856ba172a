from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from bellande_probability.core.validation import ParseError


class AuthTier(str, Enum):
    OPENSOURCE = "bellande_web_api_opensource"
    FULL = "bellande_web_api_full_auth"

    @classmethod
    def from_flag(cls, full_auth: bool) -> "AuthTier":
        return cls.FULL if full_auth else cls.OPENSOURCE

    @property
    def key(self) -> str:
        return "full_authorization_key" if self is AuthTier.FULL else "authorization_key"

    @property
    def endpoint(self) -> str:
        if self is AuthTier.FULL:
            return "bellande_probability_full_auth"
        return "bellande_probability"

    def auth_object(self) -> dict[str, str]:
        return {self.key: self.value}


class FunctionPayload(BaseModel):
    model_config = ConfigDict(frozen=True)

    mu_func: str
    sigma_func: str
    x: Any
    dimensions: int


class CoordinatePayload(BaseModel):
    model_config = ConfigDict(frozen=True)

    node0: Any
    node1: Any
    threshold: float = Field(allow_inf_nan=False)
    dimensions: int


ProbabilityPayload = Union[FunctionPayload, CoordinatePayload]


def make_payload(model: type[BaseModel], **fields: Any) -> ProbabilityPayload:
    """Build a payload model, reporting bad field values as ParseError."""
    try:
        return model(**fields)
    except ValidationError as e:
        err = e.errors()[0]
        name = str(err["loc"][0]).replace("_", "-") if err["loc"] else model.__name__
        raise ParseError(f"--{name}: {err['msg']}") from e
