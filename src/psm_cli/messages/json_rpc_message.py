# psm_cli/messages/json_rpc_message.py
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Command(BaseModel):
    # request id, incremented per submitted line
    id: int = 0

    # method name, "namespace.command"
    method: str

    # positional params: strings, key/value maps or parsed JSON objects
    params: List[Any] = Field(default_factory=list)


class ResponseError(BaseModel):
    code: int = 0
    message: str = ""

    model_config = ConfigDict(extra="allow")


class Response(BaseModel):
    # message id, echoed by the service
    id: Any = None

    # result
    result: Any = None

    # error; a zero code means success
    error: ResponseError = Field(default_factory=ResponseError)

    # Use ConfigDict for Pydantic v2
    model_config = ConfigDict(extra="allow")

    @field_validator("error", mode="before")
    @classmethod
    def _null_error(cls, value: Any) -> Any:
        return {} if value is None else value

    @property
    def ok(self) -> bool:
        return self.error.code == 0
