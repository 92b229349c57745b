# psm_cli/messages/smd.py
"""
Models for the service mapping description returned by ``system.smd``.

Only the parts needed to build the completion graph are modelled; anything
else the service announces is kept as extra data and ignored.
"""
from typing import Dict, List

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class SMDParameter(BaseModel):
    name: str
    optional: bool = False
    type: str = "string"

    model_config = ConfigDict(extra="allow")


class SMDService(BaseModel):
    name: str = ""
    parameters: List[SMDParameter] = Field(
        default_factory=list,
        validation_alias=AliasChoices("parameters", "Parameters"),
    )

    model_config = ConfigDict(extra="allow")


class SMDResult(BaseModel):
    services: Dict[str, SMDService] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("services", "Services"),
    )

    model_config = ConfigDict(extra="allow")
