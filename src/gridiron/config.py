from __future__ import annotations
from pydantic import BaseModel, Field
from typing import Literal, Optional
import yaml

from gridiron.constants import LOG_CAPACITY

class FieldCfg(BaseModel):
    variant: Literal["flat", "hex"] = "flat"

class RulesCfg(BaseModel):
    safety_ends_play: bool = True
    log_capacity: int = Field(default=LOG_CAPACITY, ge=1)

class FullConfig(BaseModel):
    seed: Optional[int] = None
    field: FieldCfg = Field(default_factory=FieldCfg)
    rules: RulesCfg = Field(default_factory=RulesCfg)

def load_config(path: str) -> FullConfig:
    with open(path, "r") as f:
        raw = yaml.safe_load(f) or {}
    return FullConfig.model_validate(raw)
