from __future__ import annotations

from pathlib import Path
from typing import List, Literal, Optional

import yaml
from pydantic import BaseModel, Field, model_validator

from .engine.base import CheckDigit, Descriptor
from .engine.alphabet import IndexMap
from .engine.hybrid import HybridSystem, hybrid_descriptor
from .engine.pure import PureSystem

# ---- Logging ----
class LoggingConfig(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    json_logs: bool = True  # structlog JSON renderer; False uses the console renderer


# ---- User-declared ISO/IEC 7064 style algorithms ----
class CustomAlgorithm(BaseModel):
    kind: Literal["pure", "hybrid"]
    name: str
    modulus: int = Field(ge=2)
    radix: Optional[int] = None  # hybrid: always modulus - 1
    check_digit_length: Literal[1, 2] = 1
    alphabet: str
    excluded: str = ""  # check-only characters, rejected in the payload

    @model_validator(mode="after")
    def _check_shape(self) -> "CustomAlgorithm":
        if len(set(self.alphabet)) != len(self.alphabet):
            raise ValueError("alphabet contains duplicate characters")
        if any(ch not in self.alphabet for ch in self.excluded):
            raise ValueError("excluded characters must be part of the alphabet")
        if self.kind == "hybrid":
            if self.check_digit_length != 1:
                raise ValueError("hybrid systems have a single check character")
            if len(self.alphabet) != self.modulus - 1:
                raise ValueError(f"hybrid alphabet needs {self.modulus - 1} characters, got {len(self.alphabet)}")
            if self.radix not in (None, self.modulus - 1):
                raise ValueError("hybrid radix is modulus - 1")
            return self
        if self.radix is None or self.radix < 2:
            raise ValueError("pure systems need a radix >= 2")
        # every check value must be encodable
        needed = self.modulus if self.check_digit_length == 1 else self.radix
        if len(self.alphabet) < needed:
            raise ValueError(f"alphabet needs at least {needed} characters, got {len(self.alphabet)}")
        if self.check_digit_length == 2 and self.radix * self.radix < self.modulus:
            raise ValueError("two check characters cannot encode every check value")
        return self

    def build(self) -> CheckDigit:
        """Engine instance for this declaration."""
        if self.kind == "hybrid":
            return HybridSystem(hybrid_descriptor(self.name, self.alphabet), IndexMap(self.alphabet, self.excluded))
        descriptor = Descriptor(self.name, self.modulus, self.radix, self.check_digit_length, self.alphabet)
        return PureSystem(descriptor, IndexMap(self.alphabet, self.excluded))


# ---- Root config ----
class ModcheckConfig(BaseModel):
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    algorithms: List[CustomAlgorithm] = Field(default_factory=list)


# ---- Loader ----
def load_config(path: Optional[Path]) -> ModcheckConfig:
    if not path:
        return ModcheckConfig()
    data = yaml.safe_load(Path(path).read_text()) or {}
    return ModcheckConfig(**data)
