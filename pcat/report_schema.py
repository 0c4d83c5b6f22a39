from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Model(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DemoRun(_Model):
    pattern_id: str
    lines: List[str] = Field(default_factory=list)
    ok: bool = True
    error: Optional[str] = None


class PatternCheck(_Model):
    pattern_id: str
    title: str
    ok: bool
    expected: List[str] = Field(default_factory=list)
    actual: List[str] = Field(default_factory=list)
    error: Optional[str] = None


class VerifyReport(_Model):
    tool_version: str
    catalog: str
    ok: bool
    checks: List[PatternCheck] = Field(default_factory=list)

    @property
    def failed(self) -> List[str]:
        return [c.pattern_id for c in self.checks if not c.ok]
