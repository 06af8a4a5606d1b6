"""Result schemas produced by the initializer."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from ..kinds import PackageKind


class InitReport(BaseModel):
    """Summary of a completed package initialisation."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    destination: str = Field(..., description="Directory the package was written to.")
    kind: PackageKind = Field(..., description="Kind of package that was created.")
    package_name: str = Field(..., description="Display name taken from the destination basename.")
    module_name: str = Field(..., description="Identifier used in generated sources.")
    created: List[str] = Field(default_factory=list, description="Relative paths written, in emission order.")
    skipped: List[str] = Field(default_factory=list, description="Relative paths left untouched because they existed.")


__all__ = ["InitReport"]
