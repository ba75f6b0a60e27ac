"""Medal records consumed by the layout engine."""

from __future__ import annotations

import math
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

MEDAL_PREREQUISITE_KIND = "medal"
SUSTAINED_ACHIEVEMENT_KIND = "sustained_achievement"
UNKNOWN_CATEGORY = "unknown"


def positive_years(value: Optional[float]) -> float:
    """Return ``value`` when it is a finite number above zero, else 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    if not math.isfinite(value) or value <= 0:
        return 0.0
    return float(value)


class MedalPrerequisite(BaseModel):
    """Reference to another medal that must be completed first."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    kind: str = Field(default=MEDAL_PREREQUISITE_KIND, validation_alias=AliasChoices("kind", "type"))
    medal_id: Optional[str] = Field(default=None, validation_alias=AliasChoices("medal_id", "medalId"))
    wait_years: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("wait_years", "waitYears", "yearOffset"),
    )

    @property
    def is_medal_reference(self) -> bool:
        return self.kind == MEDAL_PREREQUISITE_KIND and bool(self.medal_id)


class MedalRequirement(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    kind: str = Field(validation_alias=AliasChoices("kind", "type"))
    years_required: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("years_required", "yearsRequired", "yearsOfAchievement"),
    )


class Medal(BaseModel):
    """One achievable unit in the catalog."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(..., min_length=1)
    category: Optional[str] = Field(default=None, validation_alias=AliasChoices("category", "type"))
    category_label: Optional[str] = Field(default=None, validation_alias=AliasChoices("category_label", "typeName"))
    display_label: str = Field(
        default="",
        validation_alias=AliasChoices("display_label", "displayLabel", "displayName", "name"),
    )
    prerequisites: List[MedalPrerequisite] = Field(default_factory=list)
    requirements: List[MedalRequirement] = Field(default_factory=list)

    @property
    def lane_key(self) -> str:
        category = (self.category or "").strip()
        return category or UNKNOWN_CATEGORY

    @property
    def duration_years(self) -> float:
        # Longest sustained-achievement requirement governs; entries do not add up.
        duration = 0.0
        for requirement in self.requirements:
            if requirement.kind != SUSTAINED_ACHIEVEMENT_KIND:
                continue
            duration = max(duration, positive_years(requirement.years_required))
        return duration


__all__ = [
    "MEDAL_PREREQUISITE_KIND",
    "Medal",
    "MedalPrerequisite",
    "MedalRequirement",
    "SUSTAINED_ACHIEVEMENT_KIND",
    "UNKNOWN_CATEGORY",
    "positive_years",
]
