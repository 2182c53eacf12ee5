"""
Kiroween competition categories.

The four categories form a closed set; their canonical order is the
declaration order of KiroweenCategory and decides tie-breaks when two
categories score the same.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Optional, Tuple, Union


class KiroweenCategory(str, Enum):
    """Competition category tags."""
    RESURRECTION = "resurrection"
    FRANKENSTEIN = "frankenstein"
    SKELETON_CREW = "skeleton-crew"
    COSTUME_CONTEST = "costume-contest"

    @classmethod
    def parse(cls, value: Union["KiroweenCategory", str, None]) -> Optional["KiroweenCategory"]:
        """Return the member for a tag, or None for unknown tags."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None

    @property
    def definition(self) -> "CategoryDefinition":
        return CATEGORY_DEFINITIONS[self]


@dataclass(frozen=True)
class CategoryDefinition:
    name: str
    description: str
    keywords: Tuple[str, ...]


# Frozen - scoring is calibrated against these exact lexicons
CATEGORY_DEFINITIONS = MappingProxyType({
    KiroweenCategory.RESURRECTION: CategoryDefinition(
        name="Resurrection",
        description="Reviving obsolete technology with modern innovations",
        keywords=(
            "legacy", "old", "vintage", "retro", "revival",
            "modernize", "update", "refresh", "reboot",
        ),
    ),
    KiroweenCategory.FRANKENSTEIN: CategoryDefinition(
        name="Frankenstein",
        description="Integration of seemingly incompatible technologies",
        keywords=(
            "integration", "combine", "merge", "hybrid", "fusion",
            "incompatible", "different", "mix", "blend",
        ),
    ),
    KiroweenCategory.SKELETON_CREW: CategoryDefinition(
        name="Skeleton Crew",
        description="Flexible foundation with multiple use cases",
        keywords=(
            "framework", "foundation", "flexible", "extensible", "modular",
            "adaptable", "versatile", "platform", "base",
        ),
    ),
    KiroweenCategory.COSTUME_CONTEST: CategoryDefinition(
        name="Costume Contest",
        description="UI polish and spooky design elements",
        keywords=(
            "ui", "design", "visual", "interface", "polish",
            "aesthetic", "theme", "spooky", "halloween",
        ),
    ),
})


def category_name(category: Union[KiroweenCategory, str]) -> str:
    """Display name for a category tag; unknown tags are returned as-is."""
    member = KiroweenCategory.parse(category)
    if member is None:
        return str(category)
    return member.definition.name
