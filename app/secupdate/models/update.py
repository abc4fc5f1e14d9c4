"""Update catalog models.

Labels are the opaque identifiers softwareupdate prints for each
installable update. The only structure assumed is that certain marker
substrings identify the update's category.
"""

from dataclasses import dataclass, field
from enum import Enum

# One softwareupdate label, e.g. "XProtectPlistConfigData-2024.01"
UpdateLabel = str

# Labels in the order the catalog listed them
UpdateCatalog = tuple[UpdateLabel, ...]


class UpdateCategory(Enum):
    """Categories of updates secupdate knows how to install.

    The value is the case-sensitive substring a label must contain.
    """

    XPROTECT = "XProtect"
    MRT_CONFIG_DATA = "MRTConfigData"
    SAFARI = "Safari"

    @property
    def marker(self) -> str:
        """Substring identifying labels of this category."""
        return self.value

    @property
    def display_name(self) -> str:
        """Human-readable category name."""
        return self.value

    @property
    def style(self) -> str:
        """Rich style name used when printing this category."""
        styles = {
            UpdateCategory.XPROTECT: "category.xprotect",
            UpdateCategory.MRT_CONFIG_DATA: "category.mrt",
            UpdateCategory.SAFARI: "category.safari",
        }
        return styles[self]

    def matches(self, label: UpdateLabel) -> bool:
        """Check if a label belongs to this category."""
        return self.marker in label


@dataclass(frozen=True, slots=True)
class CategoryMatch:
    """A label matched to one category.

    Attributes:
        category: Category whose marker the label contains.
        label: The matched update label.
    """

    category: UpdateCategory
    label: UpdateLabel


@dataclass(frozen=True, slots=True)
class CategoryBuckets:
    """Result of classifying an update catalog.

    Attributes:
        matches: Every (category, label) match in discovery order. A label
            matching several markers appears once per category.
    """

    matches: tuple[CategoryMatch, ...] = field(default=())

    def bucket(self, category: UpdateCategory) -> tuple[UpdateLabel, ...]:
        """Return the labels in one category, in catalog order."""
        return tuple(m.label for m in self.matches if m.category == category)

    @property
    def xprotect(self) -> tuple[UpdateLabel, ...]:
        """XProtect labels."""
        return self.bucket(UpdateCategory.XPROTECT)

    @property
    def mrtconfigdata(self) -> tuple[UpdateLabel, ...]:
        """MRTConfigData labels."""
        return self.bucket(UpdateCategory.MRT_CONFIG_DATA)

    @property
    def safari(self) -> tuple[UpdateLabel, ...]:
        """Safari labels."""
        return self.bucket(UpdateCategory.SAFARI)

    @property
    def is_empty(self) -> bool:
        """Check if no label matched any category."""
        return not self.matches
