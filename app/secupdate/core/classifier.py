"""Update classification by label marker."""

import logging

from secupdate.models.config import RunConfig
from secupdate.models.update import (
    CategoryBuckets,
    CategoryMatch,
    UpdateCatalog,
    UpdateCategory,
)

logger = logging.getLogger(__name__)


def enabled_categories(config: RunConfig) -> tuple[UpdateCategory, ...]:
    """Return the categories a run configuration asks for.

    MRTConfigData is bundled with XProtect under the same flag.

    Args:
        config: Run configuration.

    Returns:
        Enabled categories in classification order.
    """
    categories: list[UpdateCategory] = []
    if config.install_xprotect:
        categories.extend((UpdateCategory.XPROTECT, UpdateCategory.MRT_CONFIG_DATA))
    if config.install_safari:
        categories.append(UpdateCategory.SAFARI)
    return tuple(categories)


def classify(catalog: UpdateCatalog, config: RunConfig) -> CategoryBuckets:
    """Sort catalog labels into category buckets.

    Each label is tested against every enabled category with a
    case-sensitive substring check. A label matching several markers is
    placed in each of those buckets.

    Args:
        catalog: Labels in catalog order.
        config: Run configuration selecting the categories.

    Returns:
        CategoryBuckets holding every match in discovery order.
    """
    categories = enabled_categories(config)
    matches: list[CategoryMatch] = []

    for label in catalog:
        for category in categories:
            if category.matches(label):
                matches.append(CategoryMatch(category=category, label=label))
                logger.debug("Label %r matched category %s", label, category.display_name)

    return CategoryBuckets(matches=tuple(matches))
