"""Update catalog parsing.

softwareupdate -l prints one block per update, for example::

    Software Update found the following new or updated software:
    * Label: XProtectPlistConfigData_10_15-5288
        Title: XProtectPlistConfigData, Version: 5288, Size: 1234KiB,

Only the ``Label:`` lines are used; everything else is ignored.
"""

import logging
import re

from secupdate.models.update import UpdateCatalog

logger = logging.getLogger(__name__)

# Optional leading whitespace and "*" marker, then "Label:" in any case
LABEL_PATTERN = re.compile(r"^\s*\*?\s*label:\s*(?P<label>.+)$", re.IGNORECASE)


def parse_label_line(line: str) -> str | None:
    """Extract the label from one line of catalog output.

    Args:
        line: A single line of softwareupdate -l output.

    Returns:
        The trimmed label, or None if the line is not a label line.
    """
    match = LABEL_PATTERN.match(line)
    if match is None:
        return None
    label = match.group("label").strip()
    return label or None


def extract_labels(text: str) -> UpdateCatalog:
    """Extract update labels from raw catalog text.

    Args:
        text: Full softwareupdate -l output.

    Returns:
        Labels in the order they appear in the text.
    """
    labels: list[str] = []
    for line in text.splitlines():
        label = parse_label_line(line)
        if label is not None:
            labels.append(label)

    logger.debug("Extracted %d label(s) from catalog output", len(labels))
    return tuple(labels)
