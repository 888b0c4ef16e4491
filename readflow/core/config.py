"""
Tunable settings for block-aware selection.
"""

from dataclasses import dataclass

from .page.models import InclusionMode


@dataclass(frozen=True)
class SelectionSettings:
    """Tolerances used by selection and text assembly."""

    # Max vertical distance between fragment centers on the same line
    line_tolerance: float = 0.01

    # Max horizontal gap when merging same-line fragments into paint rects
    same_line_merge_gap: float = 0.005

    # Inclusion test used by TextPage.text() when the caller gives none
    default_inclusion: InclusionMode = InclusionMode.CENTRAL_PIXEL


DEFAULT_SETTINGS = SelectionSettings()
