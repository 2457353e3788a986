"""
Print configuration for shaped array descriptions.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PrintOptions:
    """
    Immutable options controlling `str()` and `description()` output.

    Attributes
    ----------
    line_width : int
        Maximum line width used to decide how many scalars fit on one line of
        a printed vector.
    edge_element_count : int
        Number of leading and trailing elements printed around ``...`` when a
        dimension is summarized.
    summarize_threshold : int
        `str()` summarizes arrays whose scalar count exceeds this value.
    """

    line_width: int = 80
    edge_element_count: int = 3
    summarize_threshold: int = 1000

    def __post_init__(self) -> None:
        if self.line_width < 1:
            raise ValueError(f"line_width must be positive, got {self.line_width}")
        if self.edge_element_count < 0:
            raise ValueError(
                f"edge_element_count must be non-negative, got {self.edge_element_count}"
            )
        if self.summarize_threshold < 0:
            raise ValueError(
                f"summarize_threshold must be non-negative, got {self.summarize_threshold}"
            )

    def should_summarize(self, scalar_count: int) -> bool:
        return scalar_count > self.summarize_threshold


DEFAULT_PRINT_OPTIONS = PrintOptions()
"""Options used by `str(array)`."""
