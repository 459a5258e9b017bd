"""Configuration classes for pathsearch text rendering."""

from dataclasses import dataclass


@dataclass
class PathDisplayConfig:
    """Controls how paths and adjacency lists are rendered as text."""

    # Number of leading and trailing vertices shown before a long path is abbreviated
    display_cut: int = 10

    # Decimal places used when printing a path weight
    weight_precision: int = 2

    # First line of format_adjacency_list output
    adjacency_header: str = "Graph adjacency list:"

    def __post_init__(self) -> None:
        if self.display_cut < 0:
            raise ValueError(f"display_cut must be >= 0, got {self.display_cut}")
        if self.weight_precision < 0:
            raise ValueError(
                f"weight_precision must be >= 0, got {self.weight_precision}"
            )

    def format_weight(self, weight: float) -> str:
        """Render a weight with the configured precision."""
        return f"{weight:.{self.weight_precision}f}"


# Global configuration instance
DISPLAY_CONFIG = PathDisplayConfig()
