"""Table mapping exceptions."""

from typing import Dict


class ColumnResolutionError(Exception):
    """Raised when column names are requested for a custom-storage field."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(
            f'Column information not available for the "{field_name}" field.'
        )

    def to_dict(self) -> Dict[str, str]:
        """Convert to structured dict for logging."""
        return {
            "error_type": "ColumnResolutionError",
            "field_name": self.field_name,
            "message": str(self),
        }
