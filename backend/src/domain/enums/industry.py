"""Industry focus areas a venture can apply under."""

from enum import Enum


class Industry(str, Enum):
    """Industries accepted on the application form."""

    TECHNOLOGY = "Technology"
    HEALTHCARE = "Healthcare"
    FINTECH = "Fintech"
    ENERGY = "Energy"
    OTHER = "Other"

    def __str__(self) -> str:
        return self.value
