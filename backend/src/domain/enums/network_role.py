"""Roles available when joining the mentor/investor network."""

from enum import Enum


class NetworkRole(str, Enum):
    """Network membership roles."""

    MENTOR = "Mentor"
    INVESTOR = "Investor"

    def __str__(self) -> str:
        return self.value
