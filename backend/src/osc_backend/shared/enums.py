"""Shared enumerations used across the backend."""

from enum import StrEnum


class TeamRole(StrEnum):
    """Roles a member can hold inside a team."""

    OWNER = "owner"
    ADMIN = "admin"
    MEMBER = "member"
