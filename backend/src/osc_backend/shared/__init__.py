"""Shared enumerations and value objects used across the backend."""

from osc_backend.shared.enums import TeamRole
from osc_backend.shared.value_objects import MonthRange

__all__ = ["MonthRange", "TeamRole"]
