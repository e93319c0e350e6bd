"""Service-layer exceptions and player-facing failure reasons."""
from typing import Literal

FailureReason = Literal["invalid_command", "invalid_target", "out_of_resource"]


class FactoryError(Exception):
    """Raised when a runtime entity cannot be created."""
