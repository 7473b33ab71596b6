"""Location/group identifier resolution."""

from dataclasses import dataclass
from typing import Optional

from ..utils.config_types import Settings
from .errors import MissingIdentifierError


@dataclass(frozen=True)
class CallContext:
    """Identifiers in effect for a single tool call. Both are non-empty."""

    location_id: str
    group_id: str

    @property
    def group_path(self) -> str:
        """Path prefix shared by every community endpoint."""
        return f"/{self.location_id}/groups/{self.group_id}"


def resolve_identifiers(
    location_id: Optional[str],
    group_id: Optional[str],
    settings: Settings,
) -> CallContext:
    """Pick the per-call identifiers, falling back to the configured defaults.

    An empty string counts as "not passed".

    Raises:
        MissingIdentifierError: If neither source supplies a value.
    """
    resolved_location = location_id or settings.ghl_location_id
    resolved_group = group_id or settings.ghl_group_id
    if not resolved_location:
        raise MissingIdentifierError("locationId", "GHL_LOCATION_ID")
    if not resolved_group:
        raise MissingIdentifierError("groupId", "GHL_GROUP_ID")
    return CallContext(location_id=resolved_location, group_id=resolved_group)
