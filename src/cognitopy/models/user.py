"""User data models for Cognito user pool exports."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True)
class UserAttribute:
    """A single name/value attribute of a Cognito user."""

    name: str
    value: str | None = None


@dataclass
class UserRecord:
    """Represents a Cognito user as returned by ListUsers."""

    username: str
    attributes: list[UserAttribute] = field(default_factory=list)
    mfa_configured: bool = False
    last_modified: int | None = None
    raw: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)
    _attribute_index: dict[str, str | None] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        """Index attributes by name, keeping the first occurrence."""
        index: dict[str, str | None] = {}
        for attribute in self.attributes:
            index.setdefault(attribute.name, attribute.value)
        self._attribute_index = index

    def get_attribute(self, name: str) -> str | None:
        """Return the value of the first attribute called ``name``.

        Args:
            name: Attribute name, e.g. ``email`` or ``custom:tenant``

        Returns:
            Optional[str]: Attribute value or None if the user lacks it
        """
        return self._attribute_index.get(name)

    def has_attribute(self, name: str) -> bool:
        return name in self._attribute_index

    @classmethod
    def from_cognito_data(cls, data: dict[str, Any]) -> "UserRecord":
        """Create a UserRecord from a ListUsers response entry.

        Args:
            data: One element of the ``Users`` list

        Returns:
            UserRecord: Parsed user
        """
        attributes = [
            UserAttribute(name=item.get("Name", ""), value=item.get("Value"))
            for item in data.get("Attributes", [])
        ]

        return cls(
            username=data.get("Username", ""),
            attributes=attributes,
            # Presence of MFAOptions, even an empty list, marks MFA as configured
            mfa_configured=data.get("MFAOptions") is not None,
            last_modified=to_epoch_millis(data.get("UserLastModifiedDate")),
            raw=data,
        )


@dataclass
class UserPage:
    """One page of a ListUsers response."""

    records: list[dict[str, Any]] = field(default_factory=list)
    next_token: str | None = None

    @property
    def has_more(self) -> bool:
        return bool(self.next_token)

    @classmethod
    def from_response(cls, response: dict[str, Any]) -> "UserPage":
        """Create a UserPage from a raw ListUsers response."""
        return cls(
            records=list(response.get("Users", [])),
            next_token=response.get("PaginationToken") or None,
        )


def to_epoch_millis(value: Any) -> int | None:
    """Convert a timestamp to epoch milliseconds.

    boto3 returns ``datetime`` objects; raw JSON fixtures carry ISO-8601
    strings. Naive datetimes are treated as UTC.

    Args:
        value: datetime, ISO-8601 string, or None

    Returns:
        Optional[int]: Milliseconds since the epoch, None if not parseable
    """
    if value is None:
        return None

    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None

    if not isinstance(value, datetime):
        return None

    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)

    return (value - EPOCH) // timedelta(milliseconds=1)
