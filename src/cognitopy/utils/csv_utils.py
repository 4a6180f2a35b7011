"""CSV projection of Cognito users.

Columns are declared as a list of ColumnSpec entries, each with its own
extractor: common columns first, then the general profile attributes, then
the pool's custom attributes in header order.

Known limitation: fields are joined with commas as-is. Values containing
commas, quotes or line breaks are not quoted or escaped.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from ..core.config import (
    COMMON_ATTRIBUTES,
    CSV_DELIMITER,
    CSV_LINE_TERMINATOR,
    CUSTOM_ATTRIBUTE_PREFIX,
    DEFAULT_HEADER_STYLE,
    DELIVERY_CHANNEL,
    GENERAL_ATTRIBUTES,
    VERIFICATION_ATTRIBUTES,
)
from ..models.user import UserRecord

Extractor = Callable[[UserRecord], str]

# Pinpoint endpoint-import names for the columns that are not simply prefixed
PINPOINT_HEADER_NAMES = {
    "ChannelType": "ChannelType",
    "cognito:username": "User.UserId",
    "email": "Address",
}
PINPOINT_ATTRIBUTE_PREFIX = "User.UserAttributes."


@dataclass(frozen=True)
class ColumnSpec:
    """A single CSV column: its attribute name and how to fill it."""

    name: str
    extractor: Extractor

    def header(self, style: str = DEFAULT_HEADER_STYLE) -> str:
        return translate_header(self.name, style)

    def value(self, user: UserRecord) -> str:
        return self.extractor(user)


def _channel_type(user: UserRecord) -> str:
    return DELIVERY_CHANNEL


def _username(user: UserRecord) -> str:
    return user.username


def _mfa_enabled(user: UserRecord) -> str:
    return "true" if user.mfa_configured else "false"


def _last_modified(user: UserRecord) -> str:
    return "" if user.last_modified is None else str(user.last_modified)


def attribute_extractor(name: str) -> Extractor:
    """Build an extractor for a user attribute column.

    Missing or empty values become ``"false"`` for the verification flags
    and an empty field for everything else.
    """
    missing = "false" if name in VERIFICATION_ATTRIBUTES else ""

    def extract(user: UserRecord) -> str:
        return user.get_attribute(name) or missing

    return extract


COMMON_EXTRACTORS: dict[str, Extractor] = {
    "ChannelType": _channel_type,
    "cognito:username": _username,
    "cognito:mfa_enabled": _mfa_enabled,
    "updated_at": _last_modified,
}


def extract_custom_attribute_names(header: Iterable[str]) -> list[str]:
    """Return the custom attribute names of a CSV header, in header order."""
    return [name for name in header if name.startswith(CUSTOM_ATTRIBUTE_PREFIX)]


def build_column_specs(custom_attribute_names: Iterable[str] = ()) -> list[ColumnSpec]:
    """Build the ordered column list.

    Args:
        custom_attribute_names: Pool specific ``custom:`` attribute names

    Returns:
        List[ColumnSpec]: Common, general and custom columns in output order
    """
    columns = [ColumnSpec(name, COMMON_EXTRACTORS[name]) for name in COMMON_ATTRIBUTES]
    columns.extend(
        ColumnSpec(name, attribute_extractor(name)) for name in GENERAL_ATTRIBUTES
    )
    columns.extend(
        ColumnSpec(name, attribute_extractor(name)) for name in custom_attribute_names
    )
    return columns


def translate_header(name: str, style: str = DEFAULT_HEADER_STYLE) -> str:
    """Return the header label for a column.

    Args:
        name: Attribute name of the column
        style: ``cognito`` keeps attribute names, ``pinpoint`` renames them
            for an Amazon Pinpoint endpoint import

    Returns:
        str: Header label
    """
    if style == "cognito":
        return name
    if style == "pinpoint":
        if name in PINPOINT_HEADER_NAMES:
            return PINPOINT_HEADER_NAMES[name]
        return PINPOINT_ATTRIBUTE_PREFIX + name.replace(":", "_", 1)
    raise ValueError(f"Unknown header style: {style}")


def render_row(values: Iterable[str]) -> str:
    return CSV_DELIMITER.join(values) + CSV_LINE_TERMINATOR


def render_users_csv(
    users: Iterable[UserRecord],
    header: Iterable[str],
    header_style: str = DEFAULT_HEADER_STYLE,
) -> str:
    """Render users as CSV text.

    Args:
        users: Users in output order
        header: Attribute names returned by GetCSVHeader
        header_style: Header naming style (cognito or pinpoint)

    Returns:
        str: Header line plus one CRLF-terminated line per user
    """
    columns = build_column_specs(extract_custom_attribute_names(header))

    lines = [render_row(column.header(header_style) for column in columns)]
    for user in users:
        lines.append(render_row(column.value(user) for column in columns))

    return "".join(lines)
