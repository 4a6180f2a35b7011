"""Configuration data models for Cognito user pool exports."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ..core.config import (
    DEFAULT_EXPORT_FORMAT,
    DEFAULT_HEADER_STYLE,
    region_from_user_pool_id,
)


@dataclass
class ClientConfig:
    """Configuration for the Cognito Identity Provider client.

    Passed explicitly to whatever builds the boto3 client instead of
    mutating process-wide SDK state.
    """

    region: str
    profile: str | None = None
    endpoint_url: str | None = None

    @classmethod
    def for_user_pool(
        cls,
        user_pool_id: str,
        profile: str | None = None,
        endpoint_url: str | None = None,
    ) -> "ClientConfig":
        """Create a ClientConfig for the region the pool lives in.

        Args:
            user_pool_id: Cognito user pool id, e.g. ``eu-west-1_AbC123``
            profile: Optional named AWS profile
            endpoint_url: Optional endpoint override

        Returns:
            ClientConfig: Configuration instance
        """
        return cls(
            region=region_from_user_pool_id(user_pool_id),
            profile=profile,
            endpoint_url=endpoint_url,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "region": self.region,
            "profile": self.profile or "default",
            "endpoint_url": self.endpoint_url,
        }


@dataclass
class ExportConfig:
    """Configuration for a single export run."""

    user_pool_id: str
    export_format: str = DEFAULT_EXPORT_FORMAT
    header_style: str = DEFAULT_HEADER_STYLE
    output_dir: Path = field(default_factory=lambda: Path("."))

    @property
    def output_path(self) -> Path:
        """Output file, always ``<user_pool_id>.<format>``."""
        return Path(self.output_dir) / f"{self.user_pool_id}.{self.export_format}"


@dataclass
class ExportResult:
    """Outcome of a finished export."""

    output_path: Path
    export_format: str
    user_count: int
    page_count: int
