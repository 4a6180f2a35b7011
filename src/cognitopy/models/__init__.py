"""Data models for Cognito user exports."""

from cognitopy.models.config import ClientConfig, ExportConfig, ExportResult
from cognitopy.models.user import UserAttribute, UserPage, UserRecord, to_epoch_millis

__all__ = [
    # User models
    "UserAttribute",
    "UserRecord",
    "UserPage",
    "to_epoch_millis",
    # Config models
    "ClientConfig",
    "ExportConfig",
    "ExportResult",
]
