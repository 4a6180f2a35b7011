"""Cognito Identity Provider calls used by the exporter.

Thin wrapper over the boto3 client; remote errors are not caught here so
they reach the caller unmodified.
"""

from typing import Any

from ..models.config import ClientConfig
from ..models.user import UserPage
from ..utils.logging_utils import get_logger
from .cognito_client import CognitoClientManager

logger = get_logger(__name__)


class CognitoUserOperations:
    """ListUsers and GetCSVHeader for a single cognito-idp client."""

    def __init__(self, client: Any) -> None:
        """Initialize with a boto3 cognito-idp client.

        Args:
            client: boto3 client (or a stand-in with the same methods)
        """
        self.client = client

    def list_users(
        self, user_pool_id: str, pagination_token: str | None = None
    ) -> UserPage:
        """Fetch one page of users.

        Args:
            user_pool_id: Cognito user pool id
            pagination_token: Token from the previous page, None for the first

        Returns:
            UserPage: Users of this page and the next token
        """
        params: dict[str, Any] = {"UserPoolId": user_pool_id}
        if pagination_token:
            params["PaginationToken"] = pagination_token

        response = self.client.list_users(**params)
        return UserPage.from_response(response)

    def get_csv_header(self, user_pool_id: str) -> list[str]:
        """Fetch the pool's CSV header (all attribute names)."""
        response = self.client.get_csv_header(UserPoolId=user_pool_id)
        header = list(response.get("CSVHeader", []))
        logger.debug(
            f"CSV header for {user_pool_id}: {header}",
            extra={"user_pool_id": user_pool_id},
        )
        return header


def get_user_operations(config: ClientConfig) -> CognitoUserOperations:
    """Build CognitoUserOperations for the given client configuration."""
    return CognitoUserOperations(CognitoClientManager(config).get_client())
