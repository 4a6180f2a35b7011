"""boto3 client wrapper for Cognito Identity Provider access."""

from typing import Any

import boto3
from botocore.exceptions import BotoCoreError

from cognitopy.core.exceptions import AuthConfigError
from cognitopy.models.config import ClientConfig
from cognitopy.utils.logging_utils import get_logger

SERVICE_NAME = "cognito-idp"

logger = get_logger(__name__)


class CognitoClientManager:
    """Builds the boto3 session and cognito-idp client for one configuration."""

    def __init__(self, config: ClientConfig) -> None:
        """Initialize the client manager.

        Args:
            config: Explicit client configuration (region, profile, endpoint)
        """
        self.config = config
        self._client: Any | None = None

    def get_client(self) -> Any:
        """Get or create the cognito-idp client.

        Returns:
            botocore client for cognito-idp

        Raises:
            AuthConfigError: If the session or client cannot be created
        """
        if self._client is not None:
            return self._client

        try:
            session = boto3.Session(
                profile_name=self.config.profile,
                region_name=self.config.region,
            )
            client_kwargs: dict[str, Any] = {"region_name": self.config.region}
            if self.config.endpoint_url:
                client_kwargs["endpoint_url"] = self.config.endpoint_url
            self._client = session.client(SERVICE_NAME, **client_kwargs)
        except BotoCoreError as e:
            logger.error(
                f"Failed to initialize Cognito client: {e}",
                extra={"region": self.config.region},
            )
            raise AuthConfigError(
                f"Failed to initialize Cognito client for {self.config.region}",
                details=str(e),
            ) from e

        logger.debug(
            f"Initialized Cognito client: {self.config.to_dict()}",
            extra={"region": self.config.region},
        )
        return self._client


def get_cognito_client(config: ClientConfig) -> Any:
    """Convenience wrapper around CognitoClientManager.get_client."""
    return CognitoClientManager(config).get_client()
