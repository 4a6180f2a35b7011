"""Protocol interfaces for the remote user directory."""

from typing import Protocol

from ..models.user import UserPage


class UserDirectoryProtocol(Protocol):
    """Protocol for the paginated user directory the exporter reads."""

    def list_users(
        self, user_pool_id: str, pagination_token: str | None = None
    ) -> UserPage:
        """Fetch one page of users.

        Args:
            user_pool_id: Cognito user pool id
            pagination_token: Continuation token from the previous page

        Returns:
            UserPage: Records of this page and the next token, if any
        """
        ...

    def get_csv_header(self, user_pool_id: str) -> list[str]:
        """Fetch the attribute names available for export.

        Args:
            user_pool_id: Cognito user pool id

        Returns:
            List[str]: Attribute names in pool order
        """
        ...
