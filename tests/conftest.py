from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from cognitopy.core.sdk_operations import CognitoUserOperations

USER_POOL_ID = "eu-west-1_TestPool1"

CSV_HEADER = ["sub", "email", "custom:tenant", "name", "custom:plan"]


@pytest.fixture
def alice():
    """Cognito user with MFA configured and a custom tenant."""
    return {
        "Username": "alice",
        "Attributes": [
            {"Name": "sub", "Value": "0f9e8d7c-aaaa-bbbb-cccc-111111111111"},
            {"Name": "name", "Value": "Alice"},
            {"Name": "email", "Value": "alice@example.com"},
            {"Name": "email_verified", "Value": "true"},
            {"Name": "custom:tenant", "Value": "acme"},
        ],
        "UserCreateDate": datetime(2023, 12, 1, tzinfo=timezone.utc),
        "UserLastModifiedDate": datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
        "Enabled": True,
        "UserStatus": "CONFIRMED",
        "MFAOptions": [{"DeliveryMedium": "SMS", "AttributeName": "phone_number"}],
    }


@pytest.fixture
def bob():
    """Cognito user without MFA and with an empty verification flag."""
    return {
        "Username": "bob",
        "Attributes": [
            {"Name": "email", "Value": "bob@example.com"},
            {"Name": "phone_number", "Value": "+15550100"},
            {"Name": "phone_number_verified", "Value": ""},
            {"Name": "custom:plan", "Value": "pro"},
        ],
        "UserCreateDate": datetime(2023, 12, 1, tzinfo=timezone.utc),
        "UserLastModifiedDate": datetime(2024, 1, 1, tzinfo=timezone.utc),
        "Enabled": True,
        "UserStatus": "CONFIRMED",
    }


@pytest.fixture
def carol():
    return {
        "Username": "carol",
        "Attributes": [{"Name": "email", "Value": "carol@example.com"}],
        "UserLastModifiedDate": datetime(2024, 2, 1, tzinfo=timezone.utc),
        "Enabled": False,
        "UserStatus": "FORCE_CHANGE_PASSWORD",
    }


@pytest.fixture
def mock_cognito_client():
    """Create a mock boto3 cognito-idp client with an empty pool."""
    client = MagicMock()
    client.list_users = MagicMock(return_value={"Users": []})
    client.get_csv_header = MagicMock(
        return_value={"UserPoolId": USER_POOL_ID, "CSVHeader": list(CSV_HEADER)}
    )
    return client


@pytest.fixture
def paged_client(mock_cognito_client, alice, bob, carol):
    """Mock client returning three pages: [alice], [bob, carol], []."""
    mock_cognito_client.list_users.side_effect = [
        {"Users": [alice], "PaginationToken": "page2"},
        {"Users": [bob, carol], "PaginationToken": "page3"},
        {"Users": []},
    ]
    return mock_cognito_client


@pytest.fixture
def user_operations(paged_client):
    return CognitoUserOperations(paged_client)


@pytest.fixture
def in_tmp_dir(tmp_path, monkeypatch):
    """Run the test with the temporary directory as working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
