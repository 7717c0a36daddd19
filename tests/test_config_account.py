"""Tests for AWS account id discovery."""

import os
from unittest.mock import patch

import pytest
from botocore.exceptions import ClientError

from src.config import discover_account_id


class TestDiscoverAccountId:
    """Test cases for discover_account_id function."""

    @patch("src.config.account.boto3")
    def test_returns_caller_account(self, mock_boto3):
        """Test that the STS caller identity account is returned."""
        mock_boto3.client.return_value.get_caller_identity.return_value = {
            "Account": "210987654321",
            "Arn": "arn:aws:sts::210987654321:assumed-role/controller/session",
        }

        account_id = discover_account_id(region_name="us-east-2")

        assert account_id == "210987654321"
        mock_boto3.client.assert_called_once_with("sts", region_name="us-east-2")

    @patch.dict(os.environ, {"AWS_REGION": "eu-west-1"})
    @patch("src.config.account.boto3")
    def test_uses_env_region(self, mock_boto3):
        """Test that AWS_REGION is used when no region is given."""
        mock_boto3.client.return_value.get_caller_identity.return_value = {"Account": "210987654321"}

        discover_account_id()

        mock_boto3.client.assert_called_once_with("sts", region_name="eu-west-1")

    @patch.dict(os.environ, {}, clear=True)
    @patch("src.config.account.boto3")
    def test_uses_default_region(self, mock_boto3):
        """Test that the default region is used when nothing is configured."""
        mock_boto3.client.return_value.get_caller_identity.return_value = {"Account": "210987654321"}

        discover_account_id()

        mock_boto3.client.assert_called_once_with("sts", region_name="us-west-2")

    @patch("src.config.account.boto3")
    def test_propagates_client_error(self, mock_boto3):
        """Test that STS failures are re-raised."""
        mock_boto3.client.return_value.get_caller_identity.side_effect = ClientError(
            {"Error": {"Code": "AccessDenied", "Message": "not allowed"}},
            "GetCallerIdentity",
        )

        with pytest.raises(ClientError):
            discover_account_id(region_name="us-west-2")
