import logging
import os
from typing import Optional

import boto3
from botocore.exceptions import ClientError

from .constants import DEFAULT_AWS_REGION

logger = logging.getLogger(__name__)


def discover_account_id(region_name: Optional[str] = None) -> str:
    """Look up the AWS account id of the controller's own credentials.

    Args:
        region_name: AWS region for STS (default: from AWS_REGION env var or us-west-2)

    Returns:
        Twelve-digit AWS account id

    Raises:
        ClientError: If the STS call fails
    """
    region = region_name or os.environ.get("AWS_REGION", DEFAULT_AWS_REGION)

    try:
        sts = boto3.client("sts", region_name=region)
        identity = sts.get_caller_identity()
    except ClientError as e:
        error_code = e.response.get("Error", {}).get("Code", "")
        logger.error(f"Failed to discover AWS account id - Region: {region}, Error: {error_code}")
        raise

    return identity["Account"]
