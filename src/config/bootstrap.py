"""Controller startup entrypoint that loads configuration into a handle."""

import os
from typing import Any, Optional

from aws_lambda_powertools import Logger

from .account import discover_account_id
from .constants import AWS_ACCOUNT_ID_KEY, AWS_REGION_KEY
from .handle import PropertiesHandle, props
from .properties import Properties
from .source import extract_data, is_local, resolve_source

logger = Logger(service=os.environ.get("POWERTOOLS_SERVICE_NAME", "iam-role-controller"))


def _with_account_id(external_config: Any) -> Any:
    data = extract_data(external_config)
    if not data:
        return external_config

    raw = resolve_source("", data)
    if (raw.get(AWS_ACCOUNT_ID_KEY) or "").strip():
        return external_config

    region = (raw.get(AWS_REGION_KEY) or "").strip() or None
    account_id = discover_account_id(region_name=region)
    logger.info("Discovered AWS account id from caller identity", accountId=account_id)
    return {**raw.values, AWS_ACCOUNT_ID_KEY: account_id}


def bootstrap(
    external_config: Any = None,
    env: Optional[str] = None,
    handle: PropertiesHandle = props,
    discover_account: bool = True,
) -> Properties:
    """
    Load controller configuration at startup.

    The environment discriminator defaults to the ENV environment variable.
    In external mode a ConfigMap without aws.accountId gets the account id of
    the controller's own credentials when discover_account is set.
    """
    if env is None:
        env = os.environ.get("ENV", "")

    try:
        if discover_account and not is_local(env):
            external_config = _with_account_id(external_config)

        snapshot = handle.load(env, external_config)
    except Exception as e:
        logger.error(f"Failed to load controller configuration: {str(e)}", exc_info=True)
        raise

    logger.info(
        "Controller configuration loaded",
        env=env or "default",
        region=snapshot.aws_region,
        maxRolesAllowed=snapshot.max_roles_allowed,
        webhookEnabled=snapshot.is_webhook_enabled,
    )
    return snapshot
