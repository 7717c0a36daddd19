"""
Immutable, typed configuration snapshot and the builder that produces it.

Consumers read configuration only through Properties attributes; raw keys stay
inside this package.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .constants import (
    DEFAULT_AWS_REGION,
    DEFAULT_CONTROLLER_DESIRED_FREQUENCY,
    DEFAULT_IAM_ROLE_PATTERN,
    DEFAULT_MAX_ROLES_ALLOWED,
)
from .errors import RequiredKeyMissingError
from .schema import KNOWN_KEYS, SCHEMA, policy_arn
from .source import RawConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Properties:
    """Fully resolved controller configuration.

    Every attribute has a default so an unloaded Properties() can be read
    safely. Sequence attributes are tuples and never None.

    Attributes:
        aws_account_id: AWS account the controller manages roles in
        aws_region: AWS region for IAM/STS clients
        managed_permission_boundary_policy_name: Permission boundary policy name
        max_roles_allowed: Maximum IAM roles per namespace
        controller_desired_frequency: Reconcile period in seconds
        is_webhook_enabled: Admission webhook toggle
        derive_name_from_namespace: Derive role names from the namespace
        allowed_policy_action: IAM action prefixes roles may use
        restricted_policy_resources: Resources roles must not reference
        restricted_s3_resources: S3 resources roles must not reference
        managed_policies: Policy ARNs attached to every role
        trust_policy_arns: Principals trusted by every role
        cluster_name: Kubernetes cluster name
        iam_role_pattern: Role name pattern, {namespace} is substituted
        is_irsa_enabled: IAM roles for service accounts toggle
        oidc_issuer_url: Cluster OIDC issuer for IRSA trust policies
    """

    aws_account_id: str = ""
    aws_region: str = DEFAULT_AWS_REGION
    managed_permission_boundary_policy_name: str = ""
    max_roles_allowed: int = DEFAULT_MAX_ROLES_ALLOWED
    controller_desired_frequency: int = DEFAULT_CONTROLLER_DESIRED_FREQUENCY
    is_webhook_enabled: bool = False
    derive_name_from_namespace: bool = False
    allowed_policy_action: Tuple[str, ...] = ()
    restricted_policy_resources: Tuple[str, ...] = ()
    restricted_s3_resources: Tuple[str, ...] = ()
    managed_policies: Tuple[str, ...] = ()
    trust_policy_arns: Tuple[str, ...] = ()
    cluster_name: str = ""
    iam_role_pattern: str = DEFAULT_IAM_ROLE_PATTERN
    is_irsa_enabled: bool = False
    oidc_issuer_url: str = ""

    @property
    def managed_permission_boundary_policy(self) -> str:
        """ARN of the permission boundary policy, or "" before a load."""
        if not self.managed_permission_boundary_policy_name:
            return ""
        return policy_arn(self.aws_account_id, self.managed_permission_boundary_policy_name)


def _resolve_raw(raw: RawConfig) -> Dict[str, Any]:
    resolved: Dict[str, Any] = {}
    for f in SCHEMA:
        value = raw.get(f.key)
        if value is None or not value.strip():
            if f.required:
                raise RequiredKeyMissingError(f.key)
            resolved[f.attribute] = f.default
        else:
            resolved[f.attribute] = f.parse(value)
    return resolved


def build_properties(raw: RawConfig) -> Properties:
    """Walk the schema over a raw source and assemble a Properties snapshot.

    Args:
        raw: Resolved key/value source

    Returns:
        New immutable Properties

    Raises:
        RequiredKeyMissingError: If a key without a default is absent
        TypeCoercionError: If a present value does not parse as its declared type
    """
    resolved = _resolve_raw(raw)

    # Post-processors see every raw field already resolved
    for f in SCHEMA:
        if f.post_process is not None:
            resolved[f.attribute] = f.post_process(resolved[f.attribute], resolved)

    unknown = sorted(k for k in raw.values if k not in KNOWN_KEYS)
    if unknown:
        logger.warning(f"Ignoring unrecognized config keys: {', '.join(unknown)}")

    return Properties(**resolved)
