"""
Declarative schema of recognized configuration keys.

Each Field row maps one ConfigMap key to a Properties attribute with its type,
default and optional post-processor. Adding a key is a new row here plus the
matching Properties attribute.
"""

import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple

from . import constants as c
from .errors import TypeCoercionError

INT_PATTERN = re.compile(r"^[+-]?[0-9]+$")
TRUE_VALUES = {"true", "t", "1"}
FALSE_VALUES = {"false", "f", "0"}


class FieldKind:
    """Declared value types"""

    STRING = "string"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    LIST = "list"


def parse_int(key: str, value: str) -> int:
    text = value.strip()
    if not INT_PATTERN.match(text):
        raise TypeCoercionError(key, value, FieldKind.INTEGER)
    return int(text, 10)


def parse_bool(key: str, value: str) -> bool:
    text = value.strip().lower()
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    raise TypeCoercionError(key, value, FieldKind.BOOLEAN)


def parse_list(key: str, value: str) -> Tuple[str, ...]:
    return tuple(item.strip() for item in value.split(c.LIST_SEPARATOR) if item.strip())


def parse_string(key: str, value: str) -> str:
    return value.strip()


PARSERS: Dict[str, Callable[[str, str], Any]] = {
    FieldKind.STRING: parse_string,
    FieldKind.INTEGER: parse_int,
    FieldKind.BOOLEAN: parse_bool,
    FieldKind.LIST: parse_list,
}


def policy_arn(account_id: str, policy_name: str) -> str:
    """Build an IAM policy ARN, passing through names that already are one."""
    if policy_name.startswith(c.IAM_ARN_PREFIX):
        return policy_name
    return c.POLICY_ARN_FORMAT.format(account_id=account_id, policy_name=policy_name)


def _qualify_managed_policies(value: Tuple[str, ...], resolved: Dict[str, Any]) -> Tuple[str, ...]:
    return tuple(policy_arn(resolved["aws_account_id"], name) for name in value)


@dataclass(frozen=True)
class Field:
    """One recognized configuration key.

    Attributes:
        key: ConfigMap key
        attribute: Properties attribute name
        kind: FieldKind of the parsed value
        default: Value used when the key is absent or blank
        required: Absent value fails the build instead of using the default
        post_process: Optional hook run after all raw fields resolve
    """

    key: str
    attribute: str
    kind: str
    default: Any = None
    required: bool = False
    post_process: Optional[Callable[[Any, Dict[str, Any]], Any]] = None

    def parse(self, value: str) -> Any:
        return PARSERS[self.kind](self.key, value)


SCHEMA: Tuple[Field, ...] = (
    Field(c.AWS_ACCOUNT_ID_KEY, "aws_account_id", FieldKind.STRING, required=True),
    Field(c.AWS_REGION_KEY, "aws_region", FieldKind.STRING, c.DEFAULT_AWS_REGION),
    Field(
        c.PERMISSION_BOUNDARY_POLICY_KEY,
        "managed_permission_boundary_policy_name",
        FieldKind.STRING,
        required=True,
    ),
    Field(c.MAX_ROLES_ALLOWED_KEY, "max_roles_allowed", FieldKind.INTEGER, c.DEFAULT_MAX_ROLES_ALLOWED),
    Field(
        c.CONTROLLER_DESIRED_FREQUENCY_KEY,
        "controller_desired_frequency",
        FieldKind.INTEGER,
        c.DEFAULT_CONTROLLER_DESIRED_FREQUENCY,
    ),
    Field(c.WEBHOOK_ENABLED_KEY, "is_webhook_enabled", FieldKind.BOOLEAN, False),
    Field(c.DERIVE_NAME_FROM_NAMESPACE_KEY, "derive_name_from_namespace", FieldKind.BOOLEAN, False),
    Field(c.ALLOWED_POLICY_ACTION_KEY, "allowed_policy_action", FieldKind.LIST, ()),
    Field(c.RESTRICTED_POLICY_RESOURCES_KEY, "restricted_policy_resources", FieldKind.LIST, ()),
    Field(c.RESTRICTED_S3_RESOURCES_KEY, "restricted_s3_resources", FieldKind.LIST, ()),
    Field(
        c.MANAGED_POLICIES_KEY,
        "managed_policies",
        FieldKind.LIST,
        (),
        post_process=_qualify_managed_policies,
    ),
    Field(c.TRUST_POLICY_ARNS_KEY, "trust_policy_arns", FieldKind.LIST, ()),
    Field(c.CLUSTER_NAME_KEY, "cluster_name", FieldKind.STRING, ""),
    Field(c.IAM_ROLE_PATTERN_KEY, "iam_role_pattern", FieldKind.STRING, c.DEFAULT_IAM_ROLE_PATTERN),
    Field(c.IRSA_ENABLED_KEY, "is_irsa_enabled", FieldKind.BOOLEAN, False),
    Field(c.OIDC_ISSUER_URL_KEY, "oidc_issuer_url", FieldKind.STRING, ""),
)

KNOWN_KEYS = frozenset(f.key for f in SCHEMA)
