"""
Configuration keys, default values and fixed profiles.

All recognized ConfigMap keys live here so the set of supported keys stays in
one place. Key spellings are shared with existing cluster ConfigMaps and must
not change.
"""

# Environment discriminator for development runs
LOCAL_ENV = "LOCAL"

# ConfigMap keys
AWS_ACCOUNT_ID_KEY = "aws.accountId"
AWS_REGION_KEY = "aws.region"
PERMISSION_BOUNDARY_POLICY_KEY = "iam.managed.permission.boundary.policy"
MAX_ROLES_ALLOWED_KEY = "iam.role.max.limit.per.namespace"
CONTROLLER_DESIRED_FREQUENCY_KEY = "controller.desired.frequency"
WEBHOOK_ENABLED_KEY = "webhook.enabled"
DERIVE_NAME_FROM_NAMESPACE_KEY = "iam.role.derive.from.namespace"
ALLOWED_POLICY_ACTION_KEY = "iam.policy.action.prefix.whitelist"
RESTRICTED_POLICY_RESOURCES_KEY = "iam.policy.resource.blacklist"
RESTRICTED_S3_RESOURCES_KEY = "iam.policy.s3.restricted.resource"
MANAGED_POLICIES_KEY = "iam.managed.policies"
TRUST_POLICY_ARNS_KEY = "iam.trust.policy.arns"
CLUSTER_NAME_KEY = "k8s.cluster.name"
IAM_ROLE_PATTERN_KEY = "iam.role.pattern"
IRSA_ENABLED_KEY = "iam.irsa.enabled"
OIDC_ISSUER_URL_KEY = "k8s.cluster.oidc.issuer.url"

# Defaults for optional keys
DEFAULT_AWS_REGION = "us-west-2"
DEFAULT_MAX_ROLES_ALLOWED = 1
DEFAULT_CONTROLLER_DESIRED_FREQUENCY = 300  # seconds
DEFAULT_IAM_ROLE_PATTERN = "k8s-{namespace}"

# ARN synthesis (partition is always "aws")
AWS_PARTITION = "aws"
IAM_ARN_PREFIX = f"arn:{AWS_PARTITION}:iam:"
POLICY_ARN_FORMAT = IAM_ARN_PREFIX + ":{account_id}:policy/{policy_name}"

LIST_SEPARATOR = ","

# Development profile used when the environment is LOCAL
LOCAL_AWS_ACCOUNT_ID = "123456789012"

LOCAL_PROFILE = {
    AWS_ACCOUNT_ID_KEY: LOCAL_AWS_ACCOUNT_ID,
    AWS_REGION_KEY: DEFAULT_AWS_REGION,
    PERMISSION_BOUNDARY_POLICY_KEY: "iam-manager-permission-boundary",
    MAX_ROLES_ALLOWED_KEY: str(DEFAULT_MAX_ROLES_ALLOWED),
    CONTROLLER_DESIRED_FREQUENCY_KEY: str(DEFAULT_CONTROLLER_DESIRED_FREQUENCY),
    WEBHOOK_ENABLED_KEY: "false",
    DERIVE_NAME_FROM_NAMESPACE_KEY: "false",
    ALLOWED_POLICY_ACTION_KEY: (
        "s3:,sts:,ec2:Describe,acm:Describe,acm:List,acm:Get,route53:Get,route53:List,"
        "route53:Create,route53:Delete,route53:Change,kms:Decrypt,kms:Encrypt,kms:ReEncrypt,"
        "kms:GenerateDataKey,kms:DescribeKey,dynamodb:,secretsmanager:GetSecretValue,es:,"
        "sqs:SendMessage,sqs:ReceiveMessage,sqs:DeleteMessage,sns:Publish,"
        "sqs:GetQueueAttributes,sqs:GetQueueUrl"
    ),
    RESTRICTED_POLICY_RESOURCES_KEY: "policy-resource",
    RESTRICTED_S3_RESOURCES_KEY: "s3-resource",
    MANAGED_POLICIES_KEY: "shared.policy",
    TRUST_POLICY_ARNS_KEY: f"arn:aws:iam::{LOCAL_AWS_ACCOUNT_ID}:role/trust_role",
    CLUSTER_NAME_KEY: "local-cluster",
}
