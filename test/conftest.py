import os

os.environ.setdefault("AWS_REGION", "eu-west-1")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
os.environ.setdefault("AWS_XRAY_SDK_ENABLED", "false")
os.environ.setdefault("SERVICE_NAME", "keycloak-setup")
os.environ.setdefault("KEYCLOAK_REALM", "airbyte")
os.environ.setdefault("WEBAPP_URL", "https://app.example.com")

import boto3  # noqa: E402
import pytest  # noqa: E402
from moto import mock_aws  # noqa: E402

from models import (  # noqa: E402
    IdentityProviderConfiguration,
    IdentityProviderType,
    KeycloakConfiguration,
)


@pytest.fixture
def keycloak_configuration():
    return KeycloakConfiguration(realm_name="airbyte")


@pytest.fixture
def okta_provider():
    return IdentityProviderConfiguration(
        type=IdentityProviderType.okta,
        domain="example.okta.com",
        app_name="okta",
        client_id="okta-client-id",
        client_secret="okta-client-secret",
    )


@pytest.fixture
def mock_ssm():
    with mock_aws():
        ssm_client = boto3.client("ssm", region_name=os.environ["AWS_REGION"])

        ssm_client.put_parameter(
            Name="/dataplatform/keycloak-setup/keycloak-client-secret",
            Value="supersecretpassword",
            Type="SecureString",
        )
        ssm_client.put_parameter(
            Name="/dataplatform/shared/keycloak-server-url",
            Value="https://keycloak.example.org",
            Type="String",
        )
        ssm_client.put_parameter(
            Name="/dataplatform/keycloak-setup/idp/okta/client-secret",
            Value="okta-client-secret",
            Type="SecureString",
        )

        yield ssm_client
