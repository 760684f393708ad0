import os

from okdata.aws.ssm import get_secret
from pydantic import TypeAdapter

from models import IdentityProviderConfiguration, IdentityProviderIn


def getenv(name):
    """Return the environment variable named `name`.

    Raise `OSError` if it's unset.
    """
    env = os.getenv(name)

    if env is None:
        raise OSError(f"Environment variable {name} is not set")

    return env


def idp_client_secret_ssm_name(app_name):
    return f"/dataplatform/keycloak-setup/idp/{app_name}/client-secret"


def get_identity_providers() -> list[IdentityProviderConfiguration]:
    """Return the identity providers listed in `IDENTITY_PROVIDERS`.

    The variable holds a JSON list of provider descriptors. Client secrets are
    read from SSM. An unset variable means no providers.
    """
    providers = TypeAdapter(list[IdentityProviderIn]).validate_json(
        os.environ.get("IDENTITY_PROVIDERS", "[]")
    )

    return [
        IdentityProviderConfiguration(
            **p.model_dump(),
            client_secret=get_secret(idp_client_secret_ssm_name(p.app_name)),
        )
        for p in providers
    ]
