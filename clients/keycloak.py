import os

from keycloak import KeycloakAdmin

from clients.ssm import SSMClient
from models import KeycloakConfiguration


def get_keycloak_config() -> KeycloakConfiguration:
    ssm_client = SSMClient()

    client_id = os.environ.get("KEYCLOAK_SETUP_CLIENT_ID", "keycloak-setup")

    client_secret_ssm_name = f"/dataplatform/{client_id}/keycloak-client-secret"

    server_url_ssm_name = "/dataplatform/shared/keycloak-server-url"

    parameters = ssm_client.get_ssm_parameters(
        [client_secret_ssm_name, server_url_ssm_name],
        with_decryption=True,
    )

    return KeycloakConfiguration(
        realm_name=os.environ.get("KEYCLOAK_REALM", "api-catalog"),
        server_url=parameters[server_url_ssm_name],
        client_id=client_id,
        client_secret=parameters[client_secret_ssm_name],
    )


def setup_keycloak_admin(keycloak_config: KeycloakConfiguration) -> KeycloakAdmin:
    """Return an admin client bound to the configured realm.

    Authenticates as the setup service account (client credentials).
    """
    return KeycloakAdmin(
        server_url=f"{keycloak_config.server_url}/auth/",
        realm_name=keycloak_config.realm_name,
        client_id=keycloak_config.client_id,
        client_secret_key=keycloak_config.client_secret,
    )
