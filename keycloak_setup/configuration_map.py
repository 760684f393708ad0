"""Configuration maps for identity providers brokered through Keycloak."""

import json
import logging
import os

from keycloak import KeycloakAdmin
from keycloak.exceptions import KeycloakPostError, raise_error_from_response

from models import IdentityProviderConfiguration, KeycloakConfiguration

logger = logging.getLogger()
logger.setLevel(os.environ.get("LOG_LEVEL", logging.INFO))

URL_ADMIN_IDP_IMPORT_CONFIG = (
    "admin/realms/{realm-name}/identity-provider/import-config"
)

DEFAULT_SCOPE = "openid email profile"

# Keys from the imported configuration that must not end up in the identity
# provider config. `validateSignature` breaks Okta integrations.
EXCLUDED_KEYS = {"validateSignature"}


def _with_trailing_slash(url):
    return url if url.endswith("/") else f"{url}/"


class ConfigurationMapService:
    def __init__(self, webapp_url: str, keycloak_configuration: KeycloakConfiguration):
        self.webapp_url = webapp_url
        self.keycloak_configuration = keycloak_configuration

    def import_provider_from(
        self,
        realm: KeycloakAdmin,
        provider: IdentityProviderConfiguration,
        provider_type_id: str,
    ) -> dict:
        """Return the configuration Keycloak derives from `provider`'s
        OpenID discovery document.

        Errors from the admin client are passed on to the caller.
        """
        discovery_url = self.provider_discovery_url(provider)
        logger.info(f"Importing identity provider configuration from {discovery_url}")

        params_path = {"realm-name": realm.get_current_realm()}
        data_raw = realm.connection.raw_post(
            URL_ADMIN_IDP_IMPORT_CONFIG.format(**params_path),
            data=json.dumps(
                {
                    "providerId": provider_type_id,
                    "fromUrl": discovery_url,
                }
            ),
        )
        return raise_error_from_response(data_raw, KeycloakPostError)

    def setup_provider_config(
        self, provider: IdentityProviderConfiguration, config_map: dict
    ) -> dict:
        """Return a new config map built from `config_map` and `provider`.

        Every key of `config_map` is carried over except `EXCLUDED_KEYS`. The
        keys required by the broker are always taken from `provider`.
        """
        return {
            **{k: v for k, v in config_map.items() if k not in EXCLUDED_KEYS},
            "clientId": provider.client_id,
            "clientSecret": provider.client_secret,
            "defaultScope": DEFAULT_SCOPE,
            "redirectUris": self.provider_redirect_url(provider),
            "backchannelSupported": "true",
            "backchannel_logout_session_supported": "true",
        }

    def provider_redirect_url(self, provider: IdentityProviderConfiguration) -> str:
        return "{}auth/realms/{}/broker/{}/endpoint".format(
            _with_trailing_slash(self.webapp_url),
            self.keycloak_configuration.realm_name,
            provider.app_name,
        )

    @staticmethod
    def provider_discovery_url(provider: IdentityProviderConfiguration) -> str:
        return "https://{}.well-known/openid-configuration".format(
            _with_trailing_slash(provider.domain)
        )
