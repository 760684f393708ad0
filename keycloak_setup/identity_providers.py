import logging
import os

from keycloak import KeycloakAdmin
from keycloak.exceptions import KeycloakError

from keycloak_setup.configuration_map import ConfigurationMapService
from models import IdentityProviderConfiguration

logger = logging.getLogger()
logger.setLevel(os.environ.get("LOG_LEVEL", logging.INFO))

KEYCLOAK_PROVIDER_ID = "oidc"

# Config entry marking an identity provider as administered by this setup, so
# that it can be found and updated on later runs even if the realm holds
# several providers.
MANAGED_IDP_KEY = "keycloak-setup-managed-idp"
MANAGED_IDP_VALUE = "true"


def _is_managed(idp):
    return idp.get("config", {}).get(MANAGED_IDP_KEY, "false") == MANAGED_IDP_VALUE


class IdentityProvidersConfigurator:
    def __init__(
        self,
        configuration_map_service: ConfigurationMapService,
        providers: list[IdentityProviderConfiguration],
    ):
        self.configuration_map_service = configuration_map_service
        self.providers = providers

    def configure_idp(self, realm: KeycloakAdmin):
        """Create or update the managed identity provider in `realm`.

        Return the alias of the configured provider, or `None` if nothing was
        done.
        """
        if not self.providers:
            logger.info("No identity providers configured, skipping IdP setup")
            return None

        if len(self.providers) > 1:
            logger.warning(
                "Multiple identity providers configured, only the first one will be used"
            )

        provider = self.providers[0]
        existing_idps = realm.get_idps()

        if not existing_idps:
            logger.info("No existing identity providers found, creating a new one")
            self._create_idp(realm, provider)
            return provider.app_name

        managed_idps = [idp for idp in existing_idps if _is_managed(idp)]

        if len(managed_idps) > 1:
            logger.warning(
                f"Found multiple identity providers with {MANAGED_IDP_KEY}="
                f"{MANAGED_IDP_VALUE}, only one managed provider is supported. "
                "Skipping IdP update."
            )
            return None

        if len(managed_idps) == 1:
            logger.info("Found existing managed identity provider, updating it")
            self._update_idp(realm, managed_idps[0], provider)
            return provider.app_name

        if len(existing_idps) == 1:
            logger.info(
                "Found exactly one existing identity provider, updating it and "
                "marking it as managed"
            )
            self._update_idp(realm, existing_idps[0], provider)
            return provider.app_name

        logger.warning(
            "Multiple identity providers exist and none are marked as managed. "
            "Skipping IdP update. To have a specific provider updated, add a "
            f"config entry {MANAGED_IDP_KEY}={MANAGED_IDP_VALUE} to it."
        )
        return None

    def build_idp(
        self, realm: KeycloakAdmin, provider: IdentityProviderConfiguration
    ) -> dict:
        """Return an identity provider representation for `provider`."""
        config_map = self.configuration_map_service.import_provider_from(
            realm, provider, KEYCLOAK_PROVIDER_ID
        )
        config = self.configuration_map_service.setup_provider_config(
            provider, config_map
        )

        return {
            "alias": provider.app_name,
            "displayName": provider.display_name,
            "providerId": KEYCLOAK_PROVIDER_ID,
            "enabled": True,
            "config": {**config, MANAGED_IDP_KEY: MANAGED_IDP_VALUE},
        }

    def _create_idp(self, realm, provider):
        idp = self.build_idp(realm, provider)

        try:
            realm.create_idp(idp)
        except KeycloakError as e:
            logger.error(
                f"Failed to create identity provider {provider.app_name} "
                f"({e.response_code}): {e.error_message}"
            )
            raise

        logger.info(f"Identity provider {provider.app_name} created")

    def _update_idp(self, realm, existing_idp, provider):
        idp = self.build_idp(realm, provider)

        # Keycloak matches the update to the existing provider by its internal
        # ID, not by alias.
        idp["internalId"] = existing_idp.get("internalId")

        realm.update_idp(existing_idp["alias"], idp)
        logger.info(
            f"Identity provider {existing_idp['alias']} updated from {provider.app_name}"
        )
