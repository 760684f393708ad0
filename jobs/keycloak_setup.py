"""One-time setup of the identity provider brokered by Keycloak."""

import logging
import os

from aws_xray_sdk.core import patch_all, xray_recorder
from okdata.aws.logging import log_add, logging_wrapper

from clients.keycloak import get_keycloak_config, setup_keycloak_admin
from keycloak_setup.config import get_identity_providers, getenv
from keycloak_setup.configuration_map import ConfigurationMapService
from keycloak_setup.identity_providers import IdentityProvidersConfigurator

patch_all()

logger = logging.getLogger()
logger.setLevel(os.environ.get("LOG_LEVEL", logging.INFO))


@logging_wrapper
@xray_recorder.capture("configure_identity_providers")
def configure_identity_providers(event, context):
    keycloak_config = get_keycloak_config()
    providers = get_identity_providers()

    log_add(
        realm=keycloak_config.realm_name,
        configured_providers=[p.app_name for p in providers],
    )

    configurator = IdentityProvidersConfigurator(
        ConfigurationMapService(getenv("WEBAPP_URL"), keycloak_config),
        providers,
    )
    realm = setup_keycloak_admin(keycloak_config)

    alias = configurator.configure_idp(realm)
    log_add(identity_provider=alias)

    logger.info("Done")
    return alias
