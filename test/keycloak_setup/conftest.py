from unittest.mock import Mock

import pytest

from keycloak_setup.configuration_map import ConfigurationMapService


@pytest.fixture
def configuration_map_service(keycloak_configuration):
    return ConfigurationMapService("https://app.example.com", keycloak_configuration)


@pytest.fixture
def imported_config():
    return {
        "issuer": "https://example.okta.com",
        "authorizationUrl": "https://example.okta.com/oauth2/v1/authorize",
        "tokenUrl": "https://example.okta.com/oauth2/v1/token",
        "jwksUrl": "https://example.okta.com/oauth2/v1/keys",
        "validateSignature": "true",
        "useJwksUrl": "true",
    }


@pytest.fixture
def mock_realm():
    realm = Mock()
    realm.get_current_realm.return_value = "airbyte"
    return realm
