from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator


class IdentityProviderType(str, Enum):
    okta = "okta"
    oidc = "oidc"


class IdentityProviderIn(BaseModel):
    """An identity provider as described in the setup configuration.

    The client secret is kept out of the configuration and looked up
    separately.
    """

    model_config = ConfigDict(frozen=True)

    type: IdentityProviderType = IdentityProviderType.oidc

    domain: str
    app_name: str
    display_name: Optional[str] = None
    client_id: str

    @model_validator(mode="before")
    @classmethod
    def default_display_name(cls, data):
        if isinstance(data, dict) and data.get("display_name") is None:
            return {**data, "display_name": data.get("app_name")}
        return data


class IdentityProviderConfiguration(IdentityProviderIn):
    client_secret: str


class KeycloakConfiguration(BaseModel):
    model_config = ConfigDict(frozen=True)

    realm_name: str
    server_url: Optional[str] = None
    client_id: Optional[str] = None
    client_secret: Optional[str] = None
