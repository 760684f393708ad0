from models.models import (
    IdentityProviderConfiguration,
    IdentityProviderIn,
    IdentityProviderType,
    KeycloakConfiguration,
)

__all__ = [
    "IdentityProviderConfiguration",
    "IdentityProviderIn",
    "IdentityProviderType",
    "KeycloakConfiguration",
]
