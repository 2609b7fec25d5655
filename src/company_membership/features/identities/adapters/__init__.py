from .keycloak_admin import KeycloakAdminAdapter
from .jwt_resolver import JWTIdentityResolver

__all__ = ["KeycloakAdminAdapter", "JWTIdentityResolver"]
