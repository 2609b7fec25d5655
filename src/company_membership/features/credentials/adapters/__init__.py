from .keycloak_credentials import KeycloakCredentialVerifier

__all__ = ["KeycloakCredentialVerifier"]
