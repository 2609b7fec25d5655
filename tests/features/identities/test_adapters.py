"""Tests for the Keycloak and JWT adapters."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt
import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from keycloak.exceptions import KeycloakAuthenticationError, KeycloakError

from company_membership.core.exceptions import (
    ConfigurationError,
    IdentityDeletionError,
    InvalidTokenError,
    TransientError,
)
from company_membership.core.value_objects import IdentityId
from company_membership.features.credentials.adapters import KeycloakCredentialVerifier
from company_membership.features.identities.adapters import JWTIdentityResolver, KeycloakAdminAdapter
from company_membership.features.identities.entities import Identity

ADMIN_MODULE = "company_membership.features.identities.adapters.keycloak_admin"
CREDENTIALS_MODULE = "company_membership.features.credentials.adapters.keycloak_credentials"


@pytest.fixture(scope="module")
def rsa_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture
def public_pem(rsa_key):
    return rsa_key.public_key().public_bytes(
        serialization.Encoding.PEM,
        serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode()


def sign(rsa_key, **claims):
    payload = {"exp": datetime.now(timezone.utc) + timedelta(minutes=5)}
    payload.update(claims)
    return jwt.encode(payload, rsa_key, algorithm="RS256")


class TestJWTIdentityResolver:

    @pytest.mark.asyncio
    async def test_resolves_identity(self, rsa_key, public_pem):
        subject = uuid4()
        token = sign(rsa_key, sub=str(subject), email="a@example.com", name="A")

        identity = await JWTIdentityResolver(public_pem).resolve(token)

        assert identity == Identity(id=IdentityId(subject), email="a@example.com", display_name="A")

    @pytest.mark.asyncio
    async def test_bare_base64_key_is_wrapped(self, rsa_key, public_pem):
        bare = "".join(line for line in public_pem.splitlines() if "-----" not in line)
        token = sign(rsa_key, sub=str(uuid4()))

        identity = await JWTIdentityResolver(bare).resolve(token)

        assert identity.email == ""

    @pytest.mark.asyncio
    async def test_expired(self, rsa_key, public_pem):
        token = sign(rsa_key, sub=str(uuid4()), exp=datetime.now(timezone.utc) - timedelta(minutes=1))
        with pytest.raises(InvalidTokenError, match="expired"):
            await JWTIdentityResolver(public_pem).resolve(token)

    @pytest.mark.asyncio
    async def test_wrong_key(self, public_pem):
        other = rsa.generate_private_key(public_exponent=65537, key_size=2048)
        token = sign(other, sub=str(uuid4()))
        with pytest.raises(InvalidTokenError):
            await JWTIdentityResolver(public_pem).resolve(token)

    @pytest.mark.asyncio
    async def test_garbage_and_bad_subject(self, rsa_key, public_pem):
        resolver = JWTIdentityResolver(public_pem)
        with pytest.raises(InvalidTokenError):
            await resolver.resolve("not-a-token")
        with pytest.raises(InvalidTokenError):
            await resolver.resolve(sign(rsa_key, sub="service-account"))
        with pytest.raises(InvalidTokenError):
            await resolver.resolve(sign(rsa_key))


class TestKeycloakAdminAdapter:

    def test_requires_credentials(self):
        with pytest.raises(ConfigurationError):
            KeycloakAdminAdapter(server_url="http://kc", realm_name="company")

    def test_strips_legacy_auth_suffix(self):
        adapter = KeycloakAdminAdapter(server_url="http://kc/auth/", realm_name="company", client_secret="s")
        assert adapter.server_url == "http://kc"

    @pytest.mark.asyncio
    async def test_delete_identity(self, mocker):
        mocker.patch(f"{ADMIN_MODULE}.KeycloakOpenIDConnection")
        admin_cls = mocker.patch(f"{ADMIN_MODULE}.KeycloakAdmin")
        admin = admin_cls.return_value
        admin.a_delete_user = mocker.AsyncMock()
        identity_id = IdentityId(uuid4())

        adapter = KeycloakAdminAdapter(server_url="http://kc", realm_name="company", client_secret="s")
        await adapter.delete_identity(identity_id)

        admin.a_delete_user.assert_awaited_once_with(str(identity_id))

    @pytest.mark.asyncio
    async def test_delete_failure(self, mocker):
        mocker.patch(f"{ADMIN_MODULE}.KeycloakOpenIDConnection")
        admin = mocker.patch(f"{ADMIN_MODULE}.KeycloakAdmin").return_value
        admin.a_delete_user = mocker.AsyncMock(side_effect=KeycloakError("boom", response_code=500))

        adapter = KeycloakAdminAdapter(server_url="http://kc", realm_name="company", username="u", password="p")
        with pytest.raises(IdentityDeletionError):
            await adapter.delete_identity(IdentityId(uuid4()))


class TestKeycloakCredentialVerifier:

    @pytest.fixture
    def identity(self):
        return Identity(id=IdentityId(uuid4()), email="owner@example.com")

    @pytest.fixture
    def openid(self, mocker):
        client = mocker.patch(f"{CREDENTIALS_MODULE}.KeycloakOpenID").return_value
        client.a_token = mocker.AsyncMock(return_value={"access_token": "a", "refresh_token": "r"})
        client.a_logout = mocker.AsyncMock()
        return client

    @pytest.fixture
    def admin(self, mocker):
        admin = mocker.Mock(spec=KeycloakAdminAdapter)
        admin.set_password = mocker.AsyncMock()
        return admin

    @pytest.fixture
    def verifier(self, admin):
        return KeycloakCredentialVerifier(
            server_url="http://kc", realm_name="company", client_id="web", admin=admin
        )

    @pytest.mark.asyncio
    async def test_correct_password_closes_session(self, verifier, openid, identity):
        assert await verifier.verify_current_password(identity, "pw") is True
        openid.a_token.assert_awaited_once_with("owner@example.com", "pw")
        openid.a_logout.assert_awaited_once_with("r")

    @pytest.mark.asyncio
    async def test_wrong_password(self, verifier, openid, identity):
        openid.a_token.side_effect = KeycloakAuthenticationError("invalid_grant", response_code=401)
        assert await verifier.verify_current_password(identity, "pw") is False

    @pytest.mark.asyncio
    async def test_transport_error(self, verifier, openid, identity):
        openid.a_token.side_effect = KeycloakError("connection refused")
        with pytest.raises(TransientError):
            await verifier.verify_current_password(identity, "pw")

    @pytest.mark.asyncio
    async def test_update_password(self, verifier, admin, identity):
        result = await verifier.update_password(identity, "new-secret")

        assert result.success
        admin.set_password.assert_awaited_once_with(identity.id, "new-secret")

    @pytest.mark.asyncio
    async def test_update_password_failure(self, verifier, admin, identity):
        admin.set_password.side_effect = TransientError("Cannot set password: 500")

        result = await verifier.update_password(identity, "new-secret")

        assert result.success is False
        assert result.error == "Cannot set password: 500"
