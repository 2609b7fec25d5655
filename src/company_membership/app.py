"""company-membership FastAPI application.

Run with ``uvicorn company_membership.app:create_app --factory``.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .__version__ import __version__
from .config import LoggingConfig, MembershipSettings, get_settings
from .core.exceptions import ConfigurationError, MembershipError, create_error_response, get_http_status_code
from .dependencies import ServiceContainer
from .features.companies.repositories import CompanyDatabaseRepository
from .features.companies.routers import company_router
from .features.credentials.adapters import KeycloakCredentialVerifier
from .features.database import AsyncPGDatabaseRepository
from .features.employees.repositories import EmployeeDatabaseRepository
from .features.employees.routers import employee_router
from .features.employees.services import EmployeeLinkageService
from .features.identities.adapters import JWTIdentityResolver, KeycloakAdminAdapter
from .features.memberships.repositories import MembershipDatabaseRepository
from .features.memberships.routers import membership_router, withdraw_router
from .features.memberships.services import MembershipService

logger = logging.getLogger(__name__)


def build_container(settings: MembershipSettings) -> ServiceContainer:
    """Wire repositories, adapters and services from settings."""
    if not settings.jwt_public_key:
        raise ConfigurationError("JWT_PUBLIC_KEY is required to authenticate callers")

    database = AsyncPGDatabaseRepository(
        dsn=settings.database_url,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
        command_timeout=settings.db_command_timeout,
    )
    memberships = MembershipDatabaseRepository(database, schema=settings.database_schema)
    employees = EmployeeDatabaseRepository(database, schema=settings.database_schema)
    companies = CompanyDatabaseRepository(database, schema=settings.database_schema)

    client_secret = settings.keycloak_client_secret.get_secret_value() if settings.keycloak_client_secret else None
    admin_password = settings.keycloak_admin_password.get_secret_value() if settings.keycloak_admin_password else None
    keycloak_admin = KeycloakAdminAdapter(
        server_url=settings.keycloak_server_url,
        realm_name=settings.keycloak_realm,
        client_id=settings.keycloak_admin_client_id,
        verify=settings.keycloak_verify_ssl,
        username=settings.keycloak_admin_username,
        password=admin_password,
        # Service-account access when no admin user is configured
        client_secret=None if settings.keycloak_admin_username else client_secret,
    )
    resolver = JWTIdentityResolver(
        public_key=settings.jwt_public_key,
        algorithms=settings.jwt_algorithms,
        audience=settings.jwt_audience,
        issuer=settings.keycloak_issuer,
    )
    verifier = KeycloakCredentialVerifier(
        server_url=settings.keycloak_server_url,
        realm_name=settings.keycloak_realm,
        client_id=settings.keycloak_client_id,
        admin=keycloak_admin,
        client_secret=client_secret,
        verify=settings.keycloak_verify_ssl,
    )

    return ServiceContainer(
        membership_service=MembershipService(
            memberships=memberships,
            employees=employees,
            identities=keycloak_admin,
            transactions=database,
            companies=companies,
        ),
        linkage_service=EmployeeLinkageService(
            memberships=memberships,
            employees=employees,
            transactions=database,
        ),
        identity_resolver=resolver,
        credential_verifier=verifier,
        min_password_length=settings.min_password_length,
        resources=[database],
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    owns_container = getattr(app.state, "container", None) is None
    if owns_container:
        app.state.container = build_container(app.state.settings)
        logger.info(f"{app.state.settings.app_name} started ({app.state.settings.environment})")

    yield

    if owns_container:
        await app.state.container.close()
        app.state.container = None


async def membership_error_handler(request: Request, exc: MembershipError) -> JSONResponse:
    status_code = get_http_status_code(exc)
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=status_code, content=create_error_response(exc))


def create_app(
    settings: Optional[MembershipSettings] = None,
    container: Optional[ServiceContainer] = None,
) -> FastAPI:
    """Create the company-membership API.

    Args:
        settings: Settings to use; read from the environment when omitted
        container: Prebuilt services; built in the lifespan when omitted
    """
    settings = settings or get_settings()
    LoggingConfig.configure(settings)

    app = FastAPI(
        title="Company Membership API",
        version=__version__,
        description="Company membership lifecycle, role management and employee linkage",
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.settings = settings
    app.state.container = container

    app.add_exception_handler(MembershipError, membership_error_handler)

    app.include_router(company_router)
    app.include_router(membership_router)
    app.include_router(employee_router)
    app.include_router(withdraw_router)

    return app
