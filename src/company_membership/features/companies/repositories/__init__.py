from .company_repository import CompanyDatabaseRepository

__all__ = ["CompanyDatabaseRepository"]
