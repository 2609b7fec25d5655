from .company import Company, CompanyDraft
from .protocols import CompanyRepository

__all__ = ["Company", "CompanyDraft", "CompanyRepository"]
