"""Companies feature: tenant registration."""

from .entities import Company, CompanyDraft, CompanyRepository

__all__ = ["Company", "CompanyDraft", "CompanyRepository"]
