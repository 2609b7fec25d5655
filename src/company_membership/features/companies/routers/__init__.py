from .company_router import router as company_router

__all__ = ["company_router"]
