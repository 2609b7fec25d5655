from .linkage_service import EmployeeLinkageService

__all__ = ["EmployeeLinkageService"]
