"""Employees feature: operational records and their identity linkage."""

from .entities import EmployeeDraft, EmployeeRecord, EmployeeRepository
from .services import EmployeeLinkageService

__all__ = ["EmployeeDraft", "EmployeeRecord", "EmployeeRepository", "EmployeeLinkageService"]
