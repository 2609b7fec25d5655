from .employee_repository import EmployeeDatabaseRepository

__all__ = ["EmployeeDatabaseRepository"]
