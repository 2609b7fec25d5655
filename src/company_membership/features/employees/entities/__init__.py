from .employee import EmployeeDraft, EmployeeRecord
from .protocols import EmployeeRepository

__all__ = ["EmployeeDraft", "EmployeeRecord", "EmployeeRepository"]
