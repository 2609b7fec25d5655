from .requests import LinkExistingEmployeeRequest, LinkNewEmployeeRequest
from .responses import EmployeeListResponse, EmployeeResponse

__all__ = [
    "LinkExistingEmployeeRequest",
    "LinkNewEmployeeRequest",
    "EmployeeListResponse",
    "EmployeeResponse",
]
