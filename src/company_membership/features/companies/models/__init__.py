from .requests import RegisterCompanyRequest
from .responses import CompanyRegistrationResponse, CompanyResponse

__all__ = ["RegisterCompanyRequest", "CompanyRegistrationResponse", "CompanyResponse"]
