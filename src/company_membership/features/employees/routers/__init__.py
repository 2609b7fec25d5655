from .employee_router import router as employee_router

__all__ = ["employee_router"]
