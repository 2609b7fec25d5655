from .membership_router import router as membership_router
from .withdraw_router import router as withdraw_router

__all__ = ["membership_router", "withdraw_router"]
