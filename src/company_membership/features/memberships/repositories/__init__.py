from .membership_repository import MembershipDatabaseRepository

__all__ = ["MembershipDatabaseRepository"]
