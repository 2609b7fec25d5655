from .permission_gate import PermissionGate

__all__ = ["PermissionGate"]
