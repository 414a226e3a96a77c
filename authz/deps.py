from fastapi import Depends, HTTPException, status
from auth.services.auth_service import get_current_active_user
from user.models import User

# Both dependencies resolve to the caller's organization id so routes can
# pass it straight to org-scoped services.

def require_member(user: User = Depends(get_current_active_user)) -> int:
    return user.org_id

def require_manager(user: User = Depends(get_current_active_user)) -> int:
    if not user.is_manager:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Manager role required")
    return user.org_id
