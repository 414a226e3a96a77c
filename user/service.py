from typing import Optional

from sqlalchemy.orm import Session

from user.models import User


def get_user(db: Session, user_id: int) -> Optional[User]:
    return db.get(User, user_id)
