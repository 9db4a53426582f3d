# app/users/user_services.py
import logging
from typing import Optional

from app.storage.base import MedicalRepository
from app.users.security import get_password_hash
from app.users.user_models.schemas import UserCreate, UserRecord, UserRegister

logger = logging.getLogger(__name__)


# ============================================================
# ✅ REGISTER A NEW USER
# ============================================================
async def registering_user(user_data: UserRegister, repository: MedicalRepository) -> UserRecord:
    """Hash the password and store the user. DuplicateUsernameError propagates."""
    hashed_password = get_password_hash(user_data.password)
    user = await repository.create_user(
        UserCreate(username=user_data.username, hashed_password=hashed_password)
    )
    logger.info(f"👤 Registered user {user.id} ({user.username})")
    return user


# ============================================================
# ✅ LOOKUP
# ============================================================
async def fetching_user(user_id: int, repository: MedicalRepository) -> Optional[UserRecord]:
    return await repository.get_user(user_id)
