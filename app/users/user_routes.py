# app/users/user_routes.py
import logging

from fastapi import APIRouter, Depends, status

from app.shared.dependencies import get_repository
from app.shared.errors import APIError
from app.storage.base import DuplicateUsernameError, MedicalRepository
from app.users.user_models.schemas import UserRegister, UserResponse
from app.users.user_services import fetching_user, registering_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["Users"])


# ============================================================
# ✅ REGISTER
# ============================================================
@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register_user(
    user_data: UserRegister, repository: MedicalRepository = Depends(get_repository)
) -> UserResponse:
    try:
        user = await registering_user(user_data, repository)
    except DuplicateUsernameError:
        raise APIError(409, "Username already exists")
    except Exception as e:
        logger.error(f"❌ Failed to create user: {e}", exc_info=True)
        raise APIError(500, "Failed to create user", error=str(e))

    return UserResponse.model_validate(user)


# ============================================================
# ✅ GET USER
# ============================================================
@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: int, repository: MedicalRepository = Depends(get_repository)) -> UserResponse:
    try:
        user = await fetching_user(user_id, repository)
    except Exception as e:
        logger.error(f"❌ Failed to fetch user {user_id}: {e}", exc_info=True)
        raise APIError(500, "Failed to fetch user", error=str(e))

    if user is None:
        raise APIError(404, "User not found")
    return UserResponse.model_validate(user)
