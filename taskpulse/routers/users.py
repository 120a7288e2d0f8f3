from typing import List

from fastapi import APIRouter, Depends

from taskpulse.schemas import CurrentUserResponse, ProfileOut, ProfileUpdate, UserOut, UserRecord
from taskpulse.services.user_service import UserService, user_out
from taskpulse.storage import Store, get_store
from taskpulse.utils.auth import get_current_user

router = APIRouter()


@router.get("/user", response_model=CurrentUserResponse)
def get_me(current_user: UserRecord = Depends(get_current_user)):
    return CurrentUserResponse(user=user_out(current_user))


@router.get("/users", response_model=List[UserOut])
def list_users(
    store: Store = Depends(get_store),
    current_user: UserRecord = Depends(get_current_user),
):
    return [user_out(u) for u in UserService(store).list_users()]


@router.get("/profile", response_model=ProfileOut)
def get_profile(
    store: Store = Depends(get_store),
    current_user: UserRecord = Depends(get_current_user),
):
    return UserService(store).profile(current_user)


@router.put("/profile", response_model=ProfileOut)
def update_profile(
    payload: ProfileUpdate,
    store: Store = Depends(get_store),
    current_user: UserRecord = Depends(get_current_user),
):
    return UserService(store).update_profile(current_user, payload)
