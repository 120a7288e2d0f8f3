from fastapi import APIRouter, Depends, status

from taskpulse.schemas import AuthResponse, LoginRequest, RegisterRequest
from taskpulse.services.user_service import UserService
from taskpulse.storage import Store, get_store

router = APIRouter()


@router.post("/login", response_model=AuthResponse)
def login(credentials: LoginRequest, store: Store = Depends(get_store)):
    return UserService(store).login(credentials)


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(payload: RegisterRequest, store: Store = Depends(get_store)):
    return UserService(store).register(payload)
