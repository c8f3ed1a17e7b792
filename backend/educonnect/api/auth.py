"""
Auth routes: register, login (JWT; refreshes profile fields sent with it), GET /api/auth/user.
"""
import logging
from fastapi import APIRouter, Depends, status

from educonnect.api.deps import get_current_user, get_store
from educonnect.errors import AuthenticationError, ConstraintViolation
from educonnect.models.user import User
from educonnect.schemas.auth import RegisterRequest, LoginRequest, TokenResponse, UserResponse
from educonnect.services.auth import hash_password, verify_password, create_access_token
from educonnect.services.store import EntityStore, PROFILE_FIELDS

router = APIRouter(prefix="/api/auth", tags=["auth"])
logger = logging.getLogger(__name__)


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(data: RegisterRequest, store: EntityStore = Depends(get_store)):
    """Register a new user with a role (default student) and profile fields."""
    if store.find_user_by_email(data.email):
        raise ConstraintViolation("Email already registered")
    profile = data.model_dump(include=set(PROFILE_FIELDS))
    user = store.create_user(data.email, data.role, password_hash=hash_password(data.password), **profile)
    logger.info("User registered: id=%s role=%s", user.id, user.role)
    return user


@router.post("/login", response_model=TokenResponse)
def login(data: LoginRequest, store: EntityStore = Depends(get_store)):
    """Login with email/password; returns JWT. Profile fields in the body refresh the stored profile."""
    user = store.find_user_by_email(data.email)
    if not user or not verify_password(data.password, user.password_hash):
        raise AuthenticationError("Invalid email or password")
    profile = data.model_dump(include=set(PROFILE_FIELDS), exclude_none=True)
    if profile:
        user, _ = store.upsert_user(user.email, **profile)
    return TokenResponse(access_token=create_access_token(user.id, user.email, user.role))


@router.get("/user", response_model=UserResponse)
def current_user(current_user: User = Depends(get_current_user)):
    """Return the caller (id, role, profile)."""
    return current_user
