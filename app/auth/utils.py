from app.database.mock_store import get_store, epoch_ms
from app.database.mongo import log_error
from .schemas import RegisterRequest, UserDB, UserPublic
from typing import Optional
import asyncio
import bcrypt


def hash_password(plain: str) -> str:
    return bcrypt.hashpw(plain.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # Malformed stored hash
        return False


def issue_mock_token() -> str:
    """Placeholder session token (no JWT signing in the mock backend)."""
    return f"mock-jwt-token-{epoch_ms()}"


def find_user_by_email(email: str) -> Optional[UserDB]:
    normalized = email.strip().lower()
    for user in get_store().users:
        if user["email"] == normalized:
            return UserDB.model_validate(user)
    return None


def to_public(user: UserDB) -> UserPublic:
    return UserPublic.model_validate(user.model_dump(exclude={"password_hash"}))


async def register_user(request: RegisterRequest) -> UserPublic:
    """
    Create a mock user account.

    Raises:
        ValueError: If a user with this email already exists
    """
    try:
        if find_user_by_email(request.email):
            raise ValueError("User already exists")

        password_hash = await asyncio.to_thread(hash_password, request.password)

        # Checked again: another registration may have finished while hashing
        if find_user_by_email(request.email):
            raise ValueError("User already exists")

        store = get_store()
        user = UserDB(
            user_id=str(len(store.users) + 1),
            email=request.email.strip().lower(),
            password_hash=password_hash,
            name=request.name.strip(),
            phone=request.phone
        )
        store.users.append(user.model_dump())
        print(f"👤 Registered mock user {user.user_id}")

        return to_public(user)

    except ValueError:
        raise
    except Exception as e:
        await log_error(
            error=e,
            location="auth/utils.py - register_user",
            additional_info={"email": request.email}
        )
        raise


async def authenticate_user(email: str, password: str) -> Optional[UserPublic]:
    """
    Check credentials against the mock user list.

    Returns:
        Optional[UserPublic]: The user, or None if the email/password pair is wrong
    """
    try:
        user = find_user_by_email(email)
        if user is None or not await asyncio.to_thread(verify_password, password, user.password_hash):
            return None
        return to_public(user)

    except Exception as e:
        await log_error(
            error=e,
            location="auth/utils.py - authenticate_user",
            additional_info={"email": email}
        )
        raise
