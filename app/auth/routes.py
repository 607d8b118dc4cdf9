from fastapi import APIRouter, HTTPException, status
from .schemas import RegisterRequest, LoginRequest, AuthResponse
from .utils import register_user, authenticate_user, issue_mock_token
from app.database.mongo import log_error

router = APIRouter(prefix="/v1/auth", tags=["auth"])

@router.post("/register", response_model=AuthResponse)
async def register(request: RegisterRequest):
    """
    Register a mock account.

    Args:
        request: RegisterRequest with email, password, name and optional phone

    Returns:
        AuthResponse with the public user details and a mock token
    """
    try:
        user = await register_user(request)
        return AuthResponse(success=True, user=user, token=issue_mock_token())

    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except Exception as e:
        await log_error(
            error=e,
            location="auth/routes.py - register",
            additional_info={"email": request.email}
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Registration failed"
        )

@router.post("/login", response_model=AuthResponse)
async def login(request: LoginRequest):
    """
    Log in with email and password.

    Args:
        request: LoginRequest

    Returns:
        AuthResponse with the public user details and a mock token
    """
    try:
        user = await authenticate_user(request.email, request.password)

        if user is None:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid credentials"
            )

        return AuthResponse(success=True, user=user, token=issue_mock_token())

    except HTTPException:
        # Re-raise HTTP exceptions as-is
        raise
    except Exception as e:
        await log_error(
            error=e,
            location="auth/routes.py - login",
            additional_info={"email": request.email}
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Login failed"
        )
