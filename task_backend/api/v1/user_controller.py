# External package imports
from fastapi import APIRouter, Depends, HTTPException, status

# Local application imports
from ...application.dto.auth_dto import (
    CurrentUser,
    LoginRequest,
    LoginResponse,
    UserRegistrationRequest,
)
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.user.create_user import CreateUserUseCase
from ...application.use_cases.user.find_user_by_id import FindUserByIdUseCase
from ...application.use_cases.user.login_user import LoginUserUseCase
from ...di.container import get_container
from .dependencies import get_current_user


router = APIRouter(tags=["users"])


@router.post("/login", response_model=LoginResponse)
async def login(request: LoginRequest) -> LoginResponse:
    """
    Log in with an email address, creating the account on first use
    
    Args:
        request: Login request with the email
        
    Returns:
        LoginResponse with the user, an access token and isNew
    """
    container = get_container()
    login_use_case = container.get(LoginUserUseCase)
    
    result = await login_use_case.execute(request.email)
    return LoginResponse(
        user=UserResponse.from_domain(result.user),
        token=result.token,
        is_new=result.is_new,
    )


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register_user(request: UserRegistrationRequest) -> UserResponse:
    """
    Register a new user without logging in
    
    Returns:
        UserResponse with created user information
    """
    container = get_container()
    create_user_use_case = container.get(CreateUserUseCase)
    
    user = await create_user_use_case.execute(request.email)
    return UserResponse.from_domain(user)


@router.get("/me", response_model=UserResponse)
async def get_me(current_user: CurrentUser = Depends(get_current_user)) -> UserResponse:
    """
    Get the stored record of the authenticated user
    
    Args:
        current_user: Current authenticated user (from dependency)
        
    Returns:
        UserResponse with user information
    """
    container = get_container()
    find_user_use_case = container.get(FindUserByIdUseCase)
    
    user = await find_user_use_case.execute(current_user.id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )
    return UserResponse.from_domain(user)
