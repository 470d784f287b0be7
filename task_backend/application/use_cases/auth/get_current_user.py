# Standard library imports
from typing import Optional

# Local application imports
from ....domain.exceptions import AuthenticationError
from ...services.auth_service import AuthService
from ...dto.auth_dto import CurrentUser


class GetCurrentUserUseCase:
    """Use case for resolving the authenticated caller from a bearer token"""
    
    def __init__(self, auth_service: AuthService) -> None:
        self.auth_service = auth_service
    
    async def execute(self, token: str) -> CurrentUser:
        """
        Get current user identity from a JWT token
        
        The identity is taken from the token claims; the user store is not
        consulted.
        
        Args:
            token: JWT access token
            
        Returns:
            CurrentUser with id and email
            
        Raises:
            AuthenticationError: If token is invalid, expired or has no subject
        """
        try:
            payload = self.auth_service.verify_token(token)
        except ValueError as exception:
            raise AuthenticationError(f"Invalid or expired token: {str(exception)}")
        
        user_id: Optional[str] = payload.get("userId") or payload.get("sub")
        if not user_id:
            raise AuthenticationError("Invalid authentication payload: missing user ID")
        
        return CurrentUser(
            id=user_id,
            email=payload.get("email") or "",
        )
