# Standard library imports
from typing import Any, Dict, Optional

# Local application imports
from ...core.security import create_jwt_token, decode_jwt_token, read_unverified_claims


class AuthService:
    """Issues and verifies signed access tokens carrying a user's id and email"""
    
    def generate_token(self, user_id: str, email: str) -> str:
        """
        Generate a signed access token for a user
        
        Args:
            user_id: ID of the user the token is issued to
            email: Normalized email of the user
            
        Returns:
            Encoded JWT string
        """
        return create_jwt_token({
            "sub": user_id,  # JWT standard claim (subject)
            "userId": user_id,
            "email": email,
        })
    
    def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify signature and expiry of a token and return its claims
        
        Raises:
            ValueError: If token is invalid or expired
        """
        return decode_jwt_token(token)
    
    def decode_token(self, token: str) -> Optional[Dict[str, Any]]:
        """Return the claims of a token without verifying it, or None if it cannot be read"""
        try:
            return read_unverified_claims(token)
        except ValueError:
            return None
