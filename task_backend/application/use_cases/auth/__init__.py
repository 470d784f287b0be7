from .get_current_user import GetCurrentUserUseCase

__all__ = ["GetCurrentUserUseCase"]
