# recipe_api/core/exceptions/__init__.py

from .base_exception import (
    BaseBusinessException,
    InvalidInputException,
    NotFoundException,
    AlreadyExistsException,
    MissingConfigException,
)
from .user_exceptions import (
    UserAlreadyExistsException,
    UserNotFoundException,
)
from .recipe_exceptions import (
    RecipeNotFoundException,
    InvalidRecipeIdException,
    NoUpdateFieldsException,
)
from .jwt_exceptions import (
    UnauthorizedException,
    MissingTokenException,
    InvalidTokenException,
    TokenExpiredException,
    JwtSecretMissingException,
)
from .auth_exceptions import (
    InvalidCredentialsException,
)

__all__ = [
    "BaseBusinessException",
    "InvalidInputException",
    "NotFoundException",
    "AlreadyExistsException",
    "MissingConfigException",

    "UserAlreadyExistsException",
    "UserNotFoundException",

    "RecipeNotFoundException",
    "InvalidRecipeIdException",
    "NoUpdateFieldsException",

    "UnauthorizedException",
    "MissingTokenException",
    "InvalidTokenException",
    "TokenExpiredException",
    "JwtSecretMissingException",

    "InvalidCredentialsException",
]
