from recipe_api.core.exceptions.base_exception import InvalidInputException, NotFoundException
from recipe_api.core.response_codes import ResponseCodeEnum


class RecipeNotFoundException(NotFoundException):
    # 非所有者的修改/删除也抛这个异常，不暴露菜谱是否存在
    def __init__(self, message: str = None):
        super().__init__(message, code_enum=ResponseCodeEnum.RECIPE_NOT_FOUND)

class InvalidRecipeIdException(InvalidInputException):
    def __init__(self, message: str = None):
        super().__init__(message, code_enum=ResponseCodeEnum.INVALID_ID)

class NoUpdateFieldsException(InvalidInputException):
    def __init__(self, message: str = None):
        super().__init__(message, code_enum=ResponseCodeEnum.NO_UPDATE_FIELDS)
