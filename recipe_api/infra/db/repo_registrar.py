# recipe_api/infra/db/repo_registrar.py

class RepositoryRegistrar:
    """
    子类定义时自动登记：UserRepository -> "user"，RecipeRepository -> "recipe"。
    RepositoryFactory 据此按名称找到对应的“集合”。
    """
    registry: dict[str, type] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        name = cls.__name__.replace("Repository", "").lower()
        RepositoryRegistrar.registry[name] = cls
