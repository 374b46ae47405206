from fastapi import APIRouter

from recipe_api.api.routes.auth import auth_router
from recipe_api.api.routes.common import health_router
from recipe_api.api.routes.recipes import recipes_router
from recipe_api.api.routes.users import account_router

api_router = APIRouter()

# 每个元素都是一个包含 router, prefix, 和 tags 的字典
routers_to_include = [
    # auth routers：/register /login /token-test 直接挂在 API 前缀下
    {"router": auth_router.router, "prefix": "", "tags": ["auth"]},

    # recipes routers
    {"router": recipes_router.router, "prefix": "/recipes", "tags": ["recipes"]},

    # account routers
    {"router": account_router.router, "prefix": "/account", "tags": ["account"]},

    # common routers
    {"router": health_router.router, "prefix": "", "tags": ["health"]},
]

# 使用一个循环来包含所有路由 ✨
for route_config in routers_to_include:
    api_router.include_router(**route_config)
