from fastapi import Request

from recipe_api.config.config_settings.config_schema import AppConfig


def get_app_settings(request: Request) -> AppConfig:
    """create_app 时注入的配置，挂在 app.state.config 上。"""
    return request.app.state.config
