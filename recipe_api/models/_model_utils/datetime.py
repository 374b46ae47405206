from datetime import datetime, timezone


def utcnow() -> datetime:
    """带时区的当前 UTC 时间，统一用作模型时间戳的默认值。"""
    return datetime.now(timezone.utc)
