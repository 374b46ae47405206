# recipe_api/core/security/hasher.py
from functools import lru_cache

import bcrypt

# bcrypt 只使用密码的前 72 个字节，新版本的 bcrypt 对超长输入直接报错，
# 所以 hash 和 verify 两条路径上统一截断
BCRYPT_MAX_BYTES = 72
DEFAULT_ROUNDS = 10


def _to_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


class PasswordHasher:
    """bcrypt 密码哈希器，每次 hash 都使用新的盐。"""

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        self.rounds = rounds
        self._dummy_hash: bytes | None = None

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(_to_bytes(password), salt).decode("utf-8")

    def verify(self, password: str, hashed: str) -> bool:
        """校验密码，哈希格式不对或类型不对时返回 False，不抛异常。"""
        if not isinstance(password, str) or not isinstance(hashed, str):
            return False
        try:
            return bcrypt.checkpw(_to_bytes(password), hashed.encode("utf-8"))
        except ValueError:
            return False

    def verify_dummy(self, password: str) -> bool:
        """
        用户不存在时也做一次同等成本的校验，
        让“用户不存在”和“密码错误”两种失败的耗时一致。
        """
        if self._dummy_hash is None:
            self._dummy_hash = bcrypt.hashpw(b"dummy-password", bcrypt.gensalt(rounds=self.rounds))
        bcrypt.checkpw(_to_bytes(password or ""), self._dummy_hash)
        return False


@lru_cache()
def get_hasher(rounds: int = DEFAULT_ROUNDS) -> PasswordHasher:
    return PasswordHasher(rounds)
