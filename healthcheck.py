"""
容器健康检查：请求 recipe-api 的 /api/health，返回 0 表示存活，1 表示异常。
只依赖标准库，镜像里不需要额外安装任何东西。
"""
import http.client
import json
import os
import sys

HOST = os.getenv("HEALTHCHECK_HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "3000"))
API_PREFIX = os.getenv("API_PREFIX", "/api")
TIMEOUT_SECONDS = float(os.getenv("HEALTHCHECK_TIMEOUT", "3"))


def check_health() -> tuple[bool, str]:
    conn = http.client.HTTPConnection(HOST, PORT, timeout=TIMEOUT_SECONDS)
    try:
        conn.request("GET", f"{API_PREFIX}/health", headers={"Accept": "application/json"})
        response = conn.getresponse()
        body = response.read()
    except (OSError, http.client.HTTPException) as exc:
        return False, f"unreachable: {exc}"
    finally:
        conn.close()

    if response.status != 200:
        return False, f"status {response.status}"

    try:
        status = json.loads(body).get("status")
    except (ValueError, AttributeError):
        return False, "unexpected body"
    return status == "ok", f"status={status}"


def main() -> int:
    healthy, detail = check_health()
    print(f"recipe-api {HOST}:{PORT} {'healthy' if healthy else 'unhealthy'} ({detail})")
    return 0 if healthy else 1


if __name__ == "__main__":
    sys.exit(main())
