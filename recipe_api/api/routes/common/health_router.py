from fastapi import APIRouter

router = APIRouter()


@router.get("/health")
async def health():
    """存活探针，不访问数据库。"""
    return {"status": "ok"}
