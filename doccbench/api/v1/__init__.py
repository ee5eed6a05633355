from fastapi import APIRouter
from .benchmark import router as benchmark_router

router = APIRouter(prefix="/api/v1")
router.include_router(benchmark_router)
