from fastapi import APIRouter

from todo_service.api.v1.endpoints.todo import router as todo_router

router = APIRouter()
router.include_router(todo_router, prefix="/todos", tags=["todos"])
