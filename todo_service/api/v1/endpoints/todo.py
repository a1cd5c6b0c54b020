from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from todo_service.core.database import get_db
from todo_service.schemas import TodoCreate, TodoResponse
from todo_service.services.todo_crud import (
    create_todo,
    delete_todo,
    get_todo,
    list_todos,
)

# ids are stored as signed 64-bit integers
MIN_TODO_ID = -(2**63)
MAX_TODO_ID = 2**63 - 1

router = APIRouter()


# list all TODO items
@router.get("", response_model=list[TodoResponse])
def list_todos_endpoint(
    session: Session = Depends(get_db),
):
    return list_todos(session)


# get a TODO item by id; a missing item is answered with null, not 404
@router.get("/{todo_id}", response_model=TodoResponse | None)
def get_todo_endpoint(
    todo_id: int = Path(ge=MIN_TODO_ID, le=MAX_TODO_ID),
    session: Session = Depends(get_db),
):
    return get_todo(session, todo_id)


# create a new TODO item
@router.post("", response_model=TodoResponse)
def create_todo_endpoint(
    todo: TodoCreate,
    session: Session = Depends(get_db),
):
    return create_todo(session, todo)


# delete a TODO item by id; unknown ids are a no-op
@router.delete("/{todo_id}", status_code=204)
def delete_todo_endpoint(
    todo_id: int = Path(ge=MIN_TODO_ID, le=MAX_TODO_ID),
    session: Session = Depends(get_db),
):
    delete_todo(session, todo_id)
    return None
