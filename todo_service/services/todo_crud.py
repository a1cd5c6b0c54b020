"""
CRUD LAYER (Database Logic Only)

Architecture:
    API Layer  → FastAPI (routes, Depends, response_model)
    CRUD Layer → Pure DB operations (this file)
    DB Layer   → Engine, SessionLocal, Models

Rules:
- Accept the SQLAlchemy Session explicitly; never open or close it here.
- Return ORM models, not Pydantic schemas.
- Writes run inside ``transaction()``; reads never commit.
- A missing todo is ``None`` (or ``False`` for deletes), never an exception.
  Store faults are not caught here and reach the API layer as-is.
"""

import logging

from sqlalchemy.orm import Session

from todo_service.core.database import transaction
from todo_service.models import Todo
from todo_service.schemas import TodoCreate

logger = logging.getLogger(__name__)


def list_todos(session: Session) -> list[Todo]:
    # list all todo items in insertion order
    return session.query(Todo).order_by(Todo.id).all()


def get_todo(session: Session, todo_id: int) -> Todo | None:
    # primary-key lookup, served from the identity map when possible
    todo_item = session.get(Todo, todo_id)
    if todo_item is None:
        logger.debug("Todo %s not found", todo_id)
    return todo_item


def create_todo(session: Session, todo: TodoCreate) -> Todo:
    todo_item = Todo(**todo.model_dump())
    with transaction(session):
        session.add(todo_item)
    session.refresh(todo_item)
    logger.info("Created todo %s", todo_item.id)
    return todo_item


def delete_todo(session: Session, todo_id: int) -> bool:
    """Delete the todo with ``todo_id``; return False if there was none."""
    todo_item = get_todo(session, todo_id)
    if todo_item is None:
        return False

    with transaction(session):
        session.delete(todo_item)
    logger.info("Deleted todo %s", todo_id)
    return True
