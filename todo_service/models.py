from sqlalchemy import Boolean, Column, Integer, Text

from todo_service.core.database import Base


class Todo(Base):
    """
    Model for a TODO.
    Note: The class name is singular (Todo) while the table name is plural (todos).
    """

    __tablename__ = "todos"
    # ids must never be handed out twice, even after the newest row is deleted
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    title = Column(Text, nullable=True)
    completed = Column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return f"<Todo id={self.id} title={self.title!r} completed={self.completed}>"
