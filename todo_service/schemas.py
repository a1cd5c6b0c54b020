from pydantic import BaseModel, ConfigDict


class TodoCreate(BaseModel):
    # unknown keys (including a client-sent "id") are dropped
    model_config = ConfigDict(extra="ignore")

    title: str | None = None
    completed: bool = False


class TodoResponse(BaseModel):
    id: int
    title: str | None = None
    completed: bool

    model_config = ConfigDict(from_attributes=True)
