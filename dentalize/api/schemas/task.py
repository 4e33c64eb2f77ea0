from pydantic import BaseModel


class ActionSuccess(BaseModel):
    success: bool = True
    id: int | None = None
