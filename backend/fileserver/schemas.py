from pydantic import BaseModel


class ErrorMessage(BaseModel):
    Code: str
    Message: str
