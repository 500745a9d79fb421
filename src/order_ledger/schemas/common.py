from pydantic import BaseModel


class OrderFailure(BaseModel):
    success: bool = False
    message: str


class ErrorBody(BaseModel):
    error: str
