from pydantic import BaseModel, ConfigDict

__all__ = ["GreetingResponse"]


class GreetingResponse(BaseModel):
    model_config = ConfigDict(extra="forbid")

    message: str
