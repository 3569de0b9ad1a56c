from typing import Any, Optional
from pydantic import BaseModel

class ResponseModel(BaseModel):
    """Envelope for every API response: {"code", "message", "data"}."""
    code: int = 200
    message: str = "success"
    data: Optional[Any] = None

    @staticmethod
    def success(data: Any = None):
        return {"code": 200, "message": "success", "data": data}

    @staticmethod
    def fail(code: int = 400, message: str = "error", data: Any = None):
        return {"code": code, "message": message, "data": data}

    @staticmethod
    def is_envelope(body: Any) -> bool:
        return isinstance(body, dict) and "code" in body and "data" in body

    @classmethod
    def unwrap(cls, body: Any) -> Any:
        """Payload of an enveloped body; other bodies are returned unchanged."""
        if cls.is_envelope(body):
            return body["data"]
        return body
