from typing import Optional, Dict, Any
from pydantic import BaseModel, Field

# PUBLIC_INTERFACE
class ErrorCode:
    """Enum-like class for standardized error codes."""
    INVALID_CONTAINER = "INVALID_CONTAINER"
    NOT_CALLABLE = "NOT_CALLABLE"


# PUBLIC_INTERFACE
class ErrorDetail(BaseModel):
    """Standardized error payload attached to invalid-argument errors."""
    status: str = Field(default="error", description="Fixed value 'error'.")
    code: str = Field(..., description="Machine-readable error code.")
    message: str = Field(..., description="Human-readable description.")
    details: Optional[Dict[str, Any]] = Field(None, description="Optional additional error details.")


# PUBLIC_INTERFACE
class InvalidArgumentError(TypeError):
    """Raised when a helper receives an unsupported container or a non-callable callback.

    Subclasses TypeError so plain `except TypeError` call sites keep working.
    The structured payload is available as `detail`.
    """

    def __init__(self, detail: Dict[str, Any]):
        super().__init__(detail.get("message", "Invalid argument"))
        self.detail = detail


def invalid_argument(
    code: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
) -> InvalidArgumentError:
    """Create an InvalidArgumentError with the standardized error payload."""
    payload = ErrorDetail(code=code, message=message, details=details).model_dump()
    return InvalidArgumentError(payload)
