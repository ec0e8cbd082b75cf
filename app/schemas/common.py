"""공통 Pydantic 응답 스키마.

Common Pydantic response schemas shared across API domains.
"""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Generic confirmation message response (e.g. after a delete).

    Attributes:
        message: Human-readable confirmation text
    """

    message: str
