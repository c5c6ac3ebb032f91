"""
speechstitch – narrate a list of texts into one audio file with silence gaps.

The top-level package exposes the request/response models; the serverless
entry point is ``speechstitch.handler.handler``.
"""

from .models import (
    ErrorBody,
    StitchRequest,
    StitchResult,
)

__all__ = [
    "ErrorBody",
    "StitchRequest",
    "StitchResult",
]
