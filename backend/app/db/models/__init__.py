from ..database import Base
from .attachment_link import AttachmentLink

__all__ = [
    "Base",
    "AttachmentLink",
]
