from .builder import DialogSpec, build_document, check_content
from .message_box import new_message_box
from .session import DialogSession

__all__ = ("new_message_box", "DialogSpec", "DialogSession", "build_document", "check_content")
