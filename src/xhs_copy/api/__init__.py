from .handler import HandlerResponse, handle_request

__all__ = [
    "handle_request",
    "HandlerResponse",
]
