from .soup_document import InteractionEvent, SoupDocument

__all__ = ["InteractionEvent", "SoupDocument"]
