from .publisher import AlertPublisher, validate_message

__all__ = ["AlertPublisher", "validate_message"]
