from bookmark_watcher.observability.logging import bookmark_context, configure_logging, get_logger

__all__ = ["bookmark_context", "configure_logging", "get_logger"]
