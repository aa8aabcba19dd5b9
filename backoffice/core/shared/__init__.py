from backoffice.core.shared.logger import ContextFormatter, ContextLogger, configure_logging, get_logger

__all__ = ["ContextFormatter", "ContextLogger", "configure_logging", "get_logger"]
