from .element_tree_port import ElementTreePort, Listener
from .error_log_port import ErrorLogPort

__all__ = ["ElementTreePort", "Listener", "ErrorLogPort"]
