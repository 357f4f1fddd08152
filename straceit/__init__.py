from .Config import Config, configure_logging
from .Descriptors import FileDescription, Pipe, ResourceKind, SocketDescription
from .Summary import Summary
from .Tracker import Tracker
from .utils import humanize

__all__ = [
    "Config",
    "configure_logging",
    "FileDescription",
    "Pipe",
    "ResourceKind",
    "SocketDescription",
    "Summary",
    "Tracker",
    "humanize",
]
