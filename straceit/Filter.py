from typing import FrozenSet, Tuple

from .Descriptors import FileDescription, Pipe, ResourceKind

# Pseudo files and system locations that are hidden unless running verbose.
IGNORED_PATHS: FrozenSet[str] = frozenset({"/dev/null", "STDOUT", "STDERR", "STDIN", "DUP"})
IGNORED_PREFIXES: Tuple[str, ...] = (
    "/bin/",
    "/etc/",
    "/lib/",
    "/lib64/",
    "/opt/",
    "/proc/",
    "/run/",
    "/sbin/",
    "/sys/",
    "/tmp/",
    "/usr/",
)


def is_system_path(path: str) -> bool:
    """
    Checks whether a path belongs to the system locations or pseudo files that are considered noise.
    Args:
        path (str): The path of a traced file, or one of the pseudo names used for special descriptors.
    Returns:
        bool: True if the path matches one of the ignored paths or prefixes.
    """
    return path in IGNORED_PATHS or path.startswith(IGNORED_PREFIXES)


def is_suppressed(descriptor: ResourceKind, verbose: bool) -> bool:
    """
    Decides whether the report for a resource should be hidden.

    Args:
        descriptor (ResourceKind): The kind of the traced resource.
        verbose (bool): If True, nothing is suppressed.

    Returns:
        bool: True if the resource is a pipe or a file under a system path and verbose is off.
              Sockets are never suppressed.
    """
    if verbose:
        return False
    if isinstance(descriptor, Pipe):
        return True
    if isinstance(descriptor, FileDescription):
        return is_system_path(descriptor.path)
    return False
