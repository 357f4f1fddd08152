from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class FileDescription:
    path: str

    def __str__(self) -> str:
        return f"FILE Path:{self.path}"


@dataclass(slots=True)
class SocketDescription:
    # Nothing in the tracer fills these in yet; see Summary.socket.
    bind: str = ""
    connect: str = ""

    def __str__(self) -> str:
        return f"SOCKET Bind:{self.bind} Connect:{self.connect}"


@dataclass(frozen=True, slots=True)
class Pipe:
    def __str__(self) -> str:
        return "PIPE"


ResourceKind = Union[FileDescription, SocketDescription, Pipe]
