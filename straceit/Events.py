from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class Open:
    fd: int
    path: str


@dataclass(frozen=True, slots=True)
class Socket:
    fd: int


@dataclass(frozen=True, slots=True)
class PipeOpened:
    read_fd: int
    write_fd: int


@dataclass(frozen=True, slots=True)
class Dup:
    old_fd: int
    new_fd: int


@dataclass(frozen=True, slots=True)
class Read:
    fd: int
    op_size: int
    bytes: int


@dataclass(frozen=True, slots=True)
class Write:
    fd: int
    op_size: int
    bytes: int


@dataclass(frozen=True, slots=True)
class Close:
    fd: int


Event = Union[Open, Socket, PipeOpened, Dup, Read, Write, Close]
