import logging
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, TextIO

from .Config import Config
from .Events import Close, Dup, Event, Open, PipeOpened, Read, Socket, Write
from .Summary import Summary

logger = logging.getLogger(__name__)

STANDARD_DESCRIPTORS: Dict[int, str] = {0: "STDIN", 1: "STDOUT", 2: "STDERR"}


class Tracker:
    def __init__(self, config: Config, out: TextIO | None = None):
        """
        Initializes a new descriptor table. Descriptors 0, 1 and 2 start out as STDIN, STDOUT and STDERR.

        Args:
            config (Config): The run configuration passed on to every report.
            out (TextIO | None, optional): Where report lines are written. Defaults to standard output.

        Returns:
            None
        """
        self.config: Config = config
        self.out: TextIO | None = out
        self._summaries: Dict[int, Summary] = {fd: Summary.file(name) for fd, name in STANDARD_DESCRIPTORS.items()}

    @property
    def summaries(self) -> Mapping[int, Summary]:
        return MappingProxyType(self._summaries)

    def _track(self, fd: int, summary: Summary):
        """
        Puts `summary` in the table under `fd`.
        If the descriptor is reused, the previous summary is reported first. When the previous
        summary describes the same resource it is reset in place instead of being replaced.
        """
        previous = self._summaries.get(fd)
        if previous is None:
            self._summaries[fd] = summary
            return

        previous.show(self.config, self.out)
        if previous.descriptor == summary.descriptor:
            logger.debug(f"descriptor {fd} reopened, resetting {previous.descriptor}")
            previous.reset()
        else:
            logger.debug(f"descriptor {fd} reused, replacing {previous.descriptor} with {summary.descriptor}")
            self._summaries[fd] = summary

    def _lookup(self, fd: int, operation: str) -> Summary | None:
        summary = self._summaries.get(fd)
        if summary is None:
            logger.warning(f"{operation} on untracked descriptor {fd}, ignoring")
        return summary

    def open_file(self, fd: int, path: str):
        self._track(fd, Summary.file(path))

    def open_socket(self, fd: int):
        self._track(fd, Summary.socket())

    def open_pipe(self, read_fd: int, write_fd: int):
        self._track(read_fd, Summary.pipe())
        self._track(write_fd, Summary.pipe())

    def dup(self, old_fd: int, new_fd: int):
        if old_fd not in self._summaries:
            logger.warning(f"dup of untracked descriptor {old_fd}")
        self._track(new_fd, Summary.file("DUP"))

    def read(self, fd: int, op_size: int, bytes_transferred: int):
        summary = self._lookup(fd, "read")
        if summary is not None:
            summary.update_read(op_size, bytes_transferred)

    def write(self, fd: int, op_size: int, bytes_transferred: int):
        summary = self._lookup(fd, "write")
        if summary is not None:
            summary.update_write(op_size, bytes_transferred)

    def close(self, fd: int):
        """
        Reports the summary of `fd` and stops tracking it.
        """
        summary = self._lookup(fd, "close")
        if summary is not None:
            summary.show(self.config, self.out)
            del self._summaries[fd]

    def consume(self, events: Iterable[Event]):
        """
        Feeds a stream of trace events into the table, in order.

        Args:
            events (Iterable[Event]): The parsed trace events.

        Raises:
            TypeError: If an element is not one of the known event types.
        """
        for event in events:
            if isinstance(event, Read):
                self.read(event.fd, event.op_size, event.bytes)
            elif isinstance(event, Write):
                self.write(event.fd, event.op_size, event.bytes)
            elif isinstance(event, Open):
                self.open_file(event.fd, event.path)
            elif isinstance(event, Socket):
                self.open_socket(event.fd)
            elif isinstance(event, PipeOpened):
                self.open_pipe(event.read_fd, event.write_fd)
            elif isinstance(event, Dup):
                self.dup(event.old_fd, event.new_fd)
            elif isinstance(event, Close):
                self.close(event.fd)
            else:
                raise TypeError(f"Unknown trace event: {event!r}")

    def finish(self):
        """
        Reports every summary still open, in ascending descriptor order, and empties the table.
        """
        for fd in sorted(self._summaries):
            self._summaries[fd].show(self.config, self.out)
        self._summaries.clear()
