import logging
from typing import Dict, Self, TextIO

from .Config import Config
from .Descriptors import FileDescription, Pipe, ResourceKind, SocketDescription
from .Filter import is_suppressed
from .utils import humanize, saturating_add

logger = logging.getLogger(__name__)


class Summary:
    def __init__(self, descriptor: ResourceKind):
        """
        Initializes a new instance of the Summary class with empty statistics.

        Args:
            descriptor (ResourceKind): The kind of the traced resource. It never changes afterwards.

        Returns:
            None
        """
        self.descriptor: ResourceKind = descriptor
        self.read_freq: Dict[int, int] = {}
        self.write_freq: Dict[int, int] = {}
        self.read_bytes: int = 0
        self.write_bytes: int = 0

    def __repr__(self) -> str:
        return (
            f"Summary({self.descriptor!s}, read_bytes={self.read_bytes}, write_bytes={self.write_bytes}, "
            f"read_ops={self.read_ops}, write_ops={self.write_ops})"
        )

    @classmethod
    def file(cls, path: str) -> Self:
        return cls(FileDescription(path))

    @classmethod
    def pipe(cls) -> Self:
        return cls(Pipe())

    @classmethod
    def socket(cls, bind: str = "", connect: str = "") -> Self:
        """
        Creates a Summary for a socket. The tracer itself always calls this without endpoints;
        `bind` and `connect` are there for callers that know them from elsewhere.
        """
        return cls(SocketDescription(bind, connect))

    @property
    def read_ops(self) -> int:
        return sum(self.read_freq.values())

    @property
    def write_ops(self) -> int:
        return sum(self.write_freq.values())

    def is_empty(self) -> bool:
        return not self.read_freq and not self.write_freq

    def reset(self):
        """
        Clears both histograms and byte totals. The descriptor is kept.
        """
        self.read_freq.clear()
        self.write_freq.clear()
        self.read_bytes = 0
        self.write_bytes = 0

    def update_read(self, op_size: int, bytes_transferred: int):
        """
        Records one read call.

        Args:
            op_size (int): The size requested by the call, used as histogram bucket.
            bytes_transferred (int): The bytes actually read, which may be less than op_size.
        """
        self.read_freq[op_size] = saturating_add(self.read_freq.get(op_size, 0), 1)
        self.read_bytes = saturating_add(self.read_bytes, bytes_transferred)

    def update_write(self, op_size: int, bytes_transferred: int):
        """
        Records one write call. See `update_read`.
        """
        self.write_freq[op_size] = saturating_add(self.write_freq.get(op_size, 0), 1)
        self.write_bytes = saturating_add(self.write_bytes, bytes_transferred)

    @staticmethod
    def format_line(direction: str, total_bytes: int, freq: Dict[int, int], descriptor: ResourceKind) -> str:
        """
        Builds one report line for a non-empty histogram.

        Args:
            direction (str): "read" or "write".
            total_bytes (int): The bytes transferred in that direction.
            freq (Dict[int, int]): The histogram of operation sizes, must not be empty.
            descriptor (ResourceKind): The resource the line is about.

        Returns:
            str: The report line.

        Note:
            - The "/ op" size is taken from the greatest (op_size, count) pair, so it is the largest
              operation size seen, with the count only breaking ties. It is not the most frequent size.
        """
        op_size, _ = max(freq.items())
        n_ops = sum(freq.values())
        return f"{direction} {humanize(total_bytes)} with {n_ops} ops ({humanize(op_size)} / op) {descriptor}"

    def show(self, config: Config, out: TextIO | None = None) -> None:
        """
        Prints the report for this resource.

        Parameters:
            config (Config): The run configuration. If `verbose` is off, pipes and system files are skipped silently.
                Resources without any I/O are logged only when `debug` is on.
            out (TextIO | None, optional): Where to write the lines. Defaults to standard output.

        Returns:
            None
        """
        if is_suppressed(self.descriptor, config.verbose):
            return

        if self.is_empty():
            if config.debug:
                logger.debug(f"no I/O with {self.descriptor}")
            return

        if self.read_freq:
            print(self.format_line("read", self.read_bytes, self.read_freq, self.descriptor), file=out)

        if self.write_freq:
            print(self.format_line("write", self.write_bytes, self.write_freq, self.descriptor), file=out)
