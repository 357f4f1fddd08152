from straceit import Config, Summary, Tracker, configure_logging
from straceit.Events import Close, Dup, Open, PipeOpened, Read, Socket, Write

# from straceit import Config
# Config(verbose=True)  # Also reports pipes, standard streams and system files
# Config(debug=True)  # Logs resources that saw no I/O at all


def single_summary():
    """
    Feed a single Summary by hand and print it.
    """
    summary = Summary.file("/home/user/data.bin")
    for _ in range(3):
        summary.update_read(4096, 4096)
    summary.update_read(1024, 500)
    summary.show(Config())


def traced_process(config: Config):
    """
    Replay a small trace through the descriptor table.
    """
    tracker = Tracker(config)
    tracker.consume(
        [
            Open(3, "/etc/ld.so.cache"),
            Read(3, 832, 832),
            Close(3),
            Open(3, "/home/user/data.bin"),
            Read(3, 65536, 65536),
            Read(3, 65536, 12000),
            Socket(4),
            Write(4, 1448, 1448),
            PipeOpened(5, 6),
            Write(6, 4096, 4096),
            Dup(4, 7),
            Write(1, 80, 80),
        ]
    )
    tracker.finish()


if __name__ == "__main__":
    single_summary()
    print("*" * 5, "quiet", "*" * 5)
    traced_process(Config())
    print("*" * 5, "verbose", "*" * 5)
    verbose_config = Config(verbose=True, debug=True)
    configure_logging(verbose_config)
    traced_process(verbose_config)
