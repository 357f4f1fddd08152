import io
import unittest

from straceit.Config import Config
from straceit.Descriptors import FileDescription, Pipe, SocketDescription
from straceit.Events import Close, Dup, Open, PipeOpened, Read, Socket, Write
from straceit.Tracker import Tracker


class TestTracker(unittest.TestCase):

    def setUp(self):
        self.out = io.StringIO()
        self.tracker = Tracker(Config(verbose=False), self.out)

    def lines(self):
        return self.out.getvalue().splitlines()

    def test_standard_descriptors(self):
        self.assertEqual(
            {fd: summary.descriptor for fd, summary in self.tracker.summaries.items()},
            {0: FileDescription("STDIN"), 1: FileDescription("STDOUT"), 2: FileDescription("STDERR")},
        )

    def test_summaries_is_read_only(self):
        with self.assertRaises(TypeError):
            self.tracker.summaries[3] = None  # type: ignore

    def test_close_reports_and_forgets(self):
        self.tracker.open_file(3, "/home/user/data.bin")
        self.tracker.read(3, 4096, 4096)
        self.tracker.close(3)
        self.assertEqual(self.lines(), ["read 4K with 1 ops (4K / op) FILE Path:/home/user/data.bin"])
        self.assertNotIn(3, self.tracker.summaries)

    def test_finish_reports_in_descriptor_order(self):
        self.tracker.open_file(5, "/home/user/b")
        self.tracker.open_socket(4)
        self.tracker.write(5, 10, 10)
        self.tracker.write(4, 20, 20)
        self.tracker.write(1, 30, 30)
        self.tracker.finish()
        self.assertEqual(
            self.lines(),
            [
                "write 20B with 1 ops (20B / op) SOCKET Bind: Connect:",
                "write 10B with 1 ops (10B / op) FILE Path:/home/user/b",
            ],
        )
        self.assertEqual(len(self.tracker.summaries), 0)

    def test_reopen_same_resource_resets_in_place(self):
        self.tracker.open_file(3, "/home/user/data.bin")
        summary = self.tracker.summaries[3]
        self.tracker.read(3, 100, 100)
        with self.assertLogs("straceit.Tracker", level="DEBUG") as logs:
            self.tracker.open_file(3, "/home/user/data.bin")
        self.assertEqual(
            logs.output, ["DEBUG:straceit.Tracker:descriptor 3 reopened, resetting FILE Path:/home/user/data.bin"]
        )
        self.assertIs(self.tracker.summaries[3], summary)
        self.assertTrue(summary.is_empty())
        self.assertEqual(self.lines(), ["read 100B with 1 ops (100B / op) FILE Path:/home/user/data.bin"])

    def test_reuse_for_other_resource_replaces(self):
        self.tracker.open_file(3, "/home/user/data.bin")
        self.tracker.read(3, 100, 100)
        with self.assertLogs("straceit.Tracker", level="DEBUG") as logs:
            self.tracker.open_socket(3)
        self.assertEqual(self.tracker.summaries[3].descriptor, SocketDescription())
        self.assertTrue(self.tracker.summaries[3].is_empty())
        self.assertEqual(self.lines(), ["read 100B with 1 ops (100B / op) FILE Path:/home/user/data.bin"])
        self.assertIn("descriptor 3 reused", logs.output[0])

    def test_pipe_and_dup(self):
        self.tracker.open_pipe(3, 4)
        self.tracker.dup(4, 5)
        self.assertEqual(self.tracker.summaries[3].descriptor, Pipe())
        self.assertEqual(self.tracker.summaries[4].descriptor, Pipe())
        self.assertEqual(self.tracker.summaries[5].descriptor, FileDescription("DUP"))

    def test_dup_of_untracked_descriptor_warns(self):
        with self.assertLogs("straceit.Tracker", level="WARNING") as logs:
            self.tracker.dup(9, 10)
        self.assertEqual(logs.output, ["WARNING:straceit.Tracker:dup of untracked descriptor 9"])
        self.assertIn(10, self.tracker.summaries)

    def test_untracked_descriptor_is_ignored(self):
        with self.assertLogs("straceit.Tracker", level="WARNING") as logs:
            self.tracker.read(42, 10, 10)
            self.tracker.write(42, 10, 10)
            self.tracker.close(42)
        self.assertEqual(
            logs.output,
            [
                "WARNING:straceit.Tracker:read on untracked descriptor 42, ignoring",
                "WARNING:straceit.Tracker:write on untracked descriptor 42, ignoring",
                "WARNING:straceit.Tracker:close on untracked descriptor 42, ignoring",
            ],
        )
        self.assertEqual(self.lines(), [])

    def test_consume(self):
        self.tracker.consume(
            [
                Open(3, "/home/user/data.bin"),
                Read(3, 4096, 4096),
                Read(3, 4096, 4096),
                Read(3, 4096, 4096),
                Read(3, 1024, 500),
                Socket(4),
                Write(4, 512, 512),
                PipeOpened(5, 6),
                Write(6, 10, 10),
                Dup(3, 7),
                Open(8, "/etc/ld.so.cache"),
                Read(8, 832, 832),
                Close(3),
            ]
        )
        self.tracker.finish()
        self.assertEqual(
            self.lines(),
            [
                "read 12.5K with 4 ops (4K / op) FILE Path:/home/user/data.bin",
                "write 512B with 1 ops (512B / op) SOCKET Bind: Connect:",
            ],
        )

    def test_consume_verbose(self):
        tracker = Tracker(Config(verbose=True), self.out)
        tracker.consume([PipeOpened(3, 4), Write(4, 10, 10), Close(4)])
        self.assertEqual(self.lines(), ["write 10B with 1 ops (10B / op) PIPE"])

    def test_consume_rejects_unknown_events(self):
        with self.assertRaises(TypeError):
            self.tracker.consume(["read(3, ...) = 10"])  # type: ignore


if __name__ == "__main__":
    unittest.main()
