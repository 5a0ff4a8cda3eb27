import threading
import time
import traceback
import unittest
from unittest import mock

import clipline
from clipline.backends import Board
from clipline.common import ClipboardFault, ProviderNotFound, Selection


class MemoryBoard:
    def __init__(self):
        self.text = ''
        self.detections = 0

    def provide(self):
        self.detections += 1
        return Board('memory', self.copy, self.paste)

    def copy(self, text):
        self.text = text

    def paste(self):
        return self.text


class FacadeTests(unittest.TestCase):
    def setUp(self):
        self.board = MemoryBoard()
        mock.patch.object(clipline, '_selection', Selection()).start()
        self.provide = mock.patch.object(clipline, 'provide',
                                         side_effect=self.board.provide).start()
        self.addCleanup(mock.patch.stopall)

    def test_round_trip(self):
        clipline.copy_text('hello')
        self.assertEqual(clipline.paste_text(), 'hello')
        clipline.copy('café')
        self.assertEqual(clipline.paste(), 'café')

    def test_copy_renders_value(self):
        clipline.copy(42)
        self.assertEqual(clipline.paste(), '42')
        clipline.copy(None)
        self.assertEqual(clipline.paste(), 'None')

    def test_detects_once(self):
        for i in range(5):
            clipline.copy_text(str(i))
            clipline.paste()
        self.assertEqual(clipline.provider_name(), 'memory')
        self.assertEqual(self.board.detections, 1)

    def test_detection_failure_is_sticky(self):
        self.provide.side_effect = ProviderNotFound()
        with self.assertRaises(ProviderNotFound) as first:
            clipline.paste_text()
        with self.assertRaises(ProviderNotFound) as second:
            clipline.copy_text('x')
        self.assertIs(first.exception, second.exception)
        self.assertEqual(self.provide.call_count, 1)

    def test_infallible_api_faults(self):
        self.provide.side_effect = ProviderNotFound()
        with self.assertLogs(level='ERROR'):
            with self.assertRaises(ClipboardFault) as ctx:
                clipline.copy('x')
        self.assertIsInstance(ctx.exception.__cause__, ProviderNotFound)
        with self.assertLogs(level='ERROR'):
            with self.assertRaises(ClipboardFault):
                clipline.paste()
        self.assertEqual(self.provide.call_count, 1)

    def test_sticky_error_does_not_grow(self):
        self.provide.side_effect = ProviderNotFound()
        depths = []
        for _ in range(10):
            try:
                clipline.paste_text()
            except ProviderNotFound as e:
                depths.append(len(traceback.extract_tb(e.__traceback__)))
        self.assertEqual(len(set(depths)), 1)

    def test_sticky_error_hides_caller_context(self):
        self.provide.side_effect = ProviderNotFound()
        with self.assertRaises(ProviderNotFound):
            clipline.paste_text()
        try:
            raise KeyError('unrelated caller state')
        except KeyError:
            with self.assertRaises(ProviderNotFound) as ctx:
                clipline.paste_text()
        self.assertTrue(ctx.exception.__suppress_context__)
        self.assertIsNone(ctx.exception.__cause__)

    def test_provider_fault_passes_through(self):
        fault = ClipboardFault("qdbus output lacks its trailing newline: 'x'")
        self.provide.side_effect = None
        self.provide.return_value = Board('klipper', mock.Mock(), mock.Mock(side_effect=fault))
        with self.assertRaises(ClipboardFault) as ctx:
            clipline.paste()
        self.assertIs(ctx.exception, fault)
        self.assertIsNone(ctx.exception.__cause__)

    def test_backend_errors_are_not_redetected(self):
        broken = Board('broken', mock.Mock(side_effect=BrokenPipeError), mock.Mock())
        self.provide.side_effect = None
        self.provide.return_value = broken
        with self.assertRaises(BrokenPipeError):
            clipline.copy_text('x')
        with self.assertRaises(BrokenPipeError):
            clipline.copy_text('x')
        self.assertEqual(self.provide.call_count, 1)


class SelectionTests(unittest.TestCase):
    def test_concurrent_first_callers_share_one_detection(self):
        selection = Selection()
        calls = []

        def detect():
            calls.append(1)
            time.sleep(0.05)
            return object()

        results = []
        threads = [threading.Thread(target=lambda: results.append(selection.get(detect)))
                   for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        self.assertEqual(len(calls), 1)
        self.assertEqual(len(results), 8)
        self.assertTrue(all(r is results[0] for r in results))
        self.assertTrue(selection.filled)

    def test_non_oserror_is_not_cached(self):
        selection = Selection()
        with self.assertRaises(ValueError):
            selection.get(mock.Mock(side_effect=ValueError))
        self.assertFalse(selection.filled)


if __name__ == '__main__':
    unittest.main()
