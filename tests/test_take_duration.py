import unittest

from audio_chain.source import SamplesBuffer, SineWave, TakeDuration
from tests.helpers.audio_utils import (
    EndlessCounter,
    SegmentedSource,
    assert_frame_contract,
    pull_with_frame_lens,
)


class TestTakeDuration(unittest.TestCase):
    def test_truncates_to_two_samples(self):
        source = SamplesBuffer(1, 1, [1, 2, 3, 4]).take_duration(2.0)
        self.assertIsInstance(source, TakeDuration)
        self.assertEqual(source.current_frame_len(), 2)

        samples, frame_lens, _ = pull_with_frame_lens(source)
        self.assertEqual(samples, [1, 2])
        self.assertEqual(frame_lens, [2, 1, 0])
        self.assertEqual(source.current_frame_len(), 0)

    def test_shorter_inner_is_forwarded_entirely(self):
        source = SamplesBuffer(1, 10, [1, 2, 3]).take_duration(5.0)
        self.assertEqual(list(source), [1, 2, 3])
        self.assertAlmostEqual(source.total_duration(), 0.3)

    def test_total_duration_is_the_lesser(self):
        self.assertEqual(SamplesBuffer(1, 1, [0] * 10).take_duration(2.5).total_duration(), 2.5)
        self.assertEqual(SineWave(440).take_duration(1.5).total_duration(), 1.5)

    def test_truncates_infinite_source(self):
        source = EndlessCounter(rate=10).take_duration(0.5)
        self.assertEqual(source.current_frame_len(), 5)
        self.assertEqual(list(source), [0, 1, 2, 3, 4])

    def test_budget_counts_all_channels(self):
        source = SamplesBuffer(2, 4, list(range(20))).take_duration(1.0)
        self.assertEqual(list(source), list(range(8)))

    def test_exact_sample_count(self):
        source = SamplesBuffer(1, 44100, [0] * 10000).take_duration(0.1)
        self.assertEqual(len(list(source)), 4410)

        sine = SineWave(440, rate=48000).take_duration(0.01)
        self.assertEqual(len(list(sine)), 480)

    def test_budget_rederived_on_format_change(self):
        inner = SegmentedSource([(1, 4, [1, 2]), (2, 8, list(range(100, 140)))])
        source = inner.take_duration(1.0)

        samples, frame_lens, formats = pull_with_frame_lens(source)
        # 0.5s at mono 4Hz, then the remaining 0.5s at stereo 8Hz
        self.assertEqual(samples, [1, 2] + list(range(100, 108)))
        self.assertEqual(formats, [(1, 4)] * 2 + [(2, 8)] * 8)
        self.assertEqual(frame_lens[:3], [2, 1, 8])
        assert_frame_contract(self, frame_lens)

    def test_stays_exhausted(self):
        source = SamplesBuffer(1, 1, [1, 2, 3]).take_duration(1.0)
        self.assertEqual(next(source), 1)
        with self.assertRaises(StopIteration):
            next(source)
        with self.assertRaises(StopIteration):
            next(source)


if __name__ == "__main__":
    unittest.main()
