import unittest

from audio_chain.sample import U16
from audio_chain.source import Delay, SamplesBuffer
from tests.helpers.audio_utils import (
    EndlessCounter,
    SegmentedSource,
    assert_frame_contract,
    pull_with_frame_lens,
    take,
)


class TestDelay(unittest.TestCase):
    def test_one_second_of_silence(self):
        source = SamplesBuffer(1, 2, [5, 5]).delay(1.0)
        self.assertIsInstance(source, Delay)

        samples, frame_lens, _ = pull_with_frame_lens(source)
        self.assertEqual(samples, [0, 0, 5, 5])
        self.assertEqual(frame_lens, [2, 1, 2, 1, 0])

    def test_total_duration_adds_delay(self):
        self.assertAlmostEqual(SamplesBuffer(1, 2, [5, 5]).delay(1.0).total_duration(), 2.0)
        self.assertIsNone(EndlessCounter().delay(1.0).total_duration())

    def test_silence_spans_all_channels(self):
        source = SamplesBuffer(2, 4, [7] * 4).delay(0.5)
        self.assertEqual(list(source), [0, 0, 0, 0, 7, 7, 7, 7])

    def test_silence_uses_sample_type_zero(self):
        source = SamplesBuffer(1, 2, [1], U16).delay(1.0)
        self.assertEqual(list(source), [32768, 32768, 1])

    def test_infinite_inner(self):
        source = EndlessCounter(rate=10).delay(0.2)
        self.assertEqual(source.current_frame_len(), 2)
        self.assertEqual(take(source, 5), [0, 0, 0, 1, 2])
        self.assertIsNone(source.current_frame_len())

    def test_silence_uses_first_frame_format(self):
        inner = SegmentedSource([(2, 4, [1, 2]), (1, 8, [3])])
        samples, frame_lens, formats = pull_with_frame_lens(inner.delay(0.5))
        self.assertEqual(samples, [0, 0, 0, 0, 1, 2, 3])
        self.assertEqual(formats, [(2, 4)] * 6 + [(1, 8)])
        assert_frame_contract(self, frame_lens)

    def test_zero_delay_mirrors_inner(self):
        source = SamplesBuffer(1, 10, [1, 2, 3]).delay(0.0)
        self.assertEqual(source.current_frame_len(), 3)
        self.assertEqual(list(source), [1, 2, 3])


if __name__ == "__main__":
    unittest.main()
