import unittest

from audio_chain.source import SamplesBuffer, SineWave, Speed
from tests.helpers.audio_utils import take


class TestSpeed(unittest.TestCase):
    def test_rate_scales_by_ratio(self):
        self.assertEqual(SamplesBuffer(2, 44100, [1, 2]).speed(2.0).rate, 88200)
        self.assertEqual(SamplesBuffer(2, 44100, [1, 2]).speed(0.5).rate, 22050)

    def test_rate_is_rounded(self):
        self.assertEqual(SamplesBuffer(1, 44100, [1]).speed(1.0001).rate, 44104)
        self.assertEqual(SamplesBuffer(1, 3, [1]).speed(0.5).rate, 2)

    def test_samples_unchanged(self):
        samples = [3, 1, 4, 1, 5, 9]
        source = SamplesBuffer(2, 10, samples).speed(1.7)
        self.assertIsInstance(source, Speed)
        self.assertEqual(list(source), samples)

    def test_duration_divides_by_ratio(self):
        source = SamplesBuffer(1, 4, [0] * 8).speed(2.0)
        self.assertAlmostEqual(source.total_duration(), 1.0)
        self.assertIsNone(SineWave(440).speed(2.0).total_duration())

    def test_channels_and_frame_len_pass_through(self):
        source = SamplesBuffer(2, 10, [0] * 6).speed(3.0)
        self.assertEqual(source.channels, 2)
        self.assertEqual(source.current_frame_len(), 6)
        take(source, 2)
        self.assertEqual(source.current_frame_len(), 4)
        self.assertEqual(source.ratio, 3.0)


if __name__ == "__main__":
    unittest.main()
