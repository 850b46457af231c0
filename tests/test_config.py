import unittest

import audio_chain.config as config_mod
from audio_chain.sample import F32, I16


class TestConfig(unittest.TestCase):
    def test_defaults(self):
        c = config_mod.StreamConfig()
        self.assertEqual(c.channels, 1)
        self.assertEqual(c.rate, 16000)
        self.assertEqual(c.chunk_size, 320)
        self.assertIs(c.resolved_sample_type(), I16)

    def test_sample_type_resolution(self):
        c = config_mod.StreamConfig(sample_type="f32")
        self.assertIs(c.resolved_sample_type(), F32)

    def test_invalid_sample_type_raises(self):
        with self.assertRaises(ValueError):
            config_mod.StreamConfig(sample_type="s24")

    def test_non_positive_values_raise(self):
        with self.assertRaises(ValueError):
            config_mod.StreamConfig(channels=0)
        with self.assertRaises(ValueError):
            config_mod.StreamConfig(rate=-1)
        with self.assertRaises(ValueError):
            config_mod.StreamConfig(chunk_size=0)


if __name__ == "__main__":
    unittest.main()
