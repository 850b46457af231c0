import unittest

import numpy as np

from audio_chain.audio_io import AudioData, AudioSource, SourceAudioStream
from audio_chain.config import StreamConfig
from audio_chain.source import SamplesBuffer, SineWave


def as_int16(data: bytes):
    return np.frombuffer(data, dtype="<i2").tolist()


class TestSourceAudioStream(unittest.TestCase):
    def test_implements_audio_source(self):
        stream = SourceAudioStream(SineWave(440))
        self.assertIsInstance(stream, AudioSource)
        self.assertEqual(stream.channels, 1)
        self.assertEqual(stream.rate, 16000)
        self.assertEqual(stream.chunk_size, 320)
        self.assertEqual(stream.sample_size, 2)
        self.assertEqual(stream.sample_format, np.dtype("<i2"))

    def test_generator_requires_resume(self):
        stream = SourceAudioStream(SamplesBuffer(1, 16000, [1, 2, 3]))
        self.assertEqual(list(stream.generator()), [])

    def test_chunks(self):
        config = StreamConfig(chunk_size=2)
        stream = SourceAudioStream(SamplesBuffer(1, 16000, [1, 2, 3, 4, 5]), config)

        with stream:
            chunks = list(stream.generator())

        self.assertEqual([len(c) for c in chunks], [4, 4, 2])
        self.assertEqual(as_int16(b"".join(chunks)), [1, 2, 3, 4, 5])

    def test_pause_stops_generator(self):
        stream = SourceAudioStream(SineWave(440))
        stream.resume()
        gen = stream.generator()
        self.assertEqual(len(next(gen)), 320 * 2)

        stream.pause()
        with self.assertRaises(StopIteration):
            next(gen)

    def test_converts_to_config_format(self):
        config = StreamConfig(channels=2, rate=16000)
        stream = SourceAudioStream(SamplesBuffer(1, 8000, [100, 200]), config)
        audio = stream.read()
        self.assertEqual(as_int16(audio.content), [100, 100, 150, 150, 200, 200, 200, 200])
        self.assertEqual(audio.channels, 2)
        self.assertEqual(audio.rate, 16000)

    def test_float_output(self):
        config = StreamConfig(sample_type="f32", rate=4)
        stream = SourceAudioStream(SamplesBuffer(1, 4, [32767, 0]), config)
        audio = stream.read()
        self.assertEqual(audio.sample_size, 4)
        self.assertEqual(np.frombuffer(audio.content, dtype="<f4").tolist(), [1.0, 0.0])

    def test_read_collects_everything(self):
        stream = SourceAudioStream(SamplesBuffer(1, 16000, [1, 2, 3, 4, 5]))
        audio = stream.read()
        self.assertEqual(
            audio,
            AudioData(
                content=np.array([1, 2, 3, 4, 5], dtype="<i2").tobytes(),
                sample_size=2,
                rate=16000,
                channels=1,
            ),
        )
        self.assertAlmostEqual(audio.duration, 5 / 16000)

    def test_read_infinite_source(self):
        stream = SourceAudioStream(SineWave(440))
        with self.assertRaises(ValueError):
            stream.read()

        audio = stream.read(max_duration=0.001)
        self.assertEqual(len(audio.content), 16 * 2)


class TestAudioData(unittest.TestCase):
    def test_equality(self):
        a = AudioData(b"\x00\x01", 2, 16000, 1)
        self.assertEqual(a, AudioData(b"\x00\x01", 2, 16000, 1))
        self.assertNotEqual(a, AudioData(b"\x00\x01", 2, 8000, 1))
        self.assertNotEqual(a, b"\x00\x01")

    def test_duration(self):
        audio = AudioData(b"\x00" * 16, 2, 4, 2)
        self.assertEqual(audio.num_frames, 4)
        self.assertEqual(audio.duration, 1.0)


if __name__ == "__main__":
    unittest.main()
