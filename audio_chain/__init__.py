from .audio_io import AudioData, AudioSource, SourceAudioStream
from .config import StreamConfig
from .sample import F32, I16, U16, SampleType, get_sample_type
from .source import (
    Amplify,
    Delay,
    FadeIn,
    Repeat,
    SamplesBuffer,
    SineWave,
    Source,
    SourceFactory,
    Speed,
    TakeDuration,
    UniformSourceIterator,
    Zero,
)

__all__ = [
    "Source",
    "Amplify",
    "Delay",
    "FadeIn",
    "Repeat",
    "Speed",
    "TakeDuration",
    "UniformSourceIterator",
    "SamplesBuffer",
    "SineWave",
    "Zero",
    "SourceFactory",
    "SampleType",
    "I16",
    "U16",
    "F32",
    "get_sample_type",
    "StreamConfig",
    "AudioData",
    "AudioSource",
    "SourceAudioStream",
]
