"""Audio I/O module for audio_chain.

This module bridges sample-level sources to byte-oriented consumers:
- `AudioSource`: the chunked PCM byte producer contract
- `SourceAudioStream`: any `Source` as fixed-format PCM chunks
- `AudioData`: a collected block of PCM bytes
"""

from .audio_data import AudioData
from .audio_source import AudioSource
from .source_audio_stream import SourceAudioStream

__all__ = [
    "AudioData",
    "AudioSource",
    "SourceAudioStream",
]
