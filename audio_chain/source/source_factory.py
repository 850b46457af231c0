import logging
import threading
from typing import Optional, Type

from .samples_buffer import SamplesBuffer
from .sine_wave import SineWave
from .source import Source
from .zero import Zero

logger = logging.getLogger(__name__)


class SourceFactory:
    _sources = {}
    _lock = threading.Lock()

    @classmethod
    def create(cls, source_name: Optional[str], **kwargs) -> Optional[Source]:
        logger.info(f"Creating source for '{source_name}'")

        if source_name is None:
            return None

        with cls._lock:
            if source_name in cls._sources:
                return cls._sources[source_name](**kwargs)

        raise RuntimeError(f"Source '{source_name}' is not available")

    @classmethod
    def register_source(cls, name: str, source_class: Type[Source]):
        with cls._lock:
            cls._sources[name] = source_class

    @classmethod
    def unregister_source(cls, name: str):
        with cls._lock:
            if name in cls._sources:
                del cls._sources[name]
            else:
                raise KeyError(f"Source not found: {name}")

    @classmethod
    def list_sources(cls):
        with cls._lock:
            return list(cls._sources.keys())


# Register built-in producers
SourceFactory.register_source("sine", SineWave)
SourceFactory.register_source("buffer", SamplesBuffer)
SourceFactory.register_source("zero", Zero)
