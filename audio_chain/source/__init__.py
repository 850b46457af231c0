"""Sources and the combinators that wrap them.

- `Source`: the contract every stream implements
- Combinators: `Amplify`, `FadeIn`, `Speed`, `TakeDuration`, `Delay`,
  `Repeat`, `UniformSourceIterator`
- Producers: `SineWave`, `SamplesBuffer`, `Zero`
"""

from .amplify import Amplify
from .delay import Delay
from .fade_in import FadeIn
from .repeat import Repeat
from .samples_buffer import SamplesBuffer
from .sine_wave import SineWave
from .source import Source
from .source_factory import SourceFactory
from .speed import Speed
from .take_duration import TakeDuration
from .uniform import UniformSourceIterator
from .zero import Zero

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
]
