class AudioData:
    def __init__(self, content: bytes, sample_size: int, rate: int, channels: int):
        self.content = content
        self.sample_size = sample_size
        self.rate = rate
        self.channels = channels

    @property
    def num_frames(self) -> int:
        return len(self.content) // (self.sample_size * self.channels)

    @property
    def duration(self) -> float:
        return self.num_frames / self.rate

    def __eq__(self, other):
        if not isinstance(other, AudioData):
            return False

        return (
            self.content == other.content
            and self.sample_size == other.sample_size
            and self.rate == other.rate
            and self.channels == other.channels
        )

    def __repr__(self):
        return (
            f"AudioData({len(self.content)} bytes, {self.channels} channels "
            f"at {self.rate}Hz)"
        )
