import os
import sys

from colorama import Fore

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from audio_chain import SamplesBuffer, SineWave, SourceAudioStream, StreamConfig


def describe(name, source):
    print(
        f"{Fore.BLUE}{name}{Fore.RESET}: {source.channels} channel(s) at {source.rate}Hz, "
        f"frame length {source.current_frame_len()}, duration {source.total_duration()}"
    )


# Main function
def main():
    # A two second tone that starts after half a second of silence and
    # fades in over 200ms
    tone = SineWave(440, amplitude=0.5).fade_in(0.2).delay(0.5).take_duration(2.0)
    describe("tone", tone)

    # A short click replayed forever, cut to one second
    click = SamplesBuffer(1, 8000, [12000, -12000] + [0] * 798)
    clicks = click.repeat_infinite().take_duration(1.0)
    describe("clicks", clicks)

    # Normalize both to 16kHz stereo PCM
    config = StreamConfig(channels=2, rate=16000)
    for name, source in (("tone", tone), ("clicks", clicks)):
        stream = SourceAudioStream(source, config)
        total = 0
        with stream:
            for chunk in stream.generator():
                total += len(chunk)
        print(f"{Fore.GREEN}{name}: streamed {total} bytes{Fore.RESET}")


if __name__ == "__main__":
    main()
