#!/usr/bin/env python3
"""
CLI tool to render a source through a chain of effects into a WAV file.

The source is created by name through `SourceFactory` (--source, default
"sine"); --list-sources prints the registered names.

The chain is applied in this order: fade-in, amplify, speed, delay, then the
whole thing is cut to --duration seconds. The result is written as
16-bit signed PCM with the channels and rate given by --channels and --rate.

Examples:
    # One second of A4 at 44.1 kHz stereo
    python tools/render_source.py --output tone.wav --frequency 440 \\
        --channels 2 --rate 44100 --duration 1

    # Half a second of silence, a 200 ms fade-in, at half volume
    python tools/render_source.py --output fade.wav --delay 0.5 \\
        --fade-in 0.2 --gain 0.5 --duration 2
"""

import argparse
import logging
import sys
import wave
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from audio_chain import Source, SourceAudioStream, SourceFactory, StreamConfig  # noqa: E402

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def source_kwargs(args: argparse.Namespace) -> dict:
    """Constructor arguments for the producer named by `args.source`."""
    if args.source == "sine":
        return dict(frequency=args.frequency, rate=args.source_rate, amplitude=args.amplitude)
    if args.source == "zero":
        return dict(channels=1, rate=args.source_rate)
    raise ValueError(f"Source '{args.source}' cannot be built from command line options")


def build_chain(args: argparse.Namespace) -> Source:
    source = SourceFactory.create(args.source, **source_kwargs(args))

    if args.fade_in:
        source = source.fade_in(args.fade_in)
    if args.gain != 1.0:
        source = source.amplify(args.gain)
    if args.speed != 1.0:
        source = source.speed(args.speed)
    if args.delay:
        source = source.delay(args.delay)

    return source.take_duration(args.duration)


def render_to_wav(source: Source, output_path: Path, config: StreamConfig) -> float:
    """Write `source` to `output_path` and return the rendered duration."""
    stream = SourceAudioStream(source, config)
    audio = stream.read()

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with wave.open(str(output_path), 'wb') as wf:
        wf.setnchannels(audio.channels)
        wf.setsampwidth(audio.sample_size)
        wf.setframerate(audio.rate)
        wf.writeframes(audio.content)

    return audio.duration


def list_sources() -> bool:
    """List registered sources."""
    print("Available sources:")
    for name in SourceFactory.list_sources():
        print(f"  - {name}")
    return True


def main():
    parser = argparse.ArgumentParser(
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        '--output',
        type=Path,
        help='Output WAV file path.',
    )
    parser.add_argument(
        '--source',
        default='sine',
        help='Name of the registered source to render (default: sine). See --list-sources.',
    )
    parser.add_argument(
        '--list-sources',
        action='store_true',
        help='List registered sources and exit.',
    )
    parser.add_argument(
        '--frequency',
        type=float,
        default=440.0,
        help='Sine frequency in Hz (default: 440).',
    )
    parser.add_argument(
        '--amplitude',
        type=float,
        default=0.5,
        help='Sine amplitude between 0 and 1 (default: 0.5).',
    )
    parser.add_argument(
        '--source-rate',
        type=int,
        default=48000,
        help='Rate the sine is generated at, before conversion (default: 48000).',
    )
    parser.add_argument(
        '--duration',
        type=float,
        default=1.0,
        help='Total duration in seconds, delay included (default: 1.0).',
    )
    parser.add_argument(
        '--fade-in',
        type=float,
        default=0.0,
        help='Fade-in duration in seconds (default: no fade).',
    )
    parser.add_argument(
        '--gain',
        type=float,
        default=1.0,
        help='Amplification factor (default: 1.0).',
    )
    parser.add_argument(
        '--speed',
        type=float,
        default=1.0,
        help='Speed ratio applied by relabelling the rate (default: 1.0).',
    )
    parser.add_argument(
        '--delay',
        type=float,
        default=0.0,
        help='Seconds of leading silence (default: none).',
    )
    parser.add_argument(
        '--channels',
        type=int,
        default=1,
        help='Output channels (default: 1).',
    )
    parser.add_argument(
        '--rate',
        type=int,
        default=16000,
        help='Output sample rate in Hz (default: 16000).',
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose logging.',
    )

    args = parser.parse_args()

    setup_logging(args.verbose)

    if args.list_sources:
        return 0 if list_sources() else 1

    if args.output is None:
        parser.error("--output is required (unless --list-sources is used)")

    try:
        config = StreamConfig(
            channels=args.channels,
            rate=args.rate,
        )
    except ValueError as e:
        parser.error(str(e))

    logger.info(f"Rendering {args.duration}s of '{args.source}' to {args.output}")

    try:
        chain = build_chain(args)
    except (RuntimeError, ValueError) as e:
        parser.error(str(e))

    duration = render_to_wav(chain, args.output, config)

    logger.info(f"  Saved: {args.output} ({duration:.3f}s)")
    return 0


if __name__ == '__main__':
    sys.exit(main())
