import argparse
import logging
import sys

from .chart import format_spectrum
from .errors import NoiseGenError
from .generators import DEFAULT_SAMPLE_RATE, NoiseGenerator
from .playback import AudioSink
from .spectrum import analyze_spectrum
from .types import NoiseType
from .wave import write_wav

DEFAULT_DURATION = 5.0

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="noisegen", description="Generate various types of noise audio files")
    p.add_argument("noise_type", type=str.lower, choices=[t.value for t in NoiseType], help="Type of noise to generate")
    p.add_argument("-o", "--output", help="Output WAV file (optional if --play or --fft is used)")
    p.add_argument("-p", "--play", action="store_true", help="Play the audio")
    p.add_argument("--fft", action="store_true", help="Show the spectrum of the audio")
    p.add_argument("-d", "--duration", type=float, default=DEFAULT_DURATION, help="Duration in seconds")
    p.add_argument("-s", "--sample-rate", type=int, default=DEFAULT_SAMPLE_RATE, help="Sample rate in Hz")
    p.add_argument("-f", "--frequency", type=float, help="Centre frequency for gray noise")
    p.add_argument("--seed", type=int, help="Seed for reproducible output")
    p.add_argument("-v", "--verbose", action="store_true")
    return p


def main(argv=None) -> int:
    p = build_parser()
    args = p.parse_args(argv)

    if not args.output and not args.play and not args.fft:
        p.error("either --output, --play, or --fft must be specified")
    if args.duration <= 0:
        p.error("--duration must be positive")
    if args.sample_rate <= 0:
        p.error("--sample-rate must be positive")
    if args.frequency is not None and args.frequency <= 0:
        p.error("--frequency must be positive")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    noise_type = NoiseType.parse(args.noise_type)
    try:
        sink = AudioSink() if args.play else None

        print(f"Generating {noise_type} noise...")
        print(f"Duration: {args.duration:.2f}s")
        print(f"Sample rate: {args.sample_rate}Hz")
        if args.frequency is not None:
            print(f"Custom frequency: {args.frequency}Hz")

        gen = NoiseGenerator(args.sample_rate, seed=args.seed)
        samples = gen.generate(noise_type, args.duration, args.frequency)

        if sink is not None:
            sink.play(samples, args.sample_rate)

        if args.output:
            print(f"Writing to {args.output}...")
            write_wav(args.output, samples, args.sample_rate)
            print(f"Done! Generated {len(samples)} samples.")
    except NoiseGenError as e:
        logger.debug("aborted", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.fft:
        print()
        print(format_spectrum(analyze_spectrum(samples, args.sample_rate)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
