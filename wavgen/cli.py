from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from wavgen.config import DEFAULT_ARRAY_LENGTH, DEFAULT_DURATION_S, SAMPLE_RATE_DEFAULT
from wavgen.errors import WavGenError
from wavgen.harmonics import read_harmonics
from wavgen.log import set_level
from wavgen.render import RenderRequest, generate
from wavgen.synth.frames import cycle_frequency_error
from wavgen.waveform import (
    ByDuration,
    ByLength,
    ChannelLayout,
    DurationPolicy,
    OutputTarget,
    SingleCycle,
    Sweep,
    Tone,
    WaveformSpec,
)


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("output", type=Path, help="Destination file (.wav, or e.g. .rs with --array)")

    length = parser.add_mutually_exclusive_group()
    length.add_argument("-d", "--duration", type=float, default=None,
                        help=f"Length in seconds, WAV only (default: {DEFAULT_DURATION_S})")
    length.add_argument("-l", "--length", type=int, default=None,
                        help="Length in sample frames, --array only")
    length.add_argument("-c", "--cycle", action="store_true",
                        help="Exactly one period, --array only (not for sweeps)")

    parser.add_argument("-s", "--stereo", action="store_true", help="Two identical channels")
    parser.add_argument("-r", "--sample-rate", type=int, default=SAMPLE_RATE_DEFAULT,
                        help=f"Sample rate in Hz (default: {SAMPLE_RATE_DEFAULT})")
    parser.add_argument("-a", "--array", action="store_true",
                        help="Write a static i16 array instead of a WAV file")
    parser.add_argument("-n", "--name", default=None,
                        help="Array identifier (default: derived from the output file name)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wavgen",
        description="Generate tones, sweeps and harmonic stacks as WAV files or i16 arrays",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    tone_parser = subparsers.add_parser("tone", help="Constant-frequency sine")
    tone_parser.add_argument("frequency", type=float, help="Frequency in Hz")
    _add_common_options(tone_parser)

    sweep_parser = subparsers.add_parser("sweep", help="Linear frequency sweep")
    sweep_parser.add_argument("start", type=float, help="Start frequency in Hz")
    sweep_parser.add_argument("finish", type=float, help="Finish frequency in Hz")
    _add_common_options(sweep_parser)

    harmonics_parser = subparsers.add_parser("harmonics", help="Additive stack read from a CSV file")
    harmonics_parser.add_argument("harmonics_csv", type=Path,
                                  help="CSV with header 'frequency,amplitude'")
    _add_common_options(harmonics_parser)

    return parser


def _spec_from_args(args: argparse.Namespace) -> WaveformSpec:
    if args.command == "tone":
        return Tone(args.frequency)
    if args.command == "sweep":
        return Sweep(args.start, args.finish)
    if args.command == "harmonics":
        return read_harmonics(args.harmonics_csv)
    raise ValueError(f"Unsupported command: {args.command}")


def _policy_from_args(args: argparse.Namespace, spec: WaveformSpec) -> DurationPolicy:
    if args.duration is not None:
        return ByDuration(args.duration)
    if args.length is not None:
        return ByLength(args.length)
    if args.cycle:
        return SingleCycle()
    # Defaults per target; explicit choices are checked by the resolver
    if not args.array:
        return ByDuration(DEFAULT_DURATION_S)
    if isinstance(spec, Sweep):
        return ByLength(DEFAULT_ARRAY_LENGTH)
    return SingleCycle()


def request_from_args(args: argparse.Namespace) -> RenderRequest:
    spec = _spec_from_args(args)
    return RenderRequest(
        spec=spec,
        policy=_policy_from_args(args, spec),
        target=OutputTarget.SOURCE_ARRAY if args.array else OutputTarget.WAV,
        layout=ChannelLayout.STEREO if args.stereo else ChannelLayout.MONO,
        sample_rate=args.sample_rate,
        name=args.name,
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        set_level("INFO")

    try:
        request = request_from_args(args)
        out = generate(request, args.output)
    except WavGenError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Number of samples {request.sample_count}")
    if isinstance(request.policy, SingleCycle):
        actual, error = cycle_frequency_error(request.spec, request.sample_rate)
        print(f"Looped frequency {actual:.2f} Hz ({error:+.2f} Hz)")
    print(f"Wrote {out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
