"""Thin CLI entry point — builds a MergeRequest and calls the engine."""

import argparse
import sys
from pathlib import Path

from audioswap import ffutil
from audioswap.config import load_settings
from audioswap.engine import merge
from audioswap.errors import AudioSwapError, ClientInputError, ConfigError, FFmpegNotFoundError
from audioswap.logging import configure_logging
from audioswap.models import MergeRequest


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="audioswap",
        description="audioswap — replace a video's audio track with a trimmed remote clip.",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command")

    mrg = sub.add_parser("merge", help="Merge a remote audio clip into a local video")
    mrg.add_argument("video", type=Path, help="Input video file")
    mrg.add_argument("--audio-url", required=True, help="URL of the audio clip")
    mrg.add_argument("--start", type=float, required=True, help="Audio start time (seconds)")
    mrg.add_argument("--end", type=float, required=True, help="Audio end time (seconds)")
    mrg.add_argument("--name", help="Output base name (defaults to the video's stem)")
    mrg.add_argument("--work-dir", type=Path, help="Directory for intermediate and output files")

    serve = sub.add_parser("serve", help="Launch the upload API")
    serve.add_argument("--port", type=int, default=3000, help="Port to listen on")
    serve.add_argument("--host", type=str, default="127.0.0.1", help="Host to bind to")

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    configure_logging(verbose=args.verbose)
    try:
        settings = load_settings()
        ffutil.check_ffmpeg(settings)
    except (ConfigError, FFmpegNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.command == "serve":
        from audioswap.web import create_app
        app = create_app(settings)
        print(f"audioswap API: http://{args.host}:{args.port}/videos/upload")
        app.run(host=args.host, port=args.port, debug=False, threaded=True)
        return

    if args.work_dir:
        settings = settings.model_copy(update={"work_dir": args.work_dir.resolve()})

    if args.start < 0 or args.end < 0:
        print("Error: --start and --end must be non-negative.", file=sys.stderr)
        sys.exit(2)

    request = MergeRequest(
        source_video_path=args.video,
        audio_source_url=args.audio_url,
        output_base_name=args.name or args.video.stem,
        audio_start=args.start,
        audio_end=args.end,
    )

    try:
        result = merge(request, settings)
    except ClientInputError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)
    except AudioSwapError as e:
        print(f"Error: {e.__class__.__name__}: {e}", file=sys.stderr)
        sys.exit(1)

    print()
    print(f"Done! Output: {result.output_path}")
    print(f"  Video duration: {result.video_duration:.2f}s")
    print(f"  Audio window: {result.window.start:.2f}s -> {result.window.end:.2f}s")
