"""CLI for encoding-client."""

import argparse
import logging
import sys

from encoding_client.config import QueueSettings, build_queue
from encoding_client.domain.errors import EncodingError
from encoding_client.domain.models import MediaInfo, MediaStatusReport
from encoding_client.formats import Format
from encoding_client.queue import Queue


def _parse_pairs(values: list[str] | None, flag: str) -> list[tuple[str, str]]:
    """Split repeated KEY=VALUE arguments."""
    pairs = []
    for value in values or []:
        key, sep, rest = value.partition('=')
        if not sep or not key:
            raise ValueError(f"{flag} expects KEY=VALUE, got {value!r}")
        pairs.append((key, rest))
    return pairs


def _format_time(value) -> str:
    return value.isoformat(sep=' ') if value else '-'


def _print_report(report: MediaStatusReport) -> None:
    print(f"Media ID:    {report.media_id}")
    print(f"Source:      {report.source_file}")
    print(f"Status:      {report.status}")
    print(f"Progress:    {report.progress}%")
    print(f"Time left:   {report.time_left}s")
    print(f"Processor:   {report.processor}")
    print(f"File size:   {report.file_size}")
    print(f"Notify URL:  {report.notify_url}")
    print(f"Created:     {_format_time(report.created)}")
    print(f"Started:     {_format_time(report.started)}")
    print(f"Finished:    {_format_time(report.finished)}")
    print(f"Downloaded:  {_format_time(report.downloaded)}")


def _print_info(info: MediaInfo) -> None:
    for name in ('bitrate', 'duration', 'video_codec', 'video_bitrate', 'frame_rate', 'size',
                 'pixel_aspect_ratio', 'display_aspect_ratio', 'audio_codec',
                 'audio_sample_rate', 'audio_channels'):
        print(f"  {name}: {getattr(info, name)}")


def run_command(args: argparse.Namespace, queue: Queue) -> None:
    """Execute one parsed command against the queue."""
    if args.command == 'add':
        formats = {dest: Format(output) for output, dest in _parse_pairs(args.format, '--format')}
        options = dict(_parse_pairs(args.option, '--option'))
        add = queue.add if args.benchmark else queue.add_and_process
        media_id = add(args.source, formats, options)
        print(f"Queued as media {media_id}" if media_id is not None else "Queued (no media id returned)")

    elif args.command == 'status':
        print(queue.status(args.media_id))

    elif args.command == 'progress':
        print(queue.progress(args.media_id))

    elif args.command == 'report':
        _print_report(queue.status_report(args.media_id))

    elif args.command == 'descriptions':
        for description in queue.format_descriptions(args.media_id):
            print(f"  {description}")

    elif args.command == 'list':
        items = queue.list_media()
        for item in items:
            print(f"  {item.media_id}  {item.media_status:<12} {item.media_file}")
        print(f"{len(items)} item(s)")

    elif args.command == 'cancel':
        queue.cancel(args.media_id)
        print(f"Cancelled media {args.media_id}")

    elif args.command == 'process':
        queue.process(args.media_id)
        print(f"Processing media {args.media_id}")

    elif args.command == 'info':
        _print_info(queue.info(args.media_id))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='encoding-client', description='encoding.com queue client')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command')

    # add command
    add_parser = subparsers.add_parser('add', help='Add media to the queue')
    add_parser.add_argument('source', help='Source media URL')
    add_parser.add_argument('--format', action='append', metavar='OUTPUT=DEST',
                            help='Output format and destination URL (repeatable)')
    add_parser.add_argument('--option', action='append', metavar='KEY=VALUE',
                            help='Extra query element (repeatable)')
    add_parser.add_argument('--benchmark', action='store_true', help='Add without processing')

    for name, help_text in (
        ('status', 'Show job status'),
        ('progress', 'Show job progress'),
        ('report', 'Show full status report'),
        ('descriptions', 'Show per-format descriptions'),
        ('cancel', 'Cancel a queued item'),
        ('process', 'Start processing a queued item'),
        ('info', 'Show source media info'),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument('media_id', type=int, help='encoding.com media id')

    subparsers.add_parser('list', help='List media in the queue')
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    if not args.command:
        parser.print_help()
        return 0

    try:
        queue = build_queue(QueueSettings.from_env())
        run_command(args, queue)
    except (EncodingError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
