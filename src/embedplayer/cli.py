#!/usr/bin/env python3
"""
embedplayer CLI - Inspect how links turn into embedded players.

Usage:
    embedplayer match "https://youtu.be/dQw4w9WgXcQ"
    embedplayer height spotify_song 300
    embedplayer gif-dims 1000 500 300
    embedplayer sources
"""

import argparse
import json
import logging
import sys

from embedplayer.config.loader import get_config
from embedplayer.config.providers import EXTERNAL_EMBED_LABELS, EmbedPlayerType
from embedplayer.exceptions import InvalidDimensionsError
from embedplayer.layout import get_gif_dims, get_player_height
from embedplayer.matcher import parse_embed_player_from_url
from embedplayer.providers.base import MatchContext


def _cmd_match(args):
    """Handle the match subcommand."""
    context = MatchContext.from_config(get_config())
    if args.parent_host:
        context = MatchContext(
            parent_host=args.parent_host,
            youtube_iframe_url=context.youtube_iframe_url,
        )

    params = parse_embed_player_from_url(args.url, context)
    if params is None:
        print(f"no embed: {args.url}")
        sys.exit(1)

    result = params.to_dict()
    result["label"] = params.label
    print(json.dumps(result, indent=2))


def _cmd_height(args):
    """Handle the height subcommand."""
    height = get_player_height(
        args.type,
        args.width,
        has_thumb=not args.no_thumb,
        screen_height=args.screen_height,
    )
    print(f"{height:g}")


def _cmd_gif_dims(args):
    """Handle the gif-dims subcommand."""
    try:
        dims = get_gif_dims(args.height, args.width, args.view_width)
    except InvalidDimensionsError as e:
        print(json.dumps(e.to_dict(), indent=2))
        sys.exit(1)

    print(json.dumps(dims.model_dump(), indent=2))


def _cmd_sources(args):
    """Handle the sources subcommand."""
    for source, label in EXTERNAL_EMBED_LABELS.items():
        print(f"  {source.value}: {label}")


def main():
    parser = argparse.ArgumentParser(
        description="Turn links into embeddable media players",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    %(prog)s match "https://www.youtube.com/shorts/abc123"
    %(prog)s match "https://www.twitch.tv/videos/123" --parent-host example.com
    %(prog)s height youtube_short 320 --screen-height 550
    %(prog)s height spotify_song 300 --no-thumb
    %(prog)s gif-dims 1000 500 300
    %(prog)s sources
        """,
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command")

    # match subcommand
    m_parser = subparsers.add_parser("match", help="Print the embed descriptor for a URL")
    m_parser.add_argument("url", help="Link to inspect")
    m_parser.add_argument(
        "--parent-host", default=None,
        help="Hostname of the embedding page (Twitch parent parameter)",
    )

    # height subcommand
    h_parser = subparsers.add_parser("height", help="Compute a player height")
    h_parser.add_argument(
        "type", help=f"Media type ({', '.join(t.value for t in EmbedPlayerType)})"
    )
    h_parser.add_argument("width", type=float, help="Available width")
    h_parser.add_argument(
        "--no-thumb", action="store_true",
        help="No preview thumbnail is available (16:9 placeholder)",
    )
    h_parser.add_argument(
        "--screen-height", type=int, default=None,
        help="Screen height (default: configured value)",
    )

    # gif-dims subcommand
    g_parser = subparsers.add_parser("gif-dims", help="Fit a GIF to a view width")
    g_parser.add_argument("height", type=float, help="Intrinsic GIF height")
    g_parser.add_argument("width", type=float, help="Intrinsic GIF width")
    g_parser.add_argument("view_width", type=float, help="Available width")

    # sources subcommand
    subparsers.add_parser("sources", help="List supported sources")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
        stream=sys.stderr,
    )

    if args.command == "match":
        _cmd_match(args)
    elif args.command == "height":
        _cmd_height(args)
    elif args.command == "gif-dims":
        _cmd_gif_dims(args)
    elif args.command == "sources":
        _cmd_sources(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
