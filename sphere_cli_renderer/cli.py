#
# PROJECT: sphere-cli-renderer
# MODULE: sphere_cli_renderer/cli.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import argparse
import logging
import math
import sys

from .animation import AnimationLoop
from .config import DEFAULT_TEXTURE_PATH, GlyphMode, RenderConfig
from .errors import TextureFormatError, TextureLoadError
from .logging_config import setup_logging
from .renderer import Renderer
from .texture import TextureMap

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NO_TEXTURE = 1
EXIT_BAD_TEXTURE = 2


def build_parser() -> argparse.ArgumentParser:
    """CLI argument parser. Every flag is optional; the defaults are the demo."""
    epilog = """\
examples:
  %(prog)s                              Spin the map in ./data/s
  %(prog)s maps/moon.txt                Spin another texture
  %(prog)s --step-degrees 6             Faster spin
  %(prog)s --glyphs braille             Fill blank cells with Braille dots
  %(prog)s --glyphs meridians           Procedural stripes, no texture glyphs
  %(prog)s --frames 120 > spin.txt      Render 120 frames and stop
"""
    parser = argparse.ArgumentParser(
        description="Rotating texture-mapped sphere in the terminal",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("texture", nargs='?', default=DEFAULT_TEXTURE_PATH,
                        help=f"Path to the texture map (default: {DEFAULT_TEXTURE_PATH})")
    parser.add_argument("--step-degrees", type=float, default=2.0,
                        help="Rotation per frame in degrees (default: 2.0)")
    parser.add_argument("--fps", type=float, default=60.0,
                        help="Frames per second (default: 60)")
    parser.add_argument("--glyphs", choices=[m.value for m in GlyphMode],
                        default=GlyphMode.TEXTURE.value,
                        help="Glyph source (default: texture)")
    parser.add_argument("--frames", type=int, default=None,
                        help="Stop after this many frames (default: run until killed)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log diagnostics to stderr")
    return parser


def config_from_args(args) -> RenderConfig:
    if args.fps <= 0:
        raise ValueError(f"--fps must be positive, got {args.fps}")
    return RenderConfig.detect_terminal(
        texture_path=args.texture,
        rotation_step=math.radians(args.step_degrees),
        frame_interval=1.0 / args.fps,
        glyph_mode=GlyphMode(args.glyphs),
    )


def main(argv=None, stream=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        config = config_from_args(args)
    except ValueError as e:
        parser.error(str(e))

    try:
        texture = TextureMap.from_file(config.texture_path)
    except TextureLoadError as e:
        logger.debug("%s", e)
        return EXIT_NO_TEXTURE
    except TextureFormatError as e:
        logger.error("Malformed texture '%s': %s", config.texture_path, e)
        return EXIT_BAD_TEXTURE

    loop = AnimationLoop(Renderer(texture, config), config, stream=stream)
    try:
        loop.run(max_frames=args.frames)
    except KeyboardInterrupt:
        logger.debug("Interrupted after %d frames", loop.frame_count)
    return EXIT_OK


def run():
    """Console-script entry point."""
    sys.exit(main())
