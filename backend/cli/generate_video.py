#!/usr/bin/env python3
"""
CLI tool to generate videos from snake game replays

Usage:
    python generate_video.py <path_to_replay.json>

Examples:
    # Render next to the replay file
    python generate_video.py ../completed_games/snake_game_xyz.json

    # Custom output path
    python generate_video.py replay.json --output ./my_video.mp4

    # Custom video settings
    python generate_video.py replay.json --fps 8 --cell-size 24
"""

import os
import sys
import argparse
import logging
from pathlib import Path

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from services.video_generator import SnakeVideoGenerator  # noqa: E402
from dotenv import load_dotenv  # noqa: E402

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


def default_output_path(replay_path: str) -> str:
    """Place the video next to the replay: snake_game_<id>.json -> snake_game_<id>.mp4"""
    return str(Path(replay_path).with_suffix('.mp4'))


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Generate MP4 videos from snake game replays',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument(
        'replay',
        help='Path to a replay JSON file written by main.py --save-replay'
    )
    parser.add_argument(
        '--output', '-o',
        type=str,
        help='Output video file path (default: next to the replay)'
    )
    parser.add_argument(
        '--fps',
        type=int,
        default=4,
        help='Frames per second (default: 4)'
    )
    parser.add_argument(
        '--cell-size',
        type=int,
        default=32,
        help='Pixels per grid cell (default: 32)'
    )

    args = parser.parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    output_path = args.output or default_output_path(args.replay)
    generator = SnakeVideoGenerator(fps=args.fps, cell_size=args.cell_size)

    try:
        video_path = generator.generate_video(replay_path=args.replay, output_path=output_path)
    except ValueError as e:
        logger.error(f"Video generation failed: {e}")
        return 1

    print(f"\n✓ Video generated successfully: {video_path}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
