"""
Tests for cli/generate_video.py.
"""

import os
import sys
from unittest.mock import patch

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cli import generate_video  # noqa: E402


def test_default_output_path_sits_next_to_replay():
    assert generate_video.default_output_path("games/snake_game_abc.json") == "games/snake_game_abc.mp4"


def test_main_passes_arguments_to_generator():
    with patch.object(generate_video, "SnakeVideoGenerator") as generator_cls:
        generator_cls.return_value.generate_video.return_value = "out.mp4"
        code = generate_video.main(["replay.json", "--fps", "8", "-o", "out.mp4"])

    assert code == 0
    generator_cls.assert_called_once_with(fps=8, cell_size=32)
    generator_cls.return_value.generate_video.assert_called_once_with(
        replay_path="replay.json", output_path="out.mp4"
    )


def test_main_reports_failure():
    with patch.object(generate_video, "SnakeVideoGenerator") as generator_cls:
        generator_cls.return_value.generate_video.side_effect = ValueError("missing")
        code = generate_video.main(["missing.json"])

    assert code == 1
