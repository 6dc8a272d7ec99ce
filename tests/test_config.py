"""
Tests for command line settings.
"""
import pytest

from pixelstrike.config import FPS, SCALE, Settings, parse_args


class TestSettings:
    """Tests for parse_args()."""

    def test_defaults(self):
        settings = parse_args([])
        assert settings == Settings()
        assert settings.scale == SCALE
        assert settings.fps == FPS
        assert settings.seed is None
        assert settings.log_level == "INFO"

    def test_options(self):
        settings = parse_args(["--scale", "4", "--fps", "30", "--seed", "7", "--log-level", "DEBUG"])
        assert settings == Settings(scale=4, fps=30, seed=7, log_level="DEBUG")

    def test_window_size(self):
        """The window is the logical playfield times the scale."""
        assert Settings(scale=2).window_size == (320, 480)

    @pytest.mark.parametrize("argv", [["--scale", "0"], ["--fps", "-1"], ["--scale", "big"]])
    def test_rejects_bad_numbers(self, argv):
        with pytest.raises(SystemExit):
            parse_args(argv)

    def test_rejects_unknown_log_level(self):
        with pytest.raises(SystemExit):
            parse_args(["--log-level", "LOUD"])
