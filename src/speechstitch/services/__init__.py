"""Pipeline orchestration for stitched narration."""

from .stitcher import SpeechStitcher, get_stitcher, interleave
