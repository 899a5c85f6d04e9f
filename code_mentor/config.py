"""Configuration for Code Mentor."""

from dataclasses import dataclass
import os


@dataclass
class MentorConfig:
    """Configuration for analysis sessions and the CLI."""

    # Defaults for analyze
    language: str = "python"
    skill_level: str = "beginner"

    # Simulated analysis latency in seconds
    analysis_delay: float = 1.5

    # Progress tracking
    track_progress: bool = True
    progress_file: str = "~/.code-mentor/progress.json"

    @classmethod
    def from_env(cls) -> "MentorConfig":
        """Create config from environment variables."""
        return cls(
            language=os.environ.get("CODE_MENTOR_LANGUAGE", "python"),
            skill_level=os.environ.get("CODE_MENTOR_SKILL_LEVEL", "beginner"),
            analysis_delay=float(os.environ.get("CODE_MENTOR_ANALYSIS_DELAY", "1.5")),
            track_progress=os.environ.get("CODE_MENTOR_TRACK_PROGRESS", "true").lower() == "true",
            progress_file=os.environ.get("CODE_MENTOR_PROGRESS_FILE", "~/.code-mentor/progress.json"),
        )


# Default configuration
DEFAULT_CONFIG = MentorConfig()
