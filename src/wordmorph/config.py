"""Word Morph configuration."""

from dotenv import find_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine the environment file path, or None if not found
ENV_FILE = find_dotenv() or None


class WordMorphConfig(BaseSettings):
    """Configuration settings for the Word Morph search engine and game session."""

    word_list_path: str = "wordlist.txt"
    """Path to the plain-text word list (whitespace separated). Default: wordlist.txt."""

    expansion_ceiling: int = 200_000
    """Maximum number of newly discovered states before a search gives up. Default: 200,000."""

    cap_multiplier: int = 3
    """Move cap is this multiple of the longer of the start/target words. Default: 3."""

    default_allowed_lengths: list[int] = [3, 4, 5]
    """Word lengths allowed in a new session. Default: [3, 4, 5]."""

    deterministic: bool = True
    """Whether neighbor sets are sorted, so that searches are reproducible (a bit slower).

    Default: True.
    """

    random_pair_attempts: int = 50
    """How many times to redraw the target when picking a distinct random pair. Default: 50."""

    model_config = SettingsConfigDict(
        env_prefix="WORDMORPH_",
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="forbid",
    )


config = WordMorphConfig()
