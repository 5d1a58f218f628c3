"""
Configuration Management

This module provides configuration management for the graph assembly layer,
following the Single Responsibility Principle and providing validation and
type safety.

Author: Theodore Mui
Date: 2025-09-02
"""

import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

from dotenv import find_dotenv, load_dotenv

from .constants import DEFAULTS, ERROR_MESSAGES, MODE_ALIASES
from .exceptions import GraphConfigurationError
from .interfaces import IConfiguration


def _env_flag(name: str, default: bool) -> bool:
    return os.getenv(name, "true" if default else "false").lower() == "true"


@dataclass
class ExtractionConfig:
    """Defaults for dependency extraction."""

    mode: str = DEFAULTS["extraction_mode"]
    include_extras: bool = DEFAULTS["include_extras"]
    include_punctuation: bool = DEFAULTS["include_punctuation"]
    thread_safe: bool = DEFAULTS["thread_safe"]

    def __post_init__(self):
        """Validate extraction configuration."""
        normalized = str(self.mode).strip().lower().replace("_", "-")
        if normalized not in MODE_ALIASES:
            raise GraphConfigurationError(
                ERROR_MESSAGES["unknown_mode"].format(mode=self.mode), setting="mode"
            )
        self.mode = MODE_ALIASES[normalized]


@dataclass
class MergeConfig:
    """Defaults for deep merging of per-sentence graphs."""

    normalize_sentence_index: bool = DEFAULTS["normalize_sentence_index"]
    merged_sentence_index: int = DEFAULTS["merged_sentence_index"]

    def __post_init__(self):
        """Validate merge configuration."""
        if self.merged_sentence_index < 0:
            raise GraphConfigurationError(
                "merged_sentence_index must be >= 0", setting="merged_sentence_index"
            )

    def target_sentence_index(self) -> Optional[int]:
        """Sentence index to stamp on merged tokens, or None to keep originals."""
        return self.merged_sentence_index if self.normalize_sentence_index else None


class GraphConfig(IConfiguration):
    """Main configuration class for the graph assembly layer.

    Example:
        config = GraphConfig.from_environment()
        mode = config.extraction.mode
        sentence_index = config.merge.target_sentence_index()
    """

    def __init__(
        self,
        extraction: Optional[ExtractionConfig] = None,
        merge: Optional[MergeConfig] = None,
    ):
        """Initialize configuration with optional overrides.

        Args:
            extraction: Extraction configuration
            merge: Merge configuration
        """
        self.extraction = extraction or ExtractionConfig()
        self.merge = merge or MergeConfig()

    @classmethod
    def from_environment(cls) -> "GraphConfig":
        """Create configuration from environment variables.

        A ``.env`` file, when one can be found, is loaded first; variables
        already present in the environment win.

        Returns:
            GraphConfig instance populated from environment
        """
        load_dotenv(find_dotenv())

        extraction = ExtractionConfig(
            mode=os.getenv("SEMGRAPH_EXTRACTION_MODE", DEFAULTS["extraction_mode"]),
            include_extras=_env_flag("SEMGRAPH_INCLUDE_EXTRAS", DEFAULTS["include_extras"]),
            include_punctuation=_env_flag(
                "SEMGRAPH_INCLUDE_PUNCTUATION", DEFAULTS["include_punctuation"]
            ),
            thread_safe=_env_flag("SEMGRAPH_THREAD_SAFE", DEFAULTS["thread_safe"]),
        )

        merge = MergeConfig(
            normalize_sentence_index=_env_flag(
                "SEMGRAPH_NORMALIZE_SENTENCE_INDEX", DEFAULTS["normalize_sentence_index"]
            ),
            merged_sentence_index=int(
                os.getenv(
                    "SEMGRAPH_MERGED_SENTENCE_INDEX", str(DEFAULTS["merged_sentence_index"])
                )
            ),
        )

        return cls(extraction, merge)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value using dot notation.

        Example:
            mode = config.get('extraction.mode', 'basic')
        """
        parts = key.split(".")
        obj = self

        try:
            for part in parts:
                obj = getattr(obj, part)
            return obj
        except AttributeError:
            return default

    def validate(self) -> bool:
        """Validate all configuration sections.

        Returns:
            True if all configuration is valid

        Raises:
            GraphConfigurationError: If any configuration is invalid
        """
        # Re-create to trigger __post_init__ validation
        ExtractionConfig(**self.extraction.__dict__)
        MergeConfig(**self.merge.__dict__)
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "extraction": dict(self.extraction.__dict__),
            "merge": dict(self.merge.__dict__),
        }

    def display_summary(self) -> str:
        """Generate a human-readable configuration summary."""
        lines = [
            "Graph Assembly Configuration:",
            f"   - Extraction Mode: {self.extraction.mode}",
            f"   - Include Extras: {self.extraction.include_extras}",
            f"   - Include Punctuation: {self.extraction.include_punctuation}",
            f"   - Thread Safe: {self.extraction.thread_safe}",
            f"   - Normalize Sentence Index: {self.merge.normalize_sentence_index}",
            f"   - Merged Sentence Index: {self.merge.merged_sentence_index}",
        ]
        return "\n".join(lines)
