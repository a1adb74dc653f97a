"""Runtime configuration."""

from dataclasses import dataclass
import logging
import os


@dataclass
class FamGraphConfig:
    # Logging
    log_level: str = "WARNING"

    # Prefix of synthesized union (family) node ids
    union_prefix: str = "FAM"

    # Spell cousin degrees as words ("second cousins") up to this degree, then "11th cousins"
    cousin_ordinal_words: int = 10

    @classmethod
    def from_env(cls) -> "FamGraphConfig":
        """Read overrides from FAMGRAPH_* environment variables."""
        config = cls()
        config.log_level = os.environ.get("FAMGRAPH_LOG_LEVEL", config.log_level).upper()
        config.union_prefix = os.environ.get("FAMGRAPH_UNION_PREFIX", config.union_prefix)
        return config

    def configure_logging(self):
        logging.basicConfig(
            level=getattr(logging, self.log_level, logging.WARNING),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
