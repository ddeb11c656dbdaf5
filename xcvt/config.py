import logging
import os
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

_FALSE_VALUES = {"0", "false", "no", "off"}

_DEFAULT_PRECISION = 6


@dataclass
class XcvtConfig:
    """Configuration for the xcvt CLI and MCP server."""

    # Logging level name for entry points
    log_level: str = "WARNING"

    # ANSI colors in CLI output
    color: bool = True

    # Significant digits when printing a result
    precision: int = _DEFAULT_PRECISION

    # MCP tool groups to expose (comma-separated in env, or set)
    enabled_tools: set[str] = field(default_factory=lambda: {"conversion"})

    @classmethod
    def from_env(cls) -> "XcvtConfig":
        """Load configuration from environment variables."""
        tools_str = os.getenv("XCVT_MCP_TOOLS", "conversion")
        enabled_tools = {t.strip() for t in tools_str.split(",") if t.strip()}

        color = os.getenv("XCVT_COLOR", "1").strip().lower() not in _FALSE_VALUES
        if os.getenv("NO_COLOR"):
            color = False

        return cls(
            log_level=os.getenv("XCVT_LOG_LEVEL", "WARNING").strip().upper(),
            color=color,
            precision=_parse_precision(os.getenv("XCVT_PRECISION")),
            enabled_tools=enabled_tools,
        )

    def is_enabled(self, tool_group: str) -> bool:
        """Check if an MCP tool group is enabled."""
        return tool_group in self.enabled_tools


def _parse_precision(raw: str | None) -> int:
    if raw is None or not raw.strip():
        return _DEFAULT_PRECISION
    try:
        precision = int(raw)
    except ValueError:
        logger.warning("Invalid XCVT_PRECISION %r - using %d", raw, _DEFAULT_PRECISION)
        return _DEFAULT_PRECISION
    if precision < 1:
        logger.warning("XCVT_PRECISION must be positive, got %d - using %d", precision, _DEFAULT_PRECISION)
        return _DEFAULT_PRECISION
    return precision


# Global config instance
config = XcvtConfig.from_env()
