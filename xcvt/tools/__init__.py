from xcvt.tools.conversion import CONVERSION_TOOLS, handle_conversion_tool

__all__ = [
    "CONVERSION_TOOLS",
    "handle_conversion_tool",
]
