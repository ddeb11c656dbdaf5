"""Unit conversion tools for the xcvt MCP server.

Exposes the conversion engine as MCP tools.
"""

import json
import logging
from typing import Any

from mcp.types import Tool, TextContent

from xcvt.services.aliases import normalize
from xcvt.services.catalog import get_supported_units
from xcvt.services.conversion_service import convert

logger = logging.getLogger(__name__)


CONVERSION_TOOLS: list[Tool] = [
    Tool(
        name="unit_convert",
        description=(
            "Convert a value between units of the same quantity. "
            "Supports length (m, cm, mm, km, ft, yd, mi), "
            "mass (kg, g, lb, oz), "
            "volume (L, mL, uL, gal, qt, pt, cup, floz, tbsp, tsp, m3, cm3, cc, in3, ft3), "
            "and temperature (C, F, K). "
            "Accepts common aliases (e.g., 'feet', 'pounds', 'celsius')."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "value": {
                    "type": "number",
                    "description": "Numeric value to convert.",
                },
                "from_unit": {
                    "type": "string",
                    "description": "Source unit (e.g., 'km', 'lb', 'F', 'cups').",
                },
                "to_unit": {
                    "type": "string",
                    "description": "Target unit (e.g., 'mi', 'kg', 'C', 'tbsp').",
                },
            },
            "required": ["value", "from_unit", "to_unit"],
        },
    ),
    Tool(
        name="unit_list",
        description=(
            "List all supported unit categories and their canonical unit keys."
        ),
        inputSchema={
            "type": "object",
            "properties": {},
        },
    ),
]


async def handle_conversion_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Handle execution of conversion tools."""
    if name == "unit_convert":
        return await _unit_convert(arguments)
    elif name == "unit_list":
        return await _unit_list(arguments)
    else:
        return [TextContent(type="text", text=f"Unknown conversion tool: {name}")]


async def _unit_convert(args: dict[str, Any]) -> list[TextContent]:
    """Convert a value between units."""
    value = args.get("value")
    from_unit = args.get("from_unit")
    to_unit = args.get("to_unit")

    if value is None or from_unit is None or to_unit is None:
        return [TextContent(type="text", text='{"error": "value, from_unit, and to_unit are required"}')]

    if not isinstance(from_unit, str) or not isinstance(to_unit, str):
        return [TextContent(type="text", text='{"error": "from_unit and to_unit must be strings"}')]

    # bool is an int subclass, but True is not a measurement
    if isinstance(value, bool):
        return [TextContent(type="text", text='{"error": "value must be a number"}')]

    try:
        value = float(value)
    except (TypeError, ValueError):
        return [TextContent(type="text", text='{"error": "value must be a number"}')]

    from_key = normalize(from_unit)
    to_key = normalize(to_unit)
    try:
        result = convert(from_key, to_key, value)
    except ValueError as e:
        logger.debug("unit_convert rejected %s -> %s: %s", from_key, to_key, e)
        return [TextContent(type="text", text=json.dumps({"error": str(e)}))]

    payload = {"result": result, "value": value, "from_unit": from_key, "to_unit": to_key}
    return [TextContent(type="text", text=json.dumps(payload))]


async def _unit_list(args: dict[str, Any]) -> list[TextContent]:
    """List canonical unit keys grouped by category."""
    return [TextContent(type="text", text=json.dumps(get_supported_units(), indent=2))]
