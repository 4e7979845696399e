"""
Component lookup tool - lists hardware parts found in source code
"""

from langchain_core.tools import tool

from ..components import estimate_quantity, extract_components
from ..components.catalog import DEFAULT_ALTERNATIVES
from ..hardware.registry import VOLTAGE_REQUIREMENTS
from .limits import source_size_error


@tool
def component_lookup_tool(code: str) -> str:
    """List the electronic components, modules and sensors used by a piece of embedded code"""
    try:
        error = source_size_error(code)
        if error:
            return f"❌ {error}"

        components = extract_components(code)
        if not components:
            return "❌ No known components found. Recognized parts include: DHT22, BMP280, MPU6050, OLED, Servo, ESP32"

        result = f"🔌 **Detected components ({len(components)})**\n\n"
        for component in components:
            result += f"- **{component}** x{estimate_quantity(code, component)}"
            if component in VOLTAGE_REQUIREMENTS:
                result += f" ({VOLTAGE_REQUIREMENTS[component]['voltage']})"
            if component in DEFAULT_ALTERNATIVES:
                result += f" - alternatives: {', '.join(DEFAULT_ALTERNATIVES[component])}"
            result += "\n"

        return result
    except Exception as e:
        return f"❌ Error: {e}"
