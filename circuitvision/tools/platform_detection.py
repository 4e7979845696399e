"""
Platform detection tool
"""

from typing import Dict, List, Optional

from langchain_core.tools import tool

from ..platforms import analyze_multi_platform
from .limits import source_size_error


@tool
def platform_detection_tool(code: str, files: Optional[List[str]] = None) -> Dict:
    """Detect the hardware platform (Arduino, PlatformIO, Raspberry Pi, KiCad, FPGA, STM32) of a project"""
    try:
        error = source_size_error(code)
        if error:
            return {"success": False, "error": error}

        result = analyze_multi_platform(code, files or [])
        result["success"] = True
        return result
    except Exception as e:
        return {"success": False, "error": str(e)}
