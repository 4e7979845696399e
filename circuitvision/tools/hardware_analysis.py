"""
Hardware analysis tool for embedded source code
"""

from typing import Dict, Optional

from langchain_core.tools import tool

from ..components import extract_components
from ..config import get_settings
from ..hardware import HardwareRuleEngine, analyze_hardware_code, generate_bug_report
from .limits import source_size_error


def hardware_analysis(code: str, platform: Optional[str] = None) -> Dict:
    """Detect pin conflicts, restricted pins, voltage, I2C, timing and credential issues in embedded code."""
    try:
        error = source_size_error(code)
        if error:
            return {"success": False, "error": error}

        engine = HardwareRuleEngine(platform=platform or get_settings().target_platform)
        components = extract_components(code)
        report = analyze_hardware_code(code, components, engine)

        result = report.to_dict()
        result.update({
            "success": True,
            "platform": engine.platform,
            "components": components,
            "markdown": generate_bug_report(report),
        })
        return result
    except Exception as e:
        return {"success": False, "error": str(e)}


hardware_analysis_fn = hardware_analysis
hardware_analysis_tool = tool(hardware_analysis)
