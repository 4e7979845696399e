"""
Platform-specific analyzers for Raspberry Pi, KiCad and FPGA sources
"""

import logging
import re
from typing import Dict, List

from typing_extensions import TypedDict

from .detector import PlatformDetection, detect_platform_type, file_names
from .signatures import DOC_TEMPLATES, PLATFORM_SUPPORT, SUPPORTED_PLATFORMS

logger = logging.getLogger(__name__)

GPIO_PATTERNS = (
    (re.compile(r'GPIO\.setup\((\d+),', re.IGNORECASE), "BOARD"),
    (re.compile(r'BCM(\d+)', re.IGNORECASE), "BCM"),
    (re.compile(r'BOARD(\d+)', re.IGNORECASE), "BOARD"),
    (re.compile(r'Pin\((\d+)\)', re.IGNORECASE), "BOARD"),
)

PYTHON_LIBRARIES = (
    (re.compile(r'import\s+RPi\.GPIO', re.IGNORECASE), "RPi.GPIO"),
    (re.compile(r'import\s+gpiozero', re.IGNORECASE), "gpiozero"),
    (re.compile(r'import\s+smbus', re.IGNORECASE), "smbus (I2C)"),
    (re.compile(r'import\s+spidev', re.IGNORECASE), "spidev (SPI)"),
    (re.compile(r'import\s+Adafruit_DHT', re.IGNORECASE), "Adafruit_DHT"),
)

MAX_PORTS_BEFORE_BUS = 50


class GpioPin(TypedDict):
    number: str
    type: str


class RaspberryPiAnalysis(TypedDict):
    platform: str
    pins: List[GpioPin]
    libraries: List[str]
    recommendations: List[str]


class KiCadAnalysis(TypedDict):
    platform: str
    components: List[str]
    nets: List[Dict[str, str]]
    layers: List[str]
    board_info: Dict[str, float]


class FpgaAnalysis(TypedDict):
    platform: str
    language: str
    entities: List[str]
    signals: List[Dict[str, str]]
    ports: List[Dict[str, str]]
    recommendations: List[str]


def analyze_raspberry_pi(code: str) -> RaspberryPiAnalysis:
    analysis = RaspberryPiAnalysis(platform="Raspberry Pi", pins=[], libraries=[], recommendations=[])

    for pattern, numbering in GPIO_PATTERNS:
        for number in pattern.findall(code):
            analysis["pins"].append(GpioPin(number=number, type=numbering))

    analysis["libraries"] = [lib for regex, lib in PYTHON_LIBRARIES if regex.search(code)]

    if analysis["pins"]:
        analysis["recommendations"].append("Check that BCM/BOARD numbering mode is consistent")
    if "GPIO.cleanup" in code:
        analysis["recommendations"].append("✓ GPIO cleanup present (good practice)")
    else:
        analysis["recommendations"].append("⚠️ Add GPIO.cleanup() on exit")

    return analysis


def analyze_kicad_pcb(content: str) -> KiCadAnalysis:
    """Basic S-expression scan of a .kicad_pcb file."""
    analysis = KiCadAnalysis(platform="KiCad PCB", components=[], nets=[], layers=[], board_info={})

    analysis["components"] = re.findall(r'\(footprint\s+"([^"]+)"', content)
    analysis["nets"] = [
        {"id": net_id, "name": name}
        for net_id, name in re.findall(r'\(net\s+(\d+)\s+"([^"]+)"', content)
    ]

    layers = []
    for layer in re.findall(r'\(layer\s+"([^"]+)"', content):
        if layer not in layers:
            layers.append(layer)
    analysis["layers"] = layers

    general = re.search(r'\(general\s+([^()]*(?:\([^()]*\)[^()]*)*)\)', content)
    if general:
        thickness = re.search(r'thickness\s+([\d.]+)', general.group(1))
        if thickness:
            try:
                analysis["board_info"]["thickness"] = float(thickness.group(1))
            except ValueError:
                logger.debug("Unreadable board thickness: %s", thickness.group(1))

    return analysis


def analyze_fpga(code: str, language: str = "vhdl") -> FpgaAnalysis:
    language = language.lower()
    analysis = FpgaAnalysis(
        platform="FPGA", language=language.upper(), entities=[], signals=[], ports=[], recommendations=[]
    )

    if language == "vhdl":
        analysis["entities"] = re.findall(r'entity\s+(\w+)\s+is', code, re.IGNORECASE)
        analysis["ports"] = [
            {"name": name, "direction": direction, "type": kind}
            for name, direction, kind in re.findall(r'(\w+)\s*:\s*(in|out|inout)\s+(\w+)', code, re.IGNORECASE)
        ]
        analysis["signals"] = [
            {"name": name, "type": kind}
            for name, kind in re.findall(r'signal\s+(\w+)\s*:\s*(\w+)', code, re.IGNORECASE)
        ]
    elif language == "verilog":
        analysis["entities"] = re.findall(r'module\s+(\w+)', code, re.IGNORECASE)
        analysis["ports"] = [
            {"name": name, "direction": direction, "width": width or "1 bit"}
            for direction, width, name in re.findall(
                r'(input|output|inout)\s+(\[\d+:\d+\])?\s*(\w+)', code, re.IGNORECASE
            )
        ]

    if not analysis["entities"]:
        analysis["recommendations"].append("⚠️ No entity/module detected")
    if len(analysis["ports"]) > MAX_PORTS_BEFORE_BUS:
        analysis["recommendations"].append("ℹ️ Many ports - consider grouping them into a bus")

    return analysis


def generate_platform_doc_template(platform_type: str) -> Dict:
    """Documentation outline for a platform display label, Arduino/ESP32 by default."""
    template = DOC_TEMPLATES.get(platform_type, DOC_TEMPLATES["Arduino/ESP32"])
    return {"sections": list(template["sections"]), "install_cmd": template["install_cmd"], "run_cmd": template["run_cmd"]}


def analyze_multi_platform(code: str, files=None) -> Dict:
    """Detect the platform, run its analyzer and attach a documentation outline."""
    detection: PlatformDetection = detect_platform_type(code, files)

    if detection.platform == "raspberrypi":
        platform_analysis = analyze_raspberry_pi(code)
    elif detection.platform == "kicad":
        platform_analysis = analyze_kicad_pcb(code)
    elif detection.platform == "fpga":
        is_vhdl = re.search(r'\.vhd', code, re.IGNORECASE) or any(
            name.lower().endswith((".vhd", ".vhdl")) for name in file_names(files)
        )
        language = "vhdl" if is_vhdl else "verilog"
        platform_analysis = analyze_fpga(code, language)
    else:
        platform_analysis = {"platform": detection.type}

    return {
        "detected": detection.to_dict(),
        "analysis": platform_analysis,
        "doc_template": generate_platform_doc_template(detection.type),
        "supported_platforms": list(SUPPORTED_PLATFORMS),
    }


def get_platform_support() -> Dict:
    return {key: dict(value) for key, value in PLATFORM_SUPPORT.items()}
