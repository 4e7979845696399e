"""
Platform signatures and documentation templates
"""

import re
from types import MappingProxyType


def _patterns(*sources):
    return tuple(re.compile(source, re.IGNORECASE) for source in sources)


# (platform, display label, signatures) in tie-break order
PLATFORM_SIGNATURES = (
    ("arduino", "Arduino/ESP32", _patterns(
        r'\.ino$',
        r'arduino',
        r'#include\s+<Arduino\.h>',
        r'void\s+setup\(\)',
        r'void\s+loop\(\)',
    )),
    ("platformio", "PlatformIO", _patterns(
        r'platformio\.ini$',
        r'\.pio/',
        r'platform\s*=\s*espressif',
    )),
    ("raspberrypi", "Raspberry Pi", _patterns(
        r'raspberry\s*pi',
        r'import\s+RPi\.GPIO',
        r'RPi\.GPIO',
        r'import\s+gpiozero',
        r'/dev/gpiomem',
        r'wiringPi',
        r'BCM\d+',
    )),
    ("kicad", "KiCad PCB", _patterns(
        r'\.kicad_pcb$',
        r'\.kicad_sch$',
        r'\.kicad_pro$',
        r'\.pro$',
        r'\.sch$',
        r'\(kicad_pcb',
    )),
    ("fpga", "FPGA (VHDL/Verilog)", _patterns(
        r'\.vhd$',
        r'\.vhdl$',
        r'\.v$',
        r'entity\s+\w+\s+is',
        r'module\s+\w+',
        r'always\s+@',
        r'process\s*\(',
    )),
    ("stm32", "STM32", _patterns(
        r'stm32',
        r'HAL_',
        r'\.ioc$',
        r'startup_stm32',
    )),
)

PLATFORM_KEYS = tuple(key for key, _, _ in PLATFORM_SIGNATURES) + ("unknown",)

SUPPORTED_PLATFORMS = ("Arduino/ESP32", "PlatformIO", "Raspberry Pi", "KiCad PCB", "FPGA", "STM32")

DOC_TEMPLATES = MappingProxyType({
    "Arduino/ESP32": {
        "sections": ["Overview", "Hardware Components", "Pin Configuration", "Libraries", "Installation", "Testing"],
        "install_cmd": "Install the Arduino IDE or arduino-cli",
        "run_cmd": "arduino-cli upload",
    },
    "Raspberry Pi": {
        "sections": ["Overview", "GPIO Configuration", "Python Libraries", "Installation", "Running", "GPIO Troubleshooting"],
        "install_cmd": "pip3 install RPi.GPIO gpiozero",
        "run_cmd": "sudo python3 main.py",
    },
    "KiCad PCB": {
        "sections": ["PCB Information", "Component List", "Nets", "Layers", "Fabrication", "Assembly"],
        "install_cmd": "Install KiCad 7.0+",
        "run_cmd": "kicad-cli pcb export gerbers",
    },
    "FPGA (VHDL/Verilog)": {
        "sections": ["FPGA Architecture", "Entities/Modules", "I/O Ports", "Internal Signals", "Simulation", "Synthesis"],
        "install_cmd": "Install Vivado/Quartus",
        "run_cmd": "Simulate with ModelSim/GHDL",
    },
    "STM32": {
        "sections": ["MCU Configuration", "HAL Peripherals", "Pins and GPIO", "Clock Configuration", "STM32CubeIDE Setup", "Programming"],
        "install_cmd": "Install STM32CubeIDE",
        "run_cmd": "Build with STM32CubeMX",
    },
})

PLATFORM_SUPPORT = MappingProxyType({
    "embedded": {"name": "Embedded Systems", "platforms": ["Arduino", "ESP32", "ESP8266", "STM32", "PlatformIO"], "coverage": "95%"},
    "sbc": {"name": "Single Board Computers", "platforms": ["Raspberry Pi", "BeagleBone", "Orange Pi"], "coverage": "80%"},
    "pcb": {"name": "PCB Design", "platforms": ["KiCad", "Eagle", "Altium"], "coverage": "60%"},
    "fpga": {"name": "FPGA/HDL", "platforms": ["VHDL", "Verilog", "SystemVerilog"], "coverage": "50%"},
})
