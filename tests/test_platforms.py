"""Tests for platform detection and the per-platform analyzers."""

import pytest

from circuitvision.platforms import (
    PlatformDetection,
    analyze_fpga,
    analyze_kicad_pcb,
    analyze_multi_platform,
    analyze_raspberry_pi,
    detect_platform_type,
    generate_platform_doc_template,
    get_platform_support,
    score_platforms,
)


KICAD_BOARD = """(kicad_pcb (version 20211014)
  (general (thickness 1.6))
  (layers (0 "F.Cu" signal) (31 "B.Cu" signal))
  (net 0 "")
  (net 1 "GND")
  (footprint "Resistor_SMD:R_0603" (layer "F.Cu"))
  (footprint "LED_SMD:LED_0603" (layer "F.Cu"))
)"""

VHDL_COUNTER = """entity counter is
  port ( clk : in std_logic; count : out std_logic_vector(3 downto 0) );
end counter;
architecture rtl of counter is
  signal value : unsigned(3 downto 0);
"""

RPI_SCRIPT = """import RPi.GPIO as GPIO
GPIO.setmode(GPIO.BCM)
GPIO.setup(18, GPIO.OUT)
GPIO.cleanup()
"""


@pytest.mark.parametrize(
    "code, files, expected",
    [
        ("void setup() {} void loop() {} #include <Arduino.h>", ["main.ino"], "arduino"),
        ("import RPi.GPIO as GPIO", ["main.py"], "raspberrypi"),
        ("(kicad_pcb (version 20211014)", ["project.kicad_pcb"], "kicad"),
        ("entity counter is port ( clk : in std_logic", ["counter.vhd"], "fpga"),
        ("[env:esp32]\nplatform = espressif32", ["platformio.ini"], "platformio"),
        ("HAL_GPIO_WritePin(GPIOA, GPIO_PIN_5, 1);", ["board.ioc"], "stm32"),
    ],
)
def test_detects_platform(code, files, expected):
    assert detect_platform_type(code, files).platform == expected


def test_raspberry_pi_confidence_at_least_medium():
    detection = detect_platform_type("import RPi.GPIO as GPIO", ["main.py"])
    assert detection.platform == "raspberrypi"
    assert detection.type == "Raspberry Pi"
    assert detection.confidence in ("medium", "high")


def test_arduino_sketch_is_high_confidence():
    detection = detect_platform_type("void setup() {} void loop() {} #include <Arduino.h>", ["main.ino"])
    assert detection.confidence == "high"


def test_filename_and_content_both_count():
    scores = score_platforms("see main.ino", ["main.ino"])
    assert scores["arduino"] == 3


def test_file_entries_may_be_mappings():
    assert detect_platform_type("", [{"name": "board.kicad_pcb"}]).platform == "kicad"


def test_ties_go_to_first_listed_platform():
    detection = detect_platform_type("stm32 arduino")
    assert detection.platform == "arduino"
    assert detection.confidence == "low"


def test_no_signal_defaults_to_low_confidence_first_platform():
    detection = detect_platform_type("", [])
    assert detection.to_dict() == {"platform": "arduino", "type": "Arduino/ESP32", "confidence": "low"}
    assert not detection.is_conclusive


def test_detection_is_deterministic():
    args = ("module top; always @(posedge clk)", ["top.v"])
    assert detect_platform_type(*args) == detect_platform_type(*args)


def test_detection_record_validation():
    with pytest.raises(ValueError):
        PlatformDetection(platform="mars", type="Mars", confidence="low")
    with pytest.raises(ValueError):
        PlatformDetection(platform="fpga", type="FPGA", confidence="certain")
    with pytest.raises(TypeError):
        PlatformDetection(platform="fpga", type="FPGA", confidence="low", score=3)


def test_raspberry_pi_analysis():
    analysis = analyze_raspberry_pi(RPI_SCRIPT)
    assert analysis["pins"] == [{"number": "18", "type": "BOARD"}]
    assert analysis["libraries"] == ["RPi.GPIO"]
    assert "✓ GPIO cleanup present (good practice)" in analysis["recommendations"]


def test_raspberry_pi_missing_cleanup():
    analysis = analyze_raspberry_pi("import gpiozero\nled = BCM17")
    assert analysis["pins"] == [{"number": "17", "type": "BCM"}]
    assert analysis["recommendations"][-1] == "⚠️ Add GPIO.cleanup() on exit"


def test_kicad_analysis():
    analysis = analyze_kicad_pcb(KICAD_BOARD)
    assert analysis["components"] == ["Resistor_SMD:R_0603", "LED_SMD:LED_0603"]
    assert analysis["nets"] == [{"id": "1", "name": "GND"}]
    assert analysis["layers"] == ["F.Cu"]
    assert analysis["board_info"] == {"thickness": 1.6}


def test_vhdl_analysis():
    analysis = analyze_fpga(VHDL_COUNTER, "vhdl")
    assert analysis["language"] == "VHDL"
    assert analysis["entities"] == ["counter"]
    assert [p["name"] for p in analysis["ports"]] == ["clk", "count"]
    assert analysis["signals"] == [{"name": "value", "type": "unsigned"}]
    assert analysis["recommendations"] == []


def test_verilog_analysis():
    analysis = analyze_fpga("module blink(input clk, output [3:0] leds);", "verilog")
    assert analysis["entities"] == ["blink"]
    assert analysis["ports"] == [
        {"name": "clk", "direction": "input", "width": "1 bit"},
        {"name": "leds", "direction": "output", "width": "[3:0]"},
    ]


def test_fpga_without_entities_recommends():
    assert analyze_fpga("", "verilog")["recommendations"] == ["⚠️ No entity/module detected"]


def test_multi_platform_runs_matching_analyzer():
    result = analyze_multi_platform(VHDL_COUNTER, ["counter.vhd"])
    assert result["detected"]["platform"] == "fpga"
    assert result["analysis"]["language"] == "VHDL"
    assert result["doc_template"]["sections"][0] == "FPGA Architecture"
    assert "STM32" in result["supported_platforms"]


def test_multi_platform_raspberry_pi():
    result = analyze_multi_platform(RPI_SCRIPT, ["main.py"])
    assert result["analysis"]["platform"] == "Raspberry Pi"
    assert "GPIO Configuration" in result["doc_template"]["sections"]


def test_doc_template_defaults_to_arduino():
    assert generate_platform_doc_template("Unknown")["run_cmd"] == "arduino-cli upload"


def test_platform_support_table():
    support = get_platform_support()
    assert set(support) == {"embedded", "sbc", "pcb", "fpga"}
    assert "Raspberry Pi" in support["sbc"]["platforms"]


@pytest.mark.parametrize(
    "code, files, language",
    [
        ("entity blink is", [{"name": "top.VHDL"}], "VHDL"),
        ("entity blink is", ["rtl/top.vhd"], "VHDL"),
        ("module top(input clk);", ["top.v"], "VERILOG"),
    ],
)
def test_fpga_language_follows_file_names(code, files, language):
    result = analyze_multi_platform(code, files)
    assert result["detected"]["platform"] == "fpga"
    assert result["analysis"]["language"] == language
