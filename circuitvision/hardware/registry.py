"""
Hardware rule tables - restricted pins, voltage ratings, bus defaults, timing limits
"""

from types import MappingProxyType


def _frozen(table: dict) -> MappingProxyType:
    return MappingProxyType({key: MappingProxyType(value) for key, value in table.items()})


# Checked in order; the first entry whose number appears in a pin reference wins.
ESP32_RESTRICTED_PINS = (
    MappingProxyType({"pin": "GPIO6", "reason": "Used by flash SPI", "severity": "critical"}),
    MappingProxyType({"pin": "GPIO7", "reason": "Used by flash SPI", "severity": "critical"}),
    MappingProxyType({"pin": "GPIO8", "reason": "Used by flash SPI", "severity": "critical"}),
    MappingProxyType({"pin": "GPIO9", "reason": "Used by flash SPI", "severity": "critical"}),
    MappingProxyType({"pin": "GPIO10", "reason": "Used by flash SPI", "severity": "critical"}),
    MappingProxyType({"pin": "GPIO11", "reason": "Used by flash SPI", "severity": "critical"}),
    MappingProxyType({"pin": "GPIO0", "reason": "Boot mode strap - pull-up required", "severity": "warning"}),
    MappingProxyType({"pin": "GPIO2", "reason": "Boot mode strap - pull-down required", "severity": "warning"}),
)

# Keyed by canonical component name (see components.catalog)
VOLTAGE_REQUIREMENTS = _frozen({
    "DHT22": {"voltage": "3.3-5V", "max": 5.0, "min": 3.3},
    "BMP280": {"voltage": "3.3V", "max": 3.6, "min": 1.8},
    "BME280": {"voltage": "3.3V", "max": 3.6, "min": 1.71},
    "MPU6050": {"voltage": "3.3V", "max": 3.6, "min": 2.3},
    "OLED SSD1306": {"voltage": "3.3V", "max": 3.6, "min": 3.0},
    "SD Card Module": {"voltage": "3.3V", "max": 3.6, "min": 2.7},
    "Servo Motor": {"voltage": "5V", "max": 6.0, "min": 4.8},
})

I2C_DEFAULT_PINS = _frozen({
    "ESP32": {"sda": "GPIO21", "scl": "GPIO22"},
    "ESP8266": {"sda": "GPIO4", "scl": "GPIO5"},
    "ARDUINO": {"sda": "A4", "scl": "A5"},
})

CRITICAL_DELAYS = MappingProxyType({
    "DHT_MIN_INTERVAL": 2000,  # ms between DHT reads
    "I2C_INIT_DELAY": 100,
    "WIFI_CONNECT_TIMEOUT": 10000,
})

HIGH_VOLTAGE_THRESHOLD = 5.0
