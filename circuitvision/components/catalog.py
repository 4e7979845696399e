"""
Component catalog - source signatures, fallback prices and alternatives
"""

import re
from types import MappingProxyType


def _signature(pattern: str, component: str):
    return re.compile(pattern, re.IGNORECASE), component


# Scanned in order; several raw part names collapse into one canonical name.
COMPONENT_PATTERNS = (
    # Sensors
    _signature(r'DHT22|DHT11', "DHT22"),
    _signature(r'BMP280|BMP180', "BMP280"),
    _signature(r'BME280', "BME280"),
    _signature(r'MPU6050|MPU9250', "MPU6050"),
    _signature(r'HC-SR04', "HC-SR04"),
    _signature(r'MQ-\d+', "MQ-2"),
    # Displays
    _signature(r'SSD1306|OLED', "OLED SSD1306"),
    _signature(r'LCD.{0,64}16.{0,64}2|1602', "LCD 16x2"),
    _signature(r'TFT|ILI9341', "TFT Display"),
    # Communication
    _signature(r'ESP32', "ESP32"),
    _signature(r'ESP8266', "ESP8266"),
    _signature(r'nRF24L01', "nRF24L01"),
    _signature(r'HC-05|HC-06', "HC-05 Bluetooth"),
    # Motors
    _signature(r'Servo', "Servo Motor"),
    _signature(r'Stepper|28BYJ', "Stepper Motor 28BYJ-48"),
    _signature(r'L298N', "L298N Motor Driver"),
    # Storage
    _signature(r'SD Card|SD_MMC', "SD Card Module"),
    # Power
    _signature(r'LM2596|Buck', "LM2596 Buck Converter"),
    _signature(r'AMS1117|LDO', "AMS1117 3.3V Regulator"),
    # Others
    _signature(r'Relay', "Relay Module"),
    _signature(r'LED Strip|WS2812|NeoPixel', "WS2812 LED Strip"),
    _signature(r'RC522|MFRC522', "RFID RC522"),
    _signature(r'ultrasonic', "HC-SR04 Ultrasonic"),
)

MAX_QUANTITY = 5


def _vendors(*entries):
    return tuple(MappingProxyType({"name": n, "price": p, "url": u}) for n, p, u in entries)


FALLBACK_PRICES = MappingProxyType({
    "ESP32": {"price": "6.99", "vendors": _vendors(
        ("Amazon", "6.99", "https://amazon.com/s?k=ESP32"),
        ("AliExpress", "4.50", "https://aliexpress.com/wholesale?SearchText=ESP32"),
    )},
    "DHT22": {"price": "4.99", "vendors": _vendors(
        ("Amazon", "4.99", "https://amazon.com/s?k=DHT22"),
        ("AliExpress", "2.50", "https://aliexpress.com/wholesale?SearchText=DHT22"),
    )},
    "OLED SSD1306": {"price": "5.99", "vendors": _vendors(
        ("Amazon", "5.99", "https://amazon.com/s?k=OLED+SSD1306"),
        ("AliExpress", "3.50", "https://aliexpress.com/wholesale?SearchText=OLED"),
    )},
    "HC-SR04": {"price": "3.99", "vendors": _vendors(
        ("Amazon", "3.99", "https://amazon.com/s?k=HC-SR04"),
        ("AliExpress", "1.50", "https://aliexpress.com/wholesale?SearchText=HC-SR04"),
    )},
    "Servo Motor": {"price": "4.99", "vendors": _vendors(
        ("Amazon", "4.99", "https://amazon.com/s?k=SG90+Servo"),
        ("AliExpress", "2.00", "https://aliexpress.com/wholesale?SearchText=SG90"),
    )},
    "BMP280": {"price": "4.49", "vendors": _vendors(
        ("Amazon", "4.49", "https://amazon.com/s?k=BMP280"),
        ("Mouser", "5.20", "https://mouser.com/c/?q=BMP280"),
    )},
    "MPU6050": {"price": "5.99", "vendors": _vendors(
        ("Amazon", "5.99", "https://amazon.com/s?k=MPU6050"),
        ("AliExpress", "3.00", "https://aliexpress.com/wholesale?SearchText=MPU6050"),
    )},
    "L298N Motor Driver": {"price": "7.99", "vendors": _vendors(
        ("Amazon", "7.99", "https://amazon.com/s?k=L298N"),
        ("AliExpress", "4.50", "https://aliexpress.com/wholesale?SearchText=L298N"),
    )},
})

DEFAULT_ALTERNATIVES = MappingProxyType({
    "DHT22": ("DHT11", "AM2302", "SHT31"),
    "ESP32": ("ESP32-WROOM", "ESP32-S2", "ESP32-C3"),
    "BMP280": ("BMP180", "BME280"),
    "MPU6050": ("MPU9250", "MPU6500"),
    "OLED SSD1306": ("SSD1309", "SH1106"),
    "Servo Motor": ("SG90", "MG90S", "MG996R"),
    "L298N Motor Driver": ("DRV8833", "TB6612", "L293D"),
    "HC-SR04": ("US-015", "JSN-SR04T"),
    "RFID RC522": ("PN532", "RC522 V2.0"),
    "ESP8266": ("ESP-01", "NodeMCU", "Wemos D1 Mini"),
})
