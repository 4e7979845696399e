"""Sample sources shared by the tests."""

ESP32_SKETCH = """
#include <DHT.h>
#define LED_PIN GPIO6
#define DHT_PIN GPIO15
#define SENSOR_PIN GPIO6

const char* ssid = "MyWiFi";
const char* password = "12345678";

DHT dht(DHT_PIN, DHT22);

void setup() {
  pinMode(LED_PIN, OUTPUT);
  dht.begin();
}

void loop() {
  float temp = dht.readTemperature();
  delay(500);
}
"""

CLEAN_SKETCH = """
#define LED_PIN GPIO4
const int BUTTON = 15;

void setup() {
  pinMode(LED_PIN, OUTPUT);
}

void loop() {
  digitalWrite(LED_PIN, digitalRead(BUTTON));
  delay(100);
}
"""

COMPONENT_SKETCH = """
#include <DHT.h>
#include <BMP280.h>

DHT dht(15, DHT22);
BMP280 bmp;

Servo myServo;
"""
