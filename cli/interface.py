"""
CLI Interface for the CircuitVision analysis tools
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from circuitvision.components import estimate_quantity, extract_components, generate_shopping_list
from circuitvision.config import Settings
from circuitvision.diagrams import extract_mermaid, sanitize_or_fallback, sanitize_mermaid
from circuitvision.hardware import HardwareRuleEngine, analyze_hardware_code, generate_bug_report
from circuitvision.platforms import analyze_multi_platform

logger = logging.getLogger(__name__)

COMMANDS = ("analyze", "components", "platform", "diagram", "shopping", "target", "history", "help", "quit")


class CircuitVisionCLI:
    """Interactive session over the hardware analyzers"""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.target_platform = settings.target_platform
        self.session_history = []

    def run_interactive_session(self):
        print("🔬 CircuitVision Hardware Analyzer")
        print("=" * 50)
        print(f"Commands: {', '.join(COMMANDS)}")
        print("=" * 50)

        while True:
            try:
                command = input(f"\n[{self.target_platform}] > ").strip().lower()
                if command == "quit":
                    print("👋 Goodbye!")
                    break
                self.run_command(command)
            except (KeyboardInterrupt, EOFError):
                print("\n👋 Exiting...")
                break
            except Exception as e:
                logger.exception("Command failed")
                print(f"❌ Error: {e}")

    def run_command(self, command: str):
        handlers = {
            "analyze": self._handle_analyze,
            "components": self._handle_components,
            "platform": self._handle_platform,
            "diagram": self._handle_diagram,
            "shopping": self._handle_shopping,
            "target": self._set_target,
            "history": self._show_history,
            "help": self._show_help,
        }
        handler = handlers.get(command)
        if handler is None:
            print("❓ Unknown command. Type 'help' for available commands.")
            return
        handler()

    def _read_source(self, prompt: str = "Source file path: ") -> Optional[str]:
        file_path = input(prompt).strip()
        if not file_path:
            return None
        path = Path(file_path)
        if not path.is_file():
            print(f"❌ File {file_path} not found")
            return None
        code = path.read_text(encoding="utf-8", errors="replace")
        if len(code) > self.settings.max_source_chars:
            print(f"⚠️ File too large ({len(code)} chars, limit {self.settings.max_source_chars})")
            return None
        return code

    def _record(self, kind: str, **details):
        self.session_history.append({"type": kind, "timestamp": datetime.now().isoformat(), **details})

    def _handle_analyze(self):
        code = self._read_source()
        if code is None:
            return
        components = extract_components(code)
        engine = HardwareRuleEngine(platform=self.target_platform)
        report = analyze_hardware_code(code, components, engine)
        print(f"\n{generate_bug_report(report)}")
        print("✅ Valid" if report.is_valid else f"❌ {report.stats.critical} critical issue(s)")
        self._record("analyze", findings=report.stats.total)

    def _handle_components(self):
        code = self._read_source()
        if code is None:
            return
        components = extract_components(code)
        if not components:
            print("📦 No known components detected")
            return
        print(f"\n📦 Components ({len(components)}):")
        for component in components:
            print(f"  - {component} x{estimate_quantity(code, component)}")
        self._record("components", count=len(components))

    def _handle_platform(self):
        files = self._ask_files()
        code = "\n".join(Path(f).read_text(encoding="utf-8", errors="replace") for f in files if Path(f).is_file())
        result = analyze_multi_platform(code, [Path(f).name for f in files])
        detected = result["detected"]
        print(f"\n🧭 {detected['type']} ({detected['platform']}) - confidence: {detected['confidence']}")
        if detected["confidence"] == "low":
            print("⚠️ Low confidence: treat the platform as unknown")
        print(f"📄 Doc sections: {', '.join(result['doc_template']['sections'])}")
        self._record("platform", platform=detected["platform"])

    def _ask_files(self) -> List[str]:
        raw = input("File paths (comma separated): ").strip()
        return [f.strip() for f in raw.split(",") if f.strip()]

    def _handle_diagram(self):
        text = self._read_source("Markdown or Mermaid file path: ")
        if text is None:
            return
        diagram = extract_mermaid(text) or text
        repaired = sanitize_mermaid(diagram) is not None
        print(f"\n{sanitize_or_fallback(diagram)}")
        print("✅ Diagram repaired" if repaired else "⚠️ Could not repair, fallback diagram shown")
        self._record("diagram", repaired=repaired)

    def _handle_shopping(self):
        code = self._read_source()
        if code is None:
            return
        result = generate_shopping_list(code)
        print(f"\n{result['markdown']}" if result["success"] else f"❌ {result['message']}")
        self._record("shopping", items=len(result["items"]))

    def _set_target(self):
        platform = input("Target platform (e.g. ESP32, ESP8266, Arduino): ").strip()
        if platform:
            self.target_platform = platform
            print(f"✅ Target set to {platform}")

    def _show_history(self):
        if not self.session_history:
            print("📝 No history")
            return
        print(f"\n📝 History ({len(self.session_history)} items):")
        for item in self.session_history[-5:]:
            print(f"  [{item['type']}] {item.get('timestamp', '')}")

    def _show_help(self):
        print("""
🔬 Commands:
  analyze    - Hardware rule check of a source file
  components - List detected components
  platform   - Detect the project platform
  diagram    - Repair a Mermaid diagram
  shopping   - Shopping list for a source file
  target     - Set the target board
  history    - View history
  help       - Show this
  quit       - Exit
""")
