"""
Tiny helper script that runs the detector over the bundled samples.
"""

from __future__ import annotations

from ai_text_detector import DetectionEngine
from ai_text_detector.samples import SAMPLES


def main() -> None:
    engine = DetectionEngine()
    for name, text in SAMPLES.items():
        result = engine.detect(text)
        print("-" * 40)
        print(name)
        print(f"AI generated: {result.is_ai_generated} (score {result.score:.3f}, confidence {result.confidence:.3f})")
        for reason in result.reasons:
            print(f"  - {reason}")


if __name__ == "__main__":
    main()
