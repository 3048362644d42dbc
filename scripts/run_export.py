"""
Demo script: export every registered layout for each Swiss locale.

Usage:
    python scripts/run_export.py                 # CSV output
    python scripts/run_export.py --parquet       # Parquet output

Each (layout, locale) pair gets its own output subdirectory and a
fixtures.yaml under outputs/, which is then run through the public API.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

LOCALES = [None, "de_CH", "fr_CH"]

OUTPUT_ROOT = Path("outputs")

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("run_export")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main() -> None:
    import kbd_fixtures
    from kbd_fixtures.config import generate_default_config, save_config

    output_format = "parquet" if "--parquet" in sys.argv else "csv"

    for layout_name in kbd_fixtures.available_layouts():
        for locale in LOCALES:
            name = f"{layout_name}_{locale or 'neutral'}"
            config = generate_default_config(
                layout_name,
                locale=locale,
                output_dir=str(OUTPUT_ROOT / name),
            )
            config.output.output_format = output_format
            config_path = OUTPUT_ROOT / f"{name}.yaml"
            save_config(config, config_path)

            log.info("=" * 70)
            log.info("Exporting: %s", name)
            log.info("  config_path : %s", config_path)
            log.info("=" * 70)

            for path in kbd_fixtures.run(config_path):
                log.info("  wrote %s", path)

    log.info("All layouts exported.")


if __name__ == "__main__":
    main()
