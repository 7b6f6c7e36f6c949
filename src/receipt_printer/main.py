import json
import sys
from pathlib import Path

from receipt_printer.boot.composition_root import build_app
from receipt_printer.utils.logger import setup_logger

logger = setup_logger(__name__)


def main(argv=None) -> int:
    """
    Usage: python -m receipt_printer.main batch.json [usb|network]
    batch.json holds [{"method": "println", "params": ["Hello"]}, ...]
    """
    args = sys.argv[1:] if argv is None else argv
    if not args:
        logger.error("Usage: receipt-printer <batch.json> [usb|network]")
        return 2

    try:
        payload = json.loads(Path(args[0]).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"❌ Cannot read batch file {args[0]}: {e}")
        return 2

    use_case = build_app(*args[1:2])
    response = use_case.execute(payload)
    print(response.message)
    return 0 if response.success else 1


if __name__ == "__main__":
    sys.exit(main())
