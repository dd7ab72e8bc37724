# app/scripts/show_progress.py
# Usage: python -m app.scripts.show_progress 2025-01-04T10:30
import json
import sys
from datetime import datetime

from app.services.progress_service import get_progress
from app.utils.datetime_utils import utcnow


def main(argv):
    quit_instant = datetime.fromisoformat(argv[1]) if len(argv) > 1 else None
    result = get_progress(utcnow(), quit_instant)
    print(json.dumps(result.model_dump(by_alias=True), indent=2))


if __name__ == "__main__":
    main(sys.argv)
