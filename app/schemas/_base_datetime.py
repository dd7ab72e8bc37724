from datetime import datetime, timezone
from typing_extensions import Annotated
from pydantic.functional_serializers import PlainSerializer

_DATETIME_FMT = "%Y-%m-%dT%H:%M:%S"  # e.g. 2025-01-04T10:30:00


def _to_naive_iso(v: datetime) -> str:
    # aware values are shifted to UTC first; no 'Z', no offset
    if v.tzinfo is not None:
        v = v.astimezone(timezone.utc).replace(tzinfo=None)
    return v.strftime(_DATETIME_FMT)


# Datetime that always serializes as naive UTC YYYY-MM-DDTHH:mm:ss
NaiveIsoDatetime = Annotated[datetime, PlainSerializer(_to_naive_iso, return_type=str)]
