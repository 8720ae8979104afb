import datetime
import json
import uuid


def encode_json(value):
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=_encode_default)


def decode_json(text):
    return json.loads(text)


def _encode_default(value):
    if isinstance(value, (datetime.datetime, datetime.date, datetime.time)):
        return value.isoformat()
    elif isinstance(value, uuid.UUID):
        return str(value)
    else:
        raise TypeError("Object of type {} is not JSON serializable".format(type(value).__name__))
