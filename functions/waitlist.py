import os, re, json, time, base64, logging

KEY_PREFIX = "email:"
# whitespace as the browser regex engine defines \s
WS = "\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
EMAIL_PATTERN = re.compile(f"[^{WS}@]+@[^{WS}@]+\\.[^{WS}@]+")

JSON_HEADERS = {"content-type": "application/json"}


def get_logger():
    logger = logging.getLogger()
    logger.setLevel(os.environ.get("LOG_LEVEL", "INFO").upper())
    return logger


def json_response(status, payload):
    return {"statusCode": status, "headers": dict(JSON_HEADERS), "body": json.dumps(payload)}


def parse_body(event):
    """Decode the proxy event body; anything unparsable becomes an empty object."""
    raw = (event or {}).get("body")
    if not raw:
        return {}
    try:
        if event.get("isBase64Encoded"):
            raw = base64.b64decode(raw).decode("utf-8")
        body = json.loads(raw)
    except (ValueError, TypeError, RecursionError):
        return {}
    return body if isinstance(body, dict) else {}


def is_valid_email(email):
    return isinstance(email, str) and EMAIL_PATTERN.search(email) is not None


def storage_key(email):
    return f"{KEY_PREFIX}{email.lower()}"


def make_record(email, now_ms=None):
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return {"email": email, "ts": now_ms}


def put_subscription(table, email, now_ms=None):
    key = storage_key(email)
    record = make_record(email, now_ms)
    table.put_item(Item={
        "pk": key,
        "value": json.dumps(record),
        "metadata": {"email": email},
    })
    return key, record


def list_subscribers(table, page_size=100):
    # read-only; pages through the whole table
    kwargs = {
        "FilterExpression": "begins_with(pk, :prefix)",
        "ExpressionAttributeValues": {":prefix": KEY_PREFIX},
        "Limit": page_size,
    }
    while True:
        resp = table.scan(**kwargs)
        for item in resp.get("Items", []):
            yield item["pk"], _decode_record(item)
        last = resp.get("LastEvaluatedKey")
        if not last:
            return
        kwargs["ExclusiveStartKey"] = last


def _decode_record(item):
    try:
        record = json.loads(item["value"])
        return {"email": record["email"], "ts": int(record["ts"])}
    except (KeyError, ValueError, TypeError):
        return {"email": (item.get("metadata") or {}).get("email"), "ts": None}
