import os, boto3
from waitlist import get_logger, json_response, parse_body, is_valid_email, put_subscription

logger = get_logger()
TABLE = boto3.resource("dynamodb").Table(os.environ["TABLE_NAME"])


def handler(event, context):
    try:
        body = parse_body(event)
        email = body.get("email")
        if not is_valid_email(email):
            logger.info("rejected subscription: invalid email")
            return json_response(400, {"ok": False, "message": "Invalid email"})

        key, _ = put_subscription(TABLE, email)
        logger.info("subscribed %s", key)
        return json_response(200, {"ok": True})
    except Exception:
        logger.exception("subscribe failed")
        return json_response(500, {"ok": False, "message": "Server error"})
