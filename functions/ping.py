import os
from waitlist import json_response

WHERE = os.environ.get("DEPLOYMENT_ID", "aws-lambda")


def handler(event, context):
    return json_response(200, {"ok": True, "where": WHERE})
