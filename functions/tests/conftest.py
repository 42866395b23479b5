import os

# subscribe.py builds its Table at import time
os.environ.setdefault("TABLE_NAME", "aurelia_waitlist_test")
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
