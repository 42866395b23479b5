import json
import unittest
from unittest.mock import patch

import ping


class PingTests(unittest.TestCase):
    def test_ping(self):
        resp = ping.handler({"httpMethod": "GET", "path": "/api/ping"}, None)
        self.assertEqual(resp["statusCode"], 200)
        self.assertEqual(resp["headers"], {"content-type": "application/json"})
        self.assertEqual(json.loads(resp["body"]), {"ok": True, "where": ping.WHERE})

    def test_where_is_configurable(self):
        with patch.object(ping, "WHERE", "prod-eu"):
            body = json.loads(ping.handler({}, None)["body"])
        self.assertEqual(body["where"], "prod-eu")


if __name__ == "__main__":
    unittest.main()
