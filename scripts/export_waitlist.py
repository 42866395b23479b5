#!/usr/bin/env python3
"""Dump the waitlist table to stdout as CSV or JSON lines.

Read-only: scans keys under the ``email:`` prefix and never writes.
"""
import argparse
import csv
import json
import sys

import boto3

from waitlist import list_subscribers


def write_subscribers(rows, fmt, out):
    count = 0
    if fmt == "csv":
        writer = csv.writer(out)
        writer.writerow(["key", "email", "ts"])
        for key, record in rows:
            writer.writerow([key, record["email"], "" if record["ts"] is None else record["ts"]])
            count += 1
    else:
        for key, record in rows:
            out.write(json.dumps({"key": key, **record}) + "\n")
            count += 1
    return count


def main(argv=None):
    parser = argparse.ArgumentParser(description="Export waitlist subscribers")
    parser.add_argument("--table", required=True, help="DynamoDB table name")
    parser.add_argument("--format", choices=("csv", "json"), default="csv")
    parser.add_argument("--region", default=None, help="AWS region (defaults to the boto3 session's)")
    args = parser.parse_args(argv)

    table = boto3.resource("dynamodb", region_name=args.region).Table(args.table)
    count = write_subscribers(list_subscribers(table), args.format, sys.stdout)
    print(f"exported {count} subscribers", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
