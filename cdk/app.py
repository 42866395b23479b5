#!/usr/bin/env python3
import os
import aws_cdk as cdk
from stacks.api_stack import ApiStack

app = cdk.App()

env = cdk.Environment(
    account=os.getenv("CDK_DEFAULT_ACCOUNT"),
    region=os.getenv("CDK_DEFAULT_REGION", "us-east-1")
)

table_name = app.node.try_get_context("table_name") or "aurelia_waitlist"
deployment_id = app.node.try_get_context("deployment_id") or "aws-lambda"
enable_xray = app.node.try_get_context("enable_xray")
enable_xray = True if enable_xray is None else str(enable_xray).lower() != "false"

# Waitlist API (Lambda + API GW + DDB). The landing page is hosted separately and calls /api/*.
api = ApiStack(app, "WaitlistApiStack",
               env=env,
               table_name=table_name,
               deployment_id=deployment_id,
               enable_xray=enable_xray)

app.synth()
