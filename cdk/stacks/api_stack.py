from aws_cdk import (
    Stack,
    Duration,
    CfnOutput,
    RemovalPolicy,
    aws_apigateway as apigw,
    aws_lambda as _lambda,
    aws_dynamodb as ddb,
    aws_logs as logs,
    aws_xray as xray,
)
from constructs import Construct

class ApiStack(Stack):
    def __init__(self, scope: Construct, construct_id: str,
                 table_name: str = "aurelia_waitlist",
                 deployment_id: str = "aws-lambda",
                 enable_xray: bool = True,
                 **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # Waitlist store: one item per normalized email, pk = "email:<lowercased>"
        table = ddb.Table(self, "WaitlistTable",
                          table_name=table_name,
                          partition_key=ddb.Attribute(name="pk", type=ddb.AttributeType.STRING),
                          billing_mode=ddb.BillingMode.PAY_PER_REQUEST,
                          point_in_time_recovery=True,
                          removal_policy=RemovalPolicy.RETAIN)

        runtime = _lambda.Runtime.PYTHON_3_12
        tracing = _lambda.Tracing.ACTIVE if enable_xray else _lambda.Tracing.DISABLED

        subscribe_fn = _lambda.Function(self, "SubscribeFn",
                                        runtime=runtime,
                                        handler="subscribe.handler",
                                        code=_lambda.Code.from_asset("../functions", exclude=["tests"]),
                                        environment={"TABLE_NAME": table.table_name, "LOG_LEVEL": "INFO"},
                                        timeout=Duration.seconds(10),
                                        tracing=tracing,
                                        log_retention=logs.RetentionDays.TWO_WEEKS)

        ping_fn = _lambda.Function(self, "PingFn",
                                   runtime=runtime,
                                   handler="ping.handler",
                                   code=_lambda.Code.from_asset("../functions", exclude=["tests"]),
                                   environment={"DEPLOYMENT_ID": deployment_id, "LOG_LEVEL": "INFO"},
                                   timeout=Duration.seconds(10),
                                   tracing=tracing,
                                   log_retention=logs.RetentionDays.TWO_WEEKS)

        # The handler never reads before writing
        table.grant_write_data(subscribe_fn)

        # API Gateway
        api = apigw.RestApi(self, "HttpApi",
                            deploy_options=apigw.StageOptions(metrics_enabled=True, logging_level=apigw.MethodLoggingLevel.INFO, tracing_enabled=enable_xray),
                            cloud_watch_role=True)

        api_root = api.root.add_resource("api")

        # /api/subscribe
        subscribe = api_root.add_resource("subscribe")
        subscribe.add_method("POST", apigw.LambdaIntegration(subscribe_fn, proxy=True))

        # /api/ping
        ping = api_root.add_resource("ping")
        ping.add_method("GET", apigw.LambdaIntegration(ping_fn, proxy=True))

        if enable_xray:
            xray.CfnSamplingRule(self, "DefaultSampling",
                                 sampling_rule=xray.CfnSamplingRule.SamplingRuleProperty(
                                     rule_name="WaitlistDefault",
                                     resource_arn="*",
                                     priority=10000,
                                     fixed_rate=0.1,
                                     reservoir_size=1,
                                     service_name="*",
                                     service_type="*",
                                     host="*",
                                     http_method="*",
                                     url_path="*",
                                     version=1))

        CfnOutput(self, "ApiUrl", value=api.url)
        CfnOutput(self, "TableName", value=table.table_name)
