import datetime

from aws_cdk import Duration
from aws_cdk import aws_lambda as _lambda
from constructs import Construct


class Functions(Construct):
    """Lambda 関数を管理する Construct

    ストアはプロセス内メモリに保持するため、全ルートを 1 つの関数で処理する。
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        failure_rate: str = "0.1",
        allow_cancel_confirmed: str = "true",
    ) -> None:
        super().__init__(scope, id)

        self.booking_api = _lambda.Function(
            self,
            "BookingApiLambda",
            runtime=_lambda.Runtime.PYTHON_3_12,
            handler="airline.handlers.api.lambda_handler",
            code=_lambda.Code.from_asset("src"),
            memory_size=256,
            timeout=Duration.seconds(10),
            # 実行環境を 1 つに限定し、全リクエストが同じストアを参照する
            reserved_concurrent_executions=1,
            environment={
                "POWERTOOLS_SERVICE_NAME": "airline-booking",
                "FAILURE_RATE": failure_rate,
                "ALLOW_CANCEL_CONFIRMED": allow_cancel_confirmed,
                "DEPLOY_TIME": datetime.datetime.now(datetime.timezone.utc).isoformat(),
            },
        )
