from aws_cdk import CfnOutput
from aws_cdk import aws_apigatewayv2 as apigwv2
from aws_cdk import aws_lambda as _lambda
from aws_cdk.aws_apigatewayv2_integrations import HttpLambdaIntegration
from constructs import Construct


class Api(Construct):
    """API Gateway (HTTP API) Construct"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        booking_api: _lambda.IFunction,
    ) -> None:
        super().__init__(scope, id)

        integration = HttpLambdaIntegration("BookingApiIntegration", booking_api)

        self.http_api = apigwv2.HttpApi(
            self,
            "BookingHttpApi",
            api_name="Airline Booking API",
        )

        # GET /health, /ready, /api/flights/search, /api/bookings/{id}
        # POST /api/bookings, /api/bookings/{id}/confirm, /api/bookings/{id}/cancel
        self.http_api.add_routes(
            path="/{proxy+}",
            methods=[apigwv2.HttpMethod.GET, apigwv2.HttpMethod.POST],
            integration=integration,
        )

        CfnOutput(self, "ApiUrl", value=self.http_api.api_endpoint)
