from aws_cdk import Stack
from constructs import Construct

from infra.constructs import Api, Functions


class AirlineBookingStack(Stack):
    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        fns = Functions(self, "Functions")

        Api(
            self,
            "Api",
            booking_api=fns.booking_api,
        )
