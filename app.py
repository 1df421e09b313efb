#!/usr/bin/env python3

import aws_cdk as cdk

from airline_booking_stack import AirlineBookingStack

app = cdk.App()
AirlineBookingStack(
    app,
    "AirlineBookingStack",
)

app.synth()
