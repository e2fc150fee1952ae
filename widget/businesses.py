"""Static business directory shipped with the widget."""

from __future__ import annotations

from typing import List

from relay.models import Business


BUSINESSES: List[Business] = [
    Business(
        name="Peachtree Home Helpers",
        description="Light housekeeping, laundry and meal preparation for older adults living at home.",
        phone="404-555-0142",
        email="hello@peachtreehomehelpers.com",
    ),
    Business(
        name="Buckhead Senior Rides",
        description="Door-to-door transportation to medical appointments, pharmacies and grocery stores.",
        phone="404-555-0187",
        email="rides@buckheadseniorrides.com",
    ),
    Business(
        name="Midtown Handyman Services",
        description="Grab bars, ramps, small repairs and other home safety improvements.",
        phone="404-555-0119",
        email="service@midtownhandyman.com",
    ),
    Business(
        name="Grant Park Tech Tutors",
        description="Patient one-on-one help with phones, tablets, email and video calls.",
        phone="404-555-0163",
        email="learn@grantparktechtutors.com",
    ),
    Business(
        name="Decatur Yard & Garden",
        description="Lawn mowing, leaf removal and seasonal garden care.",
        phone="404-555-0175",
        email="care@decaturyardgarden.com",
    ),
]
