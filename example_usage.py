#!/usr/bin/env python3
"""
Basic usage examples for the TeleSign REST client.

Reads credentials from TELESIGN_CUSTOMER_ID and TELESIGN_SECRET_KEY and
sends a signed SMS request.
"""

import logging
import os
import sys

from telesign_rest import RestClient, TelesignClientError, build_string_to_sign


def main():
    """Run basic usage examples."""
    customer_id = os.environ.get("TELESIGN_CUSTOMER_ID")
    secret_key = os.environ.get("TELESIGN_SECRET_KEY")
    phone_number = os.environ.get("TELESIGN_PHONE_NUMBER", "15555555555")

    if not (customer_id and secret_key):
        print("Set TELESIGN_CUSTOMER_ID and TELESIGN_SECRET_KEY to run the examples.")
        return 1

    logging.basicConfig(level=logging.DEBUG)

    print("=== TeleSign REST Client Usage Examples ===\n")

    print("1. String-to-sign for a GET request:")
    print(build_string_to_sign(
        "GET", "/v1/test", "", "Fri, 01 Jan 2021 00:00:00 GMT", "11111111-1111-1111-1111-111111111111"
    ))
    print()

    try:
        with RestClient(customer_id, secret_key) as client:
            print("2. Sending SMS...")
            response = client.post("/v1/messaging", {
                "phone_number": phone_number,
                "message": "Your code is 12345",
                "message_type": "OTP"
            })
            print(f"   Status: {response.status_code}")
            print(f"   Body: {response.json if response.json is not None else response.body}\n")

            reference_id = (response.json or {}).get("reference_id")
            if reference_id:
                print("3. Checking message status...")
                status = client.get(f"/v1/messaging/{reference_id}")
                print(f"   Status: {status.status_code}")
                print(f"   Body: {status.body}")
    except TelesignClientError as e:
        print(f"Client error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
