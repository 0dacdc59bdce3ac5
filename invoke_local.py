#!/usr/bin/env python3
"""
Local testing script for the weather Lambda function.

Reads OPENWEATHER_API_KEY / ZIP_CODE / COUNTRY_CODE from the environment or
a .env file in the working directory, then invokes the handler with a mock
API Gateway event.
"""

import os
import sys
import json

from dotenv import load_dotenv

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), 'Weather-Backend', 'lambda'))

from weather_handler import lambda_handler

load_dotenv()

MOCK_EVENT = {
    'httpMethod': 'GET',
    'path': '/weather',
    'headers': {},
    'queryStringParameters': None,
    'body': None
}


def main():
    print("🧪 Testing Weather Lambda Function...\n")

    result = lambda_handler(MOCK_EVENT, None)

    print(f"Status Code: {result['statusCode']}")
    print(f"Headers: {json.dumps(result['headers'], indent=2)}")
    print(f"Response Body: {json.dumps(json.loads(result['body']), indent=2, ensure_ascii=False)}")

    if result['statusCode'] == 200:
        print("\n✅ Test passed! Weather data retrieved successfully.")
        return 0

    print("\n❌ Test failed. Check the error message above.")
    return 1


if __name__ == "__main__":
    sys.exit(main())
