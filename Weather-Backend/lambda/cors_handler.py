#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
CORS handler for API Gateway OPTIONS requests on the weather endpoint.
Returns the same CORS headers as the weather responses.
"""

from weather_handler import RESPONSE_HEADERS


def lambda_handler(event, context):
    """
    Handle CORS preflight OPTIONS requests.
    """
    headers = dict(RESPONSE_HEADERS)
    headers["Access-Control-Max-Age"] = "86400"
    return {
        "statusCode": 200,
        "headers": headers,
        "body": ""
    }
