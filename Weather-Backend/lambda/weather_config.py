#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Configuration for the weather Lambda.

Values come from the function's environment variables. When the API key is
not set directly, it can be pulled from AWS Secrets Manager by setting
OPENWEATHER_SECRET_NAME instead.
"""

import os
import json
import logging
from dataclasses import dataclass
from typing import Mapping, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

logger = logging.getLogger()
logger.setLevel(logging.INFO)

DEFAULT_ZIP_CODE = "10001"
DEFAULT_COUNTRY_CODE = "US"
DEFAULT_REGION = "us-east-1"


@dataclass(frozen=True)
class WeatherConfig:
    api_key: Optional[str] = None
    zip_code: str = DEFAULT_ZIP_CODE
    country_code: str = DEFAULT_COUNTRY_CODE

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "WeatherConfig":
        """Build the config for one invocation.

        Empty values count as unset, so an empty ZIP_CODE falls back to the
        default and an empty OPENWEATHER_API_KEY means "not configured".
        """
        if environ is None:
            environ = os.environ

        api_key = environ.get('OPENWEATHER_API_KEY') or None
        if not api_key and environ.get('OPENWEATHER_SECRET_NAME'):
            region = environ.get('AWS_REGION') or environ.get('AWS_DEFAULT_REGION') or DEFAULT_REGION
            api_key = get_api_key_from_secret(environ['OPENWEATHER_SECRET_NAME'], region)

        return cls(
            api_key=api_key,
            zip_code=environ.get('ZIP_CODE') or DEFAULT_ZIP_CODE,
            country_code=environ.get('COUNTRY_CODE') or DEFAULT_COUNTRY_CODE,
        )


def get_api_key_from_secret(secret_name: str, region: str = DEFAULT_REGION) -> Optional[str]:
    """Fetch the OpenWeather API key from Secrets Manager.

    The secret may be a JSON object holding OPENWEATHER_API_KEY or the bare
    key string. Returns None if the secret can't be read.
    """
    try:
        client = boto3.client('secretsmanager', region_name=region)
        response = client.get_secret_value(SecretId=secret_name)
    except (BotoCoreError, ClientError) as e:
        logger.error(f"Failed to fetch API key from Secrets Manager: {e}")
        return None

    secret_value = (response.get('SecretString') or '').strip()
    try:
        secret_json = json.loads(secret_value)
    except ValueError:
        return secret_value or None

    if isinstance(secret_json, dict):
        api_key = secret_json.get('OPENWEATHER_API_KEY')
        if not api_key:
            logger.error(f"API key not found in secret {secret_name}")
        return api_key or None

    return secret_value or None
