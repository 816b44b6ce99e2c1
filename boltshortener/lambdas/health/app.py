import time
from typing import Any

from boltshortener.utils.config import app_env
from boltshortener.utils.helpers import guarantee_500_response
from boltshortener.utils.responses import response_200


STARTED_AT = time.monotonic()


@guarantee_500_response
def lambda_handler(event: dict, context: Any) -> dict:
    """Report service status

    HTTP responses:
        200: {status, uptime, timestamp, environment}
            uptime: seconds since this execution environment loaded the handler
            timestamp: current time in epoch milliseconds
    """
    return response_200(
        {
            'status': 'operational',
            'uptime': round(time.monotonic() - STARTED_AT, 3),
            'timestamp': int(time.time() * 1000),
            'environment': app_env(),
        }
    )
