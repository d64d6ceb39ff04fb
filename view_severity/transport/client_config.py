from __future__ import annotations

"""
Default HTTP settings for the remote query client.

These values are used when the configuration file does not override them.

Attributes
----------
ALARMS_PATH
    Path of the active-alarms endpoint.
VIEWS_PATH
    Path of the views endpoint.
TIMEOUT_S
    Default HTTP request timeout (seconds).
"""

ALARMS_PATH: str = "/alarms/active"
VIEWS_PATH: str = "/views"
TIMEOUT_S: float = 10.0
