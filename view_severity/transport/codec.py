from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from view_severity.domain.models import Alarm, View, ViewImpact

logger = logging.getLogger(__name__)


def _opt_str(value: Any) -> Optional[str]:
    return None if value is None else str(value)


def _opt_int(value: Any) -> Optional[int]:
    """
    Read an integer ID, or return None.

    Booleans and floats with a fractional part are rejected rather than
    coerced; numeric strings are accepted.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _decode_impact(obj: Any) -> Optional[ViewImpact]:
    """
    Decode one view impact record, or return None if it is unusable.

    Accepted shapes: ``{"viewId": 3, "viewName": "..."}`` or a bare integer ID.
    """
    if isinstance(obj, dict):
        view_id = _opt_int(obj.get("viewId", obj.get("id")))
        if view_id is None:
            return None
        return ViewImpact(view_id=view_id, view_name=_opt_str(obj.get("viewName")))

    if isinstance(obj, int) and not isinstance(obj, bool):
        return ViewImpact(view_id=obj)

    return None


def decode_alarm(obj: Dict[str, Any]) -> Alarm:
    """
    Decode an alarm object into a domain :class:`~view_severity.domain.models.Alarm`.

    Null or non-list impact values are treated as empty, and null or malformed impact
    records are dropped.

    Parameters
    ----------
    obj
        JSON-decoded alarm dictionary.

    Returns
    -------
    Alarm
        Decoded alarm.
    """
    impacts_raw = obj.get("viewImpacts")
    if not isinstance(impacts_raw, list):
        impacts_raw = []
    impacts = []
    for item in impacts_raw:
        impact = _decode_impact(item)
        if impact is not None:
            impacts.append(impact)

    return Alarm(
        severity=str(obj.get("severity") or ""),
        view_impacts=tuple(impacts),
        alarm_id=_opt_str(obj.get("id")),
        element_name=_opt_str(obj.get("elementName")),
        parameter_name=_opt_str(obj.get("parameterName")),
        value=_opt_str(obj.get("value")),
    )


def decode_view(obj: Dict[str, Any]) -> View:
    """
    Decode a view object into a domain :class:`~view_severity.domain.models.View`.

    Raises
    ------
    KeyError
        If the object has no ``id``.
    ValueError
        If ``id`` is not an integer.
    """
    view_id = _opt_int(obj["id"])
    if view_id is None:
        raise ValueError(f"Invalid view id: {obj['id']!r}")
    return View(
        view_id=view_id,
        name=str(obj.get("name") or ""),
        parent_id=_opt_int(obj.get("parentId")),
    )


def _collection(payload: Any, key: str) -> Optional[List[Any]]:
    """
    Extract the raw list from a response body.

    Bodies may be a bare JSON list or an object holding the list under ``key``.
    Returns None when no list is present.
    """
    if isinstance(payload, dict):
        payload = payload.get(key)
    if isinstance(payload, list):
        return payload
    return None


def decode_alarms(payload: Any) -> Optional[List[Alarm]]:
    """
    Decode an active-alarms response body.

    Parameters
    ----------
    payload
        JSON-decoded response body.

    Returns
    -------
    list of Alarm or None
        Decoded alarms with null/non-object entries filtered out, or None if
        the body holds no alarm collection at all.
    """
    raw = _collection(payload, "alarms")
    if raw is None:
        return None

    return [decode_alarm(item) for item in raw if isinstance(item, dict)]


def decode_views(payload: Any) -> Optional[List[View]]:
    """
    Decode a views response body.

    Entries that are not objects are filtered out. Entries whose ID cannot be
    read are logged and skipped (best-effort decoding).

    Parameters
    ----------
    payload
        JSON-decoded response body.

    Returns
    -------
    list of View or None
        Decoded views, or None if the body holds no view collection at all.
    """
    raw = _collection(payload, "views")
    if raw is None:
        return None

    views: List[View] = []
    for item in raw:
        if not isinstance(item, dict):
            continue
        try:
            views.append(decode_view(item))
        except (KeyError, TypeError, ValueError):
            logger.warning("Skipping malformed view entry: %r", item)
    return views
