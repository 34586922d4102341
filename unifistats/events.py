"""Datadog events for UniFi alarms, anomalies, intrusion alerts and events."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any

from .points import clean_tags, tag_map_to_simple_strings, tag_map_to_tags
from .report import Item
from .unifi import IDS, Alarm, Anomaly, Event, IPGeo

_GRACE = timedelta(seconds=1)


def is_recent(when: datetime | None, interval: timedelta) -> bool:
    """Tell whether ``when`` falls within the last interval plus one second.

    A missing time counts as long ago.
    """
    if when is None:
        return False
    now = datetime.now(when.tzinfo) if when.tzinfo is not None else datetime.now()
    return now - when <= interval + _GRACE


def _geo_tags(prefix: str, geo: IPGeo) -> dict[str, str]:
    return {
        f"{prefix}_asn": str(geo.asn),
        f"{prefix}_latitude": f"{geo.latitude:.6f}",
        f"{prefix}_longitude": f"{geo.longitude:.6f}",
        f"{prefix}_city": geo.city,
        f"{prefix}_continent_code": geo.continent_code,
        f"{prefix}_country_code": geo.country_code,
        f"{prefix}_country_name": geo.country_name,
        f"{prefix}_organization": geo.organization,
    }


def _send(
    report: Any,
    title: str,
    when: datetime,
    message: str,
    tag_map: dict[str, str],
    *,
    warn: bool = True,
) -> None:
    tag_map = clean_tags(tag_map)
    report.report_event(title, when, message, tag_map_to_tags(tag_map))
    line = (
        f"[{int(when.timestamp())}] {title}: {message} - "
        f"{tag_map_to_simple_strings(tag_map)}"
    )
    if warn:
        report.report_warn_log(line)
    else:
        report.report_info_log(line)


def _threat_tags(notice: Alarm | IDS, port_key: str) -> dict[str, str]:
    return {
        port_key: str(notice.dest_port),
        "src_port": str(notice.src_port),
        "dest_ip": notice.dest_ip,
        "dst_mac": notice.dst_mac,
        "host": notice.host,
        "msg": notice.msg,
        "src_ip": notice.src_ip,
        "src_mac": notice.src_mac,
        **_geo_tags("dst_ip", notice.dest_ip_geo),
        **_geo_tags("src_ip", notice.source_ip_geo),
        "site_name": notice.site_name,
        "source": notice.source_name,
        "in_iface": notice.in_iface,
        "event_type": notice.event_type,
        "subsystem": notice.subsystem,
        "archived": notice.archived.txt,
        "usg_ip": notice.usg_ip,
        "proto": notice.proto,
        "key": notice.key,
        "catname": notice.catname,
        "app_proto": notice.app_proto,
        "action": notice.inner_alert_action,
    }


def batch_alarm(report: Any, alarm: Alarm, interval: timedelta) -> None:
    """Send a recent alarm as an event and a warning log line."""
    if not is_recent(alarm.datetime, interval):
        return

    tag_map = _threat_tags(alarm, "dst_port")
    report.add_count(Item.ALARM)
    title = (
        f"[{alarm.event_type}][{alarm.catname}] Alarm at "
        f"{alarm.site_name} from {alarm.source_name}"
    )
    _send(report, title, alarm.datetime, alarm.msg, tag_map)


def batch_anomaly(report: Any, anomaly: Anomaly, interval: timedelta) -> None:
    """Send a recent anomaly as an event and a warning log line."""
    if not is_recent(anomaly.datetime, interval):
        return

    report.add_count(Item.ANOMALY)
    tag_map = {
        "application": "unifi_anomaly",
        "source": anomaly.source_name,
        "site_name": anomaly.site_name,
        "device_mac": anomaly.device_mac,
    }
    title = f"Anomaly detected at {anomaly.site_name} from {anomaly.source_name}"
    _send(report, title, anomaly.datetime, anomaly.anomaly, tag_map)


def batch_ids(report: Any, ids: IDS, interval: timedelta) -> None:
    """Send a recent intrusion detection alert as an event and a warning log line."""
    if not is_recent(ids.datetime, interval):
        return

    tag_map = _threat_tags(ids, "dest_port")
    report.add_count(Item.IDS)
    title = f"Intrusion Detection at {ids.site_name} from {ids.source_name}"
    _send(report, title, ids.datetime, ids.msg, tag_map)


def batch_event(report: Any, event: Event, interval: timedelta) -> None:
    """Send a recent controller event as an event and an info log line."""
    if not is_recent(event.datetime, interval):
        return

    tag_map = {
        "guest": event.guest,
        "user": event.user,
        "host": event.host,
        "hostname": event.hostname,
        "dest_port": str(event.dest_port),
        "src_port": str(event.src_port),
        "dst_ip": event.dest_ip,
        "dst_mac": event.dst_mac,
        "ip": event.ip,
        "src_ip": event.src_ip,
        "src_mac": event.src_mac,
        **_geo_tags("dst_ip", event.dest_ip_geo),
        **_geo_tags("src_ip", event.source_ip_geo),
        "admin": event.admin,
        "site_name": event.site_name,
        "source": event.source_name,
        "ap_from": event.ap_from,
        "ap_to": event.ap_to,
        "ap": event.ap,
        "ap_name": event.ap_name,
        "gw": event.gw,
        "gw_name": event.gw_name,
        "sw": event.sw,
        "sw_name": event.sw_name,
        "catname": event.catname,
        "radio": event.radio,
        "radio_from": event.radio_from,
        "radio_to": event.radio_to,
        "key": event.key,
        "in_iface": event.in_iface,
        "event_type": event.event_type,
        "subsystem": event.subsystem,
        "ssid": event.ssid,
        "is_admin": event.is_admin.txt,
        "channel": event.channel.txt,
        "channel_from": event.channel_from.txt,
        "channel_to": event.channel_to.txt,
        "usg_ip": event.usg_ip,
        "network": event.network,
        "app_proto": event.app_proto,
        "proto": event.proto,
        "action": event.inner_alert_action,
    }

    report.add_count(Item.EVENT)
    title = f"Unifi Event at {event.site_name} from {event.source_name}"
    _send(report, title, event.datetime, event.msg, tag_map, warn=False)